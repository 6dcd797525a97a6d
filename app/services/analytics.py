# app/services/analytics.py
# Dashboard numbers derived from a list of complete reviews.
from collections import Counter
from typing import Iterable, List

from app.db.models.review import Review
from app.schemas.review import (
    ActivityPoint,
    NamedCount,
    QualityDistribution,
    ReviewSummary,
)

RECENT_ACTIVITY_DAYS = 7


def _named_counts(values: Iterable) -> List[NamedCount]:
    # Counter keeps first-seen order
    counts = Counter(v for v in values if v is not None)
    return [NamedCount(name=str(name), value=count) for name, count in counts.items()]


def _star_label(stars: int) -> str:
    return f"{stars} Star" if stars == 1 else f"{stars} Stars"


def summarize_reviews(reviews: List[Review]) -> ReviewSummary:
    total = len(reviews)
    if total == 0:
        return ReviewSummary(
            total_reviews=0,
            average_rating=0.0,
            recommendation_rate=0.0,
            product_type_distribution=[],
            quality_distribution=QualityDistribution(product=[], service=[]),
            star_distribution=[],
            recent_activity=[],
        )

    # missing stars count as 0
    average_rating = sum(r.stars or 0 for r in reviews) / total
    recommended = sum(1 for r in reviews if r.would_recommend)

    stars = Counter(r.stars for r in reviews if r.stars is not None)
    star_distribution = [
        NamedCount(name=_star_label(value), value=count) for value, count in stars.items()
    ]

    per_day = Counter(r.created_at.date().isoformat() for r in reviews if r.created_at)
    recent_days = sorted(per_day)[-RECENT_ACTIVITY_DAYS:]
    recent_activity = [ActivityPoint(date=day, count=per_day[day]) for day in recent_days]

    return ReviewSummary(
        total_reviews=total,
        average_rating=round(average_rating, 2),
        recommendation_rate=round(recommended / total * 100, 2),
        product_type_distribution=_named_counts(r.product_type for r in reviews),
        quality_distribution=QualityDistribution(
            product=_named_counts(r.product_quality for r in reviews),
            service=_named_counts(r.service_quality for r in reviews),
        ),
        star_distribution=star_distribution,
        recent_activity=recent_activity,
    )
