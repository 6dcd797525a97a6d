# app/services/validation.py
"""Submission and update rules for reviews.

Everything here is pure: functions take request schemas (or a loaded
Review) and either raise ValidationError or return plain values. Nothing
touches the session.
"""
import math
from numbers import Real
from datetime import datetime

from app.core.exceptions import ValidationError
from app.db.models.review import QUALITY_LEVELS, Review
from app.schemas.review import INT_COLUMN_MAX, INT_COLUMN_MIN, GenericReviewCreate, ShopReviewCreate

DEFAULT_SHOP_STARS = 5
MIN_STARS = 1
MAX_STARS = 5

UPDATABLE_TEXT_FIELDS = ("product_name", "description", "bought_from")


def _is_blank(value) -> bool:
    return not isinstance(value, str) or value.strip() == ""


def _require_text(value, message: str) -> str:
    if _is_blank(value):
        raise ValidationError(message)
    return value.strip()


def _require_quality(value, label: str) -> str:
    if _is_blank(value):
        raise ValidationError(f"{label} rating is required")
    value = value.strip()
    if value not in QUALITY_LEVELS:
        raise ValidationError(f"{label} must be one of {', '.join(QUALITY_LEVELS)}")
    return value


def _strip_optional(value):
    return value.strip() if isinstance(value, str) else value


def validate_generic_review(payload: GenericReviewCreate) -> dict:
    """Column values for a generic review, or ValidationError.

    Only product name and description are checked. `stars` is stored as
    given, with no range check.
    """
    product_name = _require_text(payload.product_name, "Product name is required")
    description = _require_text(payload.description, "Description is required")
    return {
        "product_name": product_name,
        "description": description,
        "bought_from": payload.bought_from,
        "stars": payload.stars,
        "images": payload.images,
    }


def validate_shop_review(payload: ShopReviewCreate) -> dict:
    """Column values for a shop review, or ValidationError.

    Checks run in a fixed order and the first failure wins: product type,
    product name, product quality, service quality, recommendation, then
    the stars range.
    """
    product_type = _require_text(payload.product_type, "Product type is required")
    product_name = _require_text(payload.product_name, "Product name is required")
    product_quality = _require_quality(payload.product_quality, "Product quality")
    service_quality = _require_quality(payload.service_quality, "Service quality")
    if payload.would_recommend is None:
        raise ValidationError("Recommendation is required")

    # only a missing value falls back to the default; an explicit 0 is rejected below
    stars = DEFAULT_SHOP_STARS if payload.stars is None else payload.stars
    if not MIN_STARS <= stars <= MAX_STARS:
        raise ValidationError(f"Stars must be between {MIN_STARS} and {MAX_STARS}")

    return {
        "product_type": product_type,
        "product_name": product_name,
        "customer_name": _strip_optional(payload.customer_name),
        "mobile_number": _strip_optional(payload.mobile_number),
        "description": _strip_optional(payload.description),
        "stars": stars,
        "product_quality": product_quality,
        "service_quality": service_quality,
        "would_recommend": payload.would_recommend,
        "image_url": payload.image_url,
        "bought_from_url": payload.bought_from_url,
    }


def _column_stars(value):
    """`value` as an integer fit for the stars column, or None when it is not a usable number."""
    if not isinstance(value, Real) or isinstance(value, bool):
        return None
    # NaN and Infinity are valid JSON to the request parser
    if isinstance(value, float) and not math.isfinite(value):
        return None
    stars = int(round(value))
    if not INT_COLUMN_MIN <= stars <= INT_COLUMN_MAX:
        return None
    return stars


def apply_review_update(review: Review, changes: dict) -> list:
    """Patch `review` in place with the recognised entries of `changes`.

    Keys that are missing, blank, or of the wrong shape are skipped, never
    nulled. Shop-only columns cannot be changed here. Returns the names of
    the columns that were written.
    """
    applied = []
    for field in UPDATABLE_TEXT_FIELDS:
        value = changes.get(field)
        if not _is_blank(value):
            setattr(review, field, value.strip())
            applied.append(field)

    stars = _column_stars(changes.get("stars"))
    if stars is not None:
        review.stars = stars
        applied.append("stars")

    images = changes.get("images")
    if isinstance(images, list) and all(isinstance(i, str) for i in images):
        review.images = list(images)
        applied.append("images")

    review.updated_at = datetime.utcnow()
    return applied
