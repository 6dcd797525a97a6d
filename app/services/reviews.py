# app/services/reviews.py
from typing import List, Optional

from sqlalchemy import and_, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from app.core.config import get_logger
from app.core.exceptions import AuthenticationError, NotFoundError, ValidationError
from app.db.base import store_errors
from app.db.models.review import Review
from app.db.models.user import User
from app.schemas.review import GenericReviewCreate, ReviewSummary, ReviewUpdate, ShopReviewCreate
from app.services.analytics import summarize_reviews
from app.services.validation import apply_review_update, validate_generic_review, validate_shop_review

logger = get_logger("app.reviews")

LISTING_FILTERS = ("all", "recommended", "highRating")
LISTING_SORTS = ("newest", "oldest", "highest", "lowest")
HIGH_RATING_MIN_STARS = 4


def complete_review_clause():
    # SQL form of Review.is_complete
    return and_(
        Review.product_type.isnot(None),
        Review.product_name.isnot(None),
        func.trim(Review.product_type) != "",
        func.trim(Review.product_name) != "",
    )


def newest_first():
    return (Review.created_at.desc(), Review.id.desc())


class ReviewService:
    """Review operations for one request.

    The session is passed in by the caller; nothing here keeps state
    between calls.
    """

    def __init__(self, db: Session):
        self.db = db

    # --- caller resolution ---

    @staticmethod
    def _require_identity(identity: Optional[str]) -> str:
        if not identity:
            raise AuthenticationError("Unauthorized")
        return identity

    def _load_owner(self, email: str) -> User:
        with store_errors(self.db, "load user", email=email):
            user = self.db.query(User).filter(User.email == email).first()
        if not user:
            raise NotFoundError("User not found")
        return user

    def _save(self, review: Review, operation: str) -> Review:
        with store_errors(self.db, operation, user_id=review.user_id, review_id=review.id):
            self.db.add(review)
            self.db.commit()
            self.db.refresh(review)
        return review

    # --- reads ---

    def list_complete_reviews(self, filter_by: str = "all", sort_by: str = "newest") -> List[Review]:
        """Every complete review across all owners, with the owner loaded."""
        if filter_by not in LISTING_FILTERS:
            raise ValidationError(f"Unknown filter '{filter_by}'")
        if sort_by not in LISTING_SORTS:
            raise ValidationError(f"Unknown sort '{sort_by}'")

        with store_errors(self.db, "list all reviews", filter=filter_by, sort=sort_by):
            return self._complete_query(filter_by, sort_by).all()

    def _complete_query(self, filter_by: str, sort_by: str):
        query = (
            self.db.query(Review)
            .options(joinedload(Review.user))
            .filter(complete_review_clause())
        )
        if filter_by == "recommended":
            query = query.filter(Review.would_recommend.is_(True))
        elif filter_by == "highRating":
            query = query.filter(Review.stars >= HIGH_RATING_MIN_STARS)

        stars = func.coalesce(Review.stars, 0)
        if sort_by == "oldest":
            query = query.order_by(Review.created_at.asc(), Review.id.asc())
        elif sort_by == "highest":
            query = query.order_by(stars.desc(), *newest_first())
        elif sort_by == "lowest":
            query = query.order_by(stars.asc(), *newest_first())
        else:
            query = query.order_by(*newest_first())

        return query

    def list_owner_reviews(self, identity: Optional[str]) -> List[Review]:
        """All of the caller's reviews, incomplete legacy rows included."""
        owner = self._load_owner(self._require_identity(identity))
        with store_errors(self.db, "list own reviews", user_id=owner.id):
            return (
                self.db.query(Review)
                .filter(Review.user_id == owner.id)
                .order_by(*newest_first())
                .all()
            )

    def _fetch_owned(self, user_id: int, complete_only: bool) -> List[Review]:
        query = (
            self.db.query(Review)
            .options(joinedload(Review.user))
            .filter(Review.user_id == user_id)
        )
        if complete_only:
            query = query.filter(complete_review_clause())
        return query.order_by(*newest_first()).all()

    def list_owner_shop_reviews(self, identity: Optional[str]) -> List[Review]:
        """The caller's complete reviews.

        Step one filters in SQL. If that query fails, step two loads all of
        the caller's reviews and applies `Review.is_complete` in Python. A
        failure in step two is a StoreError.
        """
        owner = self._load_owner(self._require_identity(identity))

        try:
            return self._fetch_owned(owner.id, complete_only=True)
        except SQLAlchemyError:
            self.db.rollback()
            logger.warning(
                "filtered shop review query failed for user_id=%s, retrying unfiltered",
                owner.id,
                exc_info=True,
            )

        with store_errors(self.db, "list shop reviews (unfiltered)", user_id=owner.id):
            reviews = self._fetch_owned(owner.id, complete_only=False)
        return [r for r in reviews if r.is_complete]

    def owner_summary(self, identity: Optional[str]) -> ReviewSummary:
        return summarize_reviews(self.list_owner_shop_reviews(identity))

    # --- writes ---

    def create_generic_review(self, identity: Optional[str], payload: GenericReviewCreate) -> Review:
        email = self._require_identity(identity)
        fields = validate_generic_review(payload)
        owner = self._load_owner(email)

        review = self._save(Review(user_id=owner.id, **fields), "create review")
        logger.info("review %s created by user_id=%s", review.id, owner.id)
        return review

    def create_shop_review(self, identity: Optional[str], payload: ShopReviewCreate) -> Review:
        email = self._require_identity(identity)
        fields = validate_shop_review(payload)
        owner = self._load_owner(email)

        review = self._save(Review(user_id=owner.id, **fields), "create shop review")
        logger.info("shop review %s created by user_id=%s", review.id, owner.id)
        return review

    def update_review(self, identity: Optional[str], update_in: ReviewUpdate) -> Review:
        email = self._require_identity(identity)
        if not update_in.id:
            raise ValidationError("Review ID is required")
        owner = self._load_owner(email)

        # ownership is part of the lookup: someone else's review reads as missing
        with store_errors(self.db, "load review", user_id=owner.id, review_id=update_in.id):
            review = (
                self.db.query(Review)
                .filter(Review.id == update_in.id, Review.user_id == owner.id)
                .first()
            )
        if not review:
            raise NotFoundError("Review not found")

        changes = update_in.model_dump(exclude_unset=True, exclude={"id"})
        applied = apply_review_update(review, changes)
        review = self._save(review, "update review")
        logger.info("review %s updated (%s)", review.id, ", ".join(applied) or "no fields")
        return review
