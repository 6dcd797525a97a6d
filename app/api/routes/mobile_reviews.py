# app/api/routes/mobile_reviews.py
from fastapi import APIRouter, Depends, status
from typing import List, Optional

from app.api.deps import authenticated_body, get_review_service, require_identity
from app.schemas.review import ReviewResponse, ReviewSummary, ReviewWithOwner, ShopReviewCreate
from app.core.security import get_current_identity
from app.services.reviews import ReviewService

router = APIRouter(prefix="/api/mobile-reviews", tags=["mobile-reviews"])


# Owner: complete shop reviews only
@router.get("", response_model=List[ReviewWithOwner])
def list_my_shop_reviews(
    service: ReviewService = Depends(get_review_service),
    identity: Optional[str] = Depends(get_current_identity),
):
    return service.list_owner_shop_reviews(identity)


@router.post("", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
def create_shop_review(
    identity: str = Depends(require_identity),
    review_in: ShopReviewCreate = Depends(authenticated_body(ShopReviewCreate)),
    service: ReviewService = Depends(get_review_service),
):
    return service.create_shop_review(identity, review_in)


# Owner dashboard numbers, computed from the same list as GET ""
@router.get("/summary", response_model=ReviewSummary)
def my_review_summary(
    service: ReviewService = Depends(get_review_service),
    identity: Optional[str] = Depends(get_current_identity),
):
    return service.owner_summary(identity)
