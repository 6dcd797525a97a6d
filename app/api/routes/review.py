# app/api/routes/review.py
from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional

from app.api.deps import authenticated_body, get_review_service, require_identity
from app.schemas.review import GenericReviewCreate, ReviewResponse, ReviewUpdate, ReviewWithOwner
from app.core.security import get_current_identity
from app.services.reviews import ReviewService

router = APIRouter(prefix="/api", tags=["reviews"])


# Public: complete reviews from every user
@router.get("/all-reviews", response_model=List[ReviewWithOwner])
def list_all_reviews(
    filter_by: str = Query("all", alias="filter"),
    sort_by: str = Query("newest", alias="sort"),
    service: ReviewService = Depends(get_review_service),
):
    return service.list_complete_reviews(filter_by=filter_by, sort_by=sort_by)


# Owner: every review, incomplete ones included
@router.get("/reviews", response_model=List[ReviewResponse])
def list_my_reviews(
    service: ReviewService = Depends(get_review_service),
    identity: Optional[str] = Depends(get_current_identity),
):
    return service.list_owner_reviews(identity)


@router.post("/reviews", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
def create_review(
    identity: str = Depends(require_identity),
    review_in: GenericReviewCreate = Depends(authenticated_body(GenericReviewCreate)),
    service: ReviewService = Depends(get_review_service),
):
    return service.create_generic_review(identity, review_in)


@router.patch("/reviews", response_model=ReviewResponse)
def update_review(
    identity: str = Depends(require_identity),
    update_in: ReviewUpdate = Depends(authenticated_body(ReviewUpdate)),
    service: ReviewService = Depends(get_review_service),
):
    return service.update_review(identity, update_in)
