# app/schemas/review.py
from pydantic import BaseModel, conint
from pydantic.alias_generators import to_camel
from typing import Any, List, Optional
from datetime import datetime

# integer columns are 32-bit on the stores we run against
INT_COLUMN_MIN = -(2 ** 31)
INT_COLUMN_MAX = 2 ** 31 - 1
ColumnInt = conint(ge=INT_COLUMN_MIN, le=INT_COLUMN_MAX)


class CamelModel(BaseModel):
    # snake_case in Python, camelCase on the wire
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


# --- CREATE ---
# Required fields are Optional here; app.services.validation checks presence
# and emptiness so each failure gets its own message.
class GenericReviewCreate(CamelModel):
    product_name: Optional[str] = None
    description: Optional[str] = None
    bought_from: Optional[str] = None
    stars: Optional[ColumnInt] = None
    images: Optional[List[str]] = None


class ShopReviewCreate(CamelModel):
    product_type: Optional[str] = None
    product_name: Optional[str] = None
    customer_name: Optional[str] = None
    mobile_number: Optional[str] = None
    description: Optional[str] = None
    stars: Optional[ColumnInt] = None
    product_quality: Optional[str] = None
    service_quality: Optional[str] = None
    would_recommend: Optional[bool] = None
    image_url: Optional[str] = None
    bought_from_url: Optional[str] = None


# --- UPDATE (owner) ---
class ReviewUpdate(CamelModel):
    id: Optional[ColumnInt] = None
    product_name: Optional[str] = None
    description: Optional[str] = None
    bought_from: Optional[str] = None
    # loosely typed; the update policy ignores non-numeric stars / non-list images
    stars: Optional[Any] = None
    images: Optional[Any] = None


# --- RESPONSE ---
class ReviewOwner(CamelModel):
    id: int
    name: Optional[str] = None
    email: str


class ReviewResponse(CamelModel):
    id: int
    user_id: int
    product_name: Optional[str] = None
    product_type: Optional[str] = None
    description: Optional[str] = None
    bought_from: Optional[str] = None
    customer_name: Optional[str] = None
    mobile_number: Optional[str] = None
    product_quality: Optional[str] = None
    service_quality: Optional[str] = None
    would_recommend: Optional[bool] = None
    stars: Optional[ColumnInt] = None
    images: Optional[List[str]] = None
    image_url: Optional[str] = None
    bought_from_url: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class ReviewWithOwner(ReviewResponse):
    user: ReviewOwner


# --- DASHBOARD ---
class NamedCount(CamelModel):
    name: str
    value: int


class ActivityPoint(CamelModel):
    date: str
    count: int


class QualityDistribution(CamelModel):
    product: List[NamedCount]
    service: List[NamedCount]


class ReviewSummary(CamelModel):
    total_reviews: int
    average_rating: float
    recommendation_rate: float
    product_type_distribution: List[NamedCount]
    quality_distribution: QualityDistribution
    star_distribution: List[NamedCount]
    recent_activity: List[ActivityPoint]
