# app/db/models/review.py
from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from datetime import datetime
from app.db.base import Base

QUALITY_LEVELS = ("Excellent", "Good", "Average", "Poor")


class Review(Base):
    """One table for both generic and shop reviews.

    Generic submissions leave the shop columns (product_type, qualities,
    would_recommend, ...) null. `is_complete` is the predicate used by the
    public and shop listings.
    """
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    product_name = Column(String, nullable=True)
    product_type = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    bought_from = Column(String, nullable=True)

    customer_name = Column(String, nullable=True)
    mobile_number = Column(String, nullable=True)
    product_quality = Column(String, nullable=True)   # one of QUALITY_LEVELS
    service_quality = Column(String, nullable=True)   # one of QUALITY_LEVELS
    would_recommend = Column(Boolean, nullable=True)

    stars = Column(Integer, nullable=True)
    images = Column(JSON, nullable=True)
    image_url = Column(String, nullable=True)
    bought_from_url = Column(String, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="reviews")

    @property
    def is_complete(self) -> bool:
        return (
            isinstance(self.product_type, str)
            and isinstance(self.product_name, str)
            and self.product_type.strip() != ""
            and self.product_name.strip() != ""
        )
