# app/api/deps.py
from typing import Optional, Type

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from app.core.exceptions import AuthenticationError, ValidationError
from app.core.security import get_current_identity
from app.db.base import get_db
from app.services.reviews import ReviewService


def get_review_service(db: Session = Depends(get_db)) -> ReviewService:
    return ReviewService(db)


def require_identity(identity: Optional[str] = Depends(get_current_identity)) -> str:
    if not identity:
        raise AuthenticationError("Unauthorized")
    return identity


def authenticated_body(model: Type[BaseModel]):
    """Dependency that parses the JSON body into `model` after the caller is resolved.

    FastAPI decodes plain body parameters before any dependency runs.
    """

    async def parse(request: Request, identity: str = Depends(require_identity)):
        try:
            payload = await request.json()
        except ValueError:
            raise ValidationError("Invalid JSON")
        try:
            return model.model_validate(payload)
        except PydanticValidationError as exc:
            raise RequestValidationError(exc.errors())

    return parse
