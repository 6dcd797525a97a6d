from pydantic import BaseModel, EmailStr
from typing import Optional
from datetime import datetime

from app.schemas.review import CamelModel


class UserCreate(BaseModel):
    name: Optional[str] = None
    # checked in app.services.users so a missing value is a 400, not a 422
    email: Optional[EmailStr] = None
    password: Optional[str] = None


class UserLogin(BaseModel):
    email: str
    password: str


class UserResponse(CamelModel):
    id: int
    email: EmailStr
    name: Optional[str] = None
    created_at: Optional[datetime] = None


class SignupResponse(BaseModel):
    user: UserResponse


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
