# app/services/users.py
from sqlalchemy.orm import Session

from app.core.config import get_logger
from app.core.exceptions import ValidationError
from app.core.security import hash_password
from app.db.base import store_errors
from app.db.models.user import User
from app.schemas.user import UserCreate

logger = get_logger("app.users")


def register_user(db: Session, user_in: UserCreate) -> User:
    if not user_in.email or not user_in.password:
        raise ValidationError("Email and password are required")

    with store_errors(db, "signup lookup", email=user_in.email):
        existing = db.query(User).filter(User.email == user_in.email).first()
    if existing:
        raise ValidationError("User already exists")

    new_user = User(
        email=user_in.email,
        name=user_in.name,
        password_hash=hash_password(user_in.password),
    )
    with store_errors(db, "signup", email=user_in.email):
        db.add(new_user)
        db.commit()
        db.refresh(new_user)

    logger.info("user %s signed up", new_user.id)
    return new_user
