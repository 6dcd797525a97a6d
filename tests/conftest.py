"""Shared fixtures: an isolated in-memory database per test and an API client bound to it."""
import os

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.security import create_access_token, hash_password
from app.db.base import Base, get_db
from app.db.models.review import Review
from app.db.models.user import User
from app.main import app


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session):
    def _make(email="alice@example.com", name="Alice", password="secret123"):
        user = User(email=email, name=name, password_hash=hash_password(password))
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make


@pytest.fixture
def make_review(db_session):
    """Insert a review row directly, bypassing validation (for legacy/incomplete rows)."""

    def _make(user, created_at=None, **fields):
        review = Review(user_id=user.id, **fields)
        if created_at is not None:
            review.created_at = created_at
        db_session.add(review)
        db_session.commit()
        db_session.refresh(review)
        return review

    return _make


@pytest.fixture
def auth_headers():
    def _headers(email):
        token = create_access_token({"sub": email})
        return {"Authorization": f"Bearer {token}"}

    return _headers

