# app/db/base.py
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from app.core.config import get_logger, settings
from app.core.exceptions import StoreError

logger = get_logger("app.db")

connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}

engine = create_engine(settings.database_url, connect_args=connect_args, pool_pre_ping=True)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def store_errors(db, operation: str, **context):
    """Roll back and re-raise store failures as StoreError, logging the context."""
    try:
        yield
    except SQLAlchemyError:
        db.rollback()
        details = ", ".join(f"{k}={v}" for k, v in context.items())
        logger.exception("store failure during %s (%s)", operation, details)
        raise StoreError()
