# skillexchange/database.py - Database Configuration
import logging

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker
from skillexchange.config import settings
from skillexchange.errors import InternalError

logger = logging.getLogger(__name__)

# Database URL loaded from .env via skillexchange/config.py
DATABASE_URL = settings.DATABASE_URL

def _create_engine(url: str):
    if str(url).startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url)


engine = _create_engine(DATABASE_URL)

# Session maker
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()

# Dependency to get database session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def commit_or_raise(db, action: str) -> None:
    """Commit the unit of work, or roll it back and surface InternalError."""
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Database commit failed while trying to %s", action)
        raise InternalError(f"Failed to {action}") from exc
