"""Pytest bootstrap for project imports and shared database fixtures."""

import os
from pathlib import Path
import sys

# Settings are read at import time; give them test values first.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("LOG_LEVEL", "WARNING")

# Ensure project root is on sys.path so `import skillexchange` works
PROJECT_ROOT = Path(__file__).resolve().parents[1]
project_root_str = str(PROJECT_ROOT)
if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from skillexchange.database import Base
from skillexchange.models.skill import Skill
from skillexchange.models.user import User


@pytest.fixture
def db_session():
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


def create_user(db, username: str = "alice", full_name: str = "Alice Example", average_rating=None) -> User:
    user = User(
        username=username,
        password_hash="hash",
        full_name=full_name,
        average_rating=average_rating,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def create_skill(
    db,
    owner: User,
    *,
    name: str = "Python",
    category: str = "programming",
    is_teaching: bool = True,
    average_rating=None,
) -> Skill:
    skill = Skill(
        user_id=owner.id,
        name=name,
        description=f"{name} lessons for every level",
        category=category,
        is_teaching=is_teaching,
        proficiency="advanced" if is_teaching else None,
        average_rating=average_rating,
    )
    db.add(skill)
    db.commit()
    db.refresh(skill)
    return skill


@pytest.fixture
def users(db_session):
    return {
        "alice": create_user(db_session, "alice", "Alice Example"),
        "bob": create_user(db_session, "bob", "Bob Example"),
        "carol": create_user(db_session, "carol", "Carol Example"),
    }
