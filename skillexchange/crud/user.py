from typing import Optional

from sqlalchemy.orm import Session

from skillexchange import models


def create_user(
    db: Session,
    *,
    username: str,
    password_hash: str,
    full_name: str,
    bio: Optional[str] = None,
    profile_image: Optional[str] = None,
) -> models.User:
    db_user = models.User(
        username=username,
        password_hash=password_hash,
        full_name=full_name,
        bio=bio,
        profile_image=profile_image,
    )
    db.add(db_user)
    db.flush()
    return db_user

def get_user(db: Session, user_id: int) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.id == user_id).first()

def get_user_by_username(db: Session, username: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.username == username).first()
