from typing import List, Optional

from sqlalchemy.orm import Session

from skillexchange import models


# ============================
# SKILL TABLE
# ============================

def create_skill(db: Session, user_id: int, **fields) -> models.Skill:
    new_skill = models.Skill(user_id=user_id, **fields)
    db.add(new_skill)
    db.flush()
    return new_skill


def get_skill(db: Session, skill_id: int) -> Optional[models.Skill]:
    return db.query(models.Skill).filter(models.Skill.id == skill_id).first()


def get_all_skills(db: Session) -> List[models.Skill]:
    return db.query(models.Skill).order_by(models.Skill.id.asc()).all()


def get_skills_by_user(
    db: Session,
    user_id: int,
    is_teaching: Optional[bool] = None,
) -> List[models.Skill]:
    query = db.query(models.Skill).filter(models.Skill.user_id == user_id)
    if is_teaching is not None:
        query = query.filter(models.Skill.is_teaching.is_(is_teaching))
    return query.order_by(models.Skill.id.asc()).all()


def update_skill(db: Session, skill: models.Skill, changes: dict) -> models.Skill:
    for key, value in changes.items():
        setattr(skill, key, value)
    db.flush()
    return skill


def delete_skill(db: Session, skill: models.Skill) -> None:
    db.delete(skill)
    db.flush()


def count_exchanges_for_skill(db: Session, skill_id: int) -> int:
    return db.query(models.SkillExchange).filter(
        models.SkillExchange.teacher_skill_id == skill_id
    ).count()
