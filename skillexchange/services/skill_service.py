# skillexchange/services/skill_service.py
"""
Skill Service Layer
Teaching and learning skill validation, ownership checks and lifecycle
"""

import logging
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from skillexchange.crud import skill as skill_crud
from skillexchange.database import commit_or_raise
from skillexchange.errors import AuthorizationError, NotFoundError, ValidationError
from skillexchange.models.skill import PROFICIENCY_LEVELS, SKILL_CATEGORIES, Skill
from skillexchange.schemas.skill import SkillCreate, SkillUpdate

logger = logging.getLogger(__name__)

NAME_MIN_LENGTH = 3
DESCRIPTION_MIN_LENGTH = 10


def _clean_fields(data: dict) -> dict:
    cleaned = dict(data)
    for key in ("name", "description", "icon"):
        if isinstance(cleaned.get(key), str):
            cleaned[key] = cleaned[key].strip()
    for key in ("category", "proficiency"):
        if isinstance(cleaned.get(key), str):
            cleaned[key] = cleaned[key].strip().lower() or None
    return cleaned


def validate_skill_fields(data: dict) -> Dict[str, str]:
    """Field errors for whichever skill fields are present in ``data``."""
    errors: Dict[str, str] = {}
    if "name" in data and len(data["name"] or "") < NAME_MIN_LENGTH:
        errors["name"] = f"Skill name must be at least {NAME_MIN_LENGTH} characters"
    if "description" in data and len(data["description"] or "") < DESCRIPTION_MIN_LENGTH:
        errors["description"] = f"Description must be at least {DESCRIPTION_MIN_LENGTH} characters"
    if "category" in data and data["category"] not in SKILL_CATEGORIES:
        errors["category"] = "Please select a valid category"
    if data.get("proficiency") is not None and data["proficiency"] not in PROFICIENCY_LEVELS:
        errors["proficiency"] = "Please select a valid proficiency level"
    return errors


def _get_owned_skill(db: Session, skill_id: int, caller_id: int, action: str) -> Skill:
    skill = skill_crud.get_skill(db, skill_id)
    if not skill:
        raise NotFoundError("Skill not found")
    if skill.user_id != caller_id:
        logger.warning("User %s tried to %s skill %s owned by %s", caller_id, action, skill_id, skill.user_id)
        raise AuthorizationError(f"Not authorized to {action} this skill")
    return skill


def list_all_skills(db: Session) -> List[Skill]:
    return skill_crud.get_all_skills(db)


def list_user_skills(db: Session, caller_id: int, is_teaching: Optional[bool] = None) -> List[Skill]:
    return skill_crud.get_skills_by_user(db, caller_id, is_teaching)


def get_skill(db: Session, skill_id: int) -> Skill:
    skill = skill_crud.get_skill(db, skill_id)
    if not skill:
        raise NotFoundError("Skill not found")
    return skill


def create_skill(db: Session, caller_id: int, data: SkillCreate) -> Skill:
    fields = _clean_fields(data.model_dump())
    errors = validate_skill_fields(fields)
    if errors:
        raise ValidationError("Invalid skill", errors)
    if not fields["is_teaching"]:
        # Proficiency only describes what a teacher offers.
        fields["proficiency"] = None

    skill = skill_crud.create_skill(db, user_id=caller_id, **fields)
    commit_or_raise(db, "create skill")
    db.refresh(skill)

    logger.info("Skill %s created by user %s (teaching=%s)", skill.id, caller_id, skill.is_teaching)
    return skill


def update_skill(db: Session, skill_id: int, caller_id: int, patch: SkillUpdate) -> Skill:
    skill = _get_owned_skill(db, skill_id, caller_id, "update")

    changes = _clean_fields(patch.model_dump(exclude_unset=True))
    errors = validate_skill_fields(changes)
    if "is_teaching" in changes and changes["is_teaching"] != skill.is_teaching:
        errors["is_teaching"] = "A skill cannot switch between teaching and learning"
    for required in ("name", "description", "category"):
        if required in changes and changes[required] is None:
            errors[required] = "This field cannot be empty"
    if errors:
        raise ValidationError("Invalid skill update", errors)
    changes.pop("is_teaching", None)

    skill_crud.update_skill(db, skill, changes)
    commit_or_raise(db, "update skill")
    db.refresh(skill)
    return skill


def delete_skill(db: Session, skill_id: int, caller_id: int) -> None:
    skill = _get_owned_skill(db, skill_id, caller_id, "delete")
    if skill_crud.count_exchanges_for_skill(db, skill_id) > 0:
        raise ValidationError(
            "Skill is used by an exchange",
            {"skill_id": "Skills with exchanges cannot be deleted"},
        )

    skill_crud.delete_skill(db, skill)
    commit_or_raise(db, "delete skill")
    logger.info("Skill %s deleted by user %s", skill_id, caller_id)
