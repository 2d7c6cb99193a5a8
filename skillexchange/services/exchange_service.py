# skillexchange/services/exchange_service.py
"""
Exchange Service Layer
Teacher/student pairings, status changes and rating propagation
"""

import logging
from typing import Dict, List

from sqlalchemy.orm import Session

from skillexchange.crud import exchange as exchange_crud
from skillexchange.crud import skill as skill_crud
from skillexchange.crud import user as user_crud
from skillexchange.database import commit_or_raise
from skillexchange.errors import AuthorizationError, NotFoundError, ValidationError
from skillexchange.models.exchange import SkillExchange
from skillexchange.models.user import User
from skillexchange.schemas.exchange import ExchangeUpdate
from skillexchange.utils.clock import utcnow
from skillexchange.utils.scoring import round_half_up_ratio

logger = logging.getLogger(__name__)


STATUS_PENDING = "pending"
STATUS_ACTIVE = "active"
STATUS_COMPLETED = "completed"

# Status only moves forward; staying put is allowed.
ALLOWED_STATUS_TRANSITIONS = {
    STATUS_PENDING: {STATUS_PENDING, STATUS_ACTIVE, STATUS_COMPLETED},
    STATUS_ACTIVE: {STATUS_ACTIVE, STATUS_COMPLETED},
    STATUS_COMPLETED: {STATUS_COMPLETED},
}

MIN_RATING = 1
MAX_RATING = 5


# ======================
# RATINGS
# ======================

def next_running_rating(current, rating: int) -> int:
    """
    Two-point running average: round((current + rating) / 2).

    This is not a mean over the whole rating history; every new rating
    weighs as much as everything before it.
    """
    if current is None:
        return rating
    return round_half_up_ratio(current + rating, 2)


def update_user_rating(db: Session, user_id: int, rating: int) -> User:
    """Fold one rating into the user's running average (flushes, no commit)."""
    user = user_crud.get_user(db, user_id)
    if not user:
        raise NotFoundError("User not found")
    previous = user.average_rating
    user.average_rating = next_running_rating(previous, rating)
    db.flush()
    logger.info("User %s rating %s -> %s (new rating %s)", user_id, previous, user.average_rating, rating)
    return user


# ======================
# EXCHANGES
# ======================

def request_exchange(
    db: Session,
    caller_id: int,
    student_id: int,
    teacher_id: int,
    teacher_skill_id: int,
) -> SkillExchange:
    """
    Ask a teacher for an exchange over one of their teaching skills.

    Args:
        db: Database session
        caller_id: Authenticated user ID; must be the student
        student_id: Student user ID
        teacher_id: Teacher user ID
        teacher_skill_id: Teaching skill the exchange is about

    Returns:
        New exchange with status "pending"
    """
    if caller_id != student_id:
        logger.warning("User %s tried to create an exchange for student %s", caller_id, student_id)
        raise AuthorizationError("You can only create exchanges as a student")
    if student_id == teacher_id:
        raise ValidationError("Cannot request an exchange with yourself", {"teacher_id": "Choose another teacher"})

    if not user_crud.get_user(db, teacher_id):
        raise NotFoundError("Teacher not found")
    skill = skill_crud.get_skill(db, teacher_skill_id)
    if not skill:
        raise NotFoundError("Skill not found")

    errors: Dict[str, str] = {}
    if skill.user_id != teacher_id:
        errors["teacher_skill_id"] = "Skill does not belong to this teacher"
    elif not skill.is_teaching:
        errors["teacher_skill_id"] = "Skill is not offered for teaching"
    if errors:
        raise ValidationError("Invalid exchange request", errors)

    exchange = exchange_crud.create_exchange(
        db,
        teacher_id=teacher_id,
        student_id=student_id,
        teacher_skill_id=teacher_skill_id,
    )
    commit_or_raise(db, "create exchange")
    db.refresh(exchange)

    logger.info("Exchange %s requested by student %s with teacher %s", exchange.id, student_id, teacher_id)
    return exchange


def list_user_exchanges(db: Session, caller_id: int) -> List[SkillExchange]:
    return exchange_crud.get_exchanges_by_user(db, caller_id)


def _validate_rating(field: str, value: int, errors: Dict[str, str]) -> None:
    if not (MIN_RATING <= value <= MAX_RATING):
        errors[field] = f"Rating must be between {MIN_RATING} and {MAX_RATING}"


def update_exchange(
    db: Session,
    exchange_id: int,
    caller_id: int,
    patch: ExchangeUpdate,
) -> SkillExchange:
    """
    Change an exchange's status or ratings.

    Each rating field is written by the role it is named after and is
    folded into that same user's running average: student_rating goes to
    the user in student_id, teacher_rating to the user in teacher_id. A
    rating of 0 counts as not provided.

    Raises:
        NotFoundError: If the exchange does not exist
        AuthorizationError: If the caller is not a participant, or writes
            the other role's rating field
        ValidationError: On an out-of-range rating or a backwards status
    """
    exchange = exchange_crud.get_exchange(db, exchange_id)
    if not exchange:
        raise NotFoundError("Exchange not found")
    if caller_id not in (exchange.teacher_id, exchange.student_id):
        logger.warning("User %s tried to update exchange %s", caller_id, exchange_id)
        raise AuthorizationError("Not authorized to update this exchange")

    changes = patch.model_dump(exclude_unset=True, exclude_none=True)
    for field in ("student_rating", "teacher_rating"):
        if changes.get(field) == 0:
            changes.pop(field)

    if changes.get("student_rating") and caller_id != exchange.student_id:
        raise AuthorizationError("Only students can provide student ratings")
    if changes.get("teacher_rating") and caller_id != exchange.teacher_id:
        raise AuthorizationError("Only teachers can provide teacher ratings")

    errors: Dict[str, str] = {}
    for field in ("student_rating", "teacher_rating"):
        if field in changes:
            _validate_rating(field, changes[field], errors)
    if "status" in changes:
        new_status = changes["status"]
        if new_status not in ALLOWED_STATUS_TRANSITIONS:
            errors["status"] = "Status must be one of: pending, active, completed"
        elif new_status not in ALLOWED_STATUS_TRANSITIONS[exchange.status]:
            errors["status"] = f"Cannot move exchange from {exchange.status} to {new_status}"
    if errors:
        raise ValidationError("Invalid exchange update", errors)

    previous_status = exchange.status
    previous_student_rating = exchange.student_rating
    previous_teacher_rating = exchange.teacher_rating

    for field, value in changes.items():
        setattr(exchange, field, value)
    exchange.updated_at = utcnow()

    # Each changed rating goes to the user the field is named after.
    new_student_rating = changes.get("student_rating")
    if new_student_rating and new_student_rating != previous_student_rating:
        update_user_rating(db, exchange.student_id, new_student_rating)
    new_teacher_rating = changes.get("teacher_rating")
    if new_teacher_rating and new_teacher_rating != previous_teacher_rating:
        update_user_rating(db, exchange.teacher_id, new_teacher_rating)

    commit_or_raise(db, "update exchange")
    db.refresh(exchange)

    if exchange.status != previous_status:
        logger.info("Exchange %s moved from %s to %s", exchange.id, previous_status, exchange.status)
    return exchange
