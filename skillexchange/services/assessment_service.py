# skillexchange/services/assessment_service.py
"""
Assessment Service Layer
Four-step skill verification: progress tracking, score capture and completion
"""

import enum
import logging
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from skillexchange.crud import assessment as assessment_crud
from skillexchange.crud import skill as skill_crud
from skillexchange.database import commit_or_raise
from skillexchange.errors import AuthorizationError, NotFoundError, ValidationError
from skillexchange.models.assessment import SkillAssessment
from skillexchange.schemas.assessment import AssessmentUpdate
from skillexchange.utils.clock import utcnow
from skillexchange.utils.scoring import average_score

logger = logging.getLogger(__name__)


STATUS_PENDING = "pending"
STATUS_IN_PROGRESS = "in_progress"
STATUS_COMPLETED = "completed"
VALID_STATUSES = (STATUS_PENDING, STATUS_IN_PROGRESS, STATUS_COMPLETED)

MIN_SCORE = 0
MAX_SCORE = 100


class AssessmentStep(enum.IntEnum):
    KNOWLEDGE_TEST = 1
    PRACTICAL_EXERCISE = 2
    TEACHING_SAMPLE = 3
    REVIEW = 4

    @property
    def title(self) -> str:
        return STEP_TITLES[self]

    @property
    def score_field(self) -> Optional[str]:
        """Score column this step fills in; the review step has none."""
        return STEP_SCORE_FIELDS.get(self)

    def next_step(self) -> "AssessmentStep":
        if self is AssessmentStep.REVIEW:
            return self
        return AssessmentStep(self.value + 1)


STEP_TITLES = {
    AssessmentStep.KNOWLEDGE_TEST: "Knowledge Test",
    AssessmentStep.PRACTICAL_EXERCISE: "Practical Exercise",
    AssessmentStep.TEACHING_SAMPLE: "Teaching Sample",
    AssessmentStep.REVIEW: "Review",
}

STEP_SCORE_FIELDS = {
    AssessmentStep.KNOWLEDGE_TEST: "knowledge_score",
    AssessmentStep.PRACTICAL_EXERCISE: "practical_score",
    AssessmentStep.TEACHING_SAMPLE: "teaching_score",
}

SCORE_FIELDS = tuple(STEP_SCORE_FIELDS.values())


# ======================
# HELPERS
# ======================

def _validate_score(field: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("Invalid score", {field: "Score must be an integer"})
    if not (MIN_SCORE <= value <= MAX_SCORE):
        raise ValidationError(
            "Invalid score",
            {field: f"Score must be between {MIN_SCORE} and {MAX_SCORE}"},
        )


def _get_owned_assessment(db: Session, assessment_id: int, caller_id: int) -> SkillAssessment:
    assessment = assessment_crud.get_assessment(db, assessment_id)
    if not assessment:
        raise NotFoundError("Assessment not found")
    if assessment.user_id != caller_id:
        logger.warning(
            "User %s denied access to assessment %s owned by %s",
            caller_id,
            assessment_id,
            assessment.user_id,
        )
        raise AuthorizationError("Not authorized to access this assessment")
    return assessment


def _scores(assessment: SkillAssessment) -> List[Optional[int]]:
    return [getattr(assessment, field) for field in SCORE_FIELDS]


def _derive_overall_score(assessment: SkillAssessment) -> None:
    overall = average_score(*_scores(assessment))
    if overall is not None:
        assessment.overall_score = overall


def _check_can_complete(assessment: SkillAssessment) -> None:
    errors: Dict[str, str] = {}
    if assessment.current_step != AssessmentStep.REVIEW:
        errors["current_step"] = "Assessment must be at the review step to complete"
    for field in SCORE_FIELDS:
        if getattr(assessment, field) is None:
            errors[field] = "Score is required before completing"
    if errors:
        raise ValidationError("Assessment is not ready to be completed", errors)


def _mark_completed(assessment: SkillAssessment) -> None:
    assessment.overall_score = average_score(*_scores(assessment))
    assessment.status = STATUS_COMPLETED
    if assessment.completed_at is None:
        assessment.completed_at = utcnow()


def current_step(assessment: SkillAssessment) -> AssessmentStep:
    return AssessmentStep(assessment.current_step)


def is_active(assessment: SkillAssessment) -> bool:
    return assessment.status != STATUS_COMPLETED


def serialize_assessment(assessment: SkillAssessment) -> dict:
    return {
        "id": assessment.id,
        "skill_id": assessment.skill_id,
        "user_id": assessment.user_id,
        "status": assessment.status,
        "current_step": assessment.current_step,
        "step_name": current_step(assessment).title,
        "knowledge_score": assessment.knowledge_score,
        "practical_score": assessment.practical_score,
        "teaching_score": assessment.teaching_score,
        "overall_score": assessment.overall_score,
        "completed_at": assessment.completed_at,
        "created_at": assessment.created_at,
    }


# ======================
# CREATION & RETRIEVAL
# ======================

def create_assessment(db: Session, skill_id: int, caller_id: int) -> SkillAssessment:
    """
    Start a new assessment attempt for one of the caller's skills.

    Args:
        db: Database session
        skill_id: Skill being assessed
        caller_id: Authenticated user ID

    Returns:
        New assessment at step 1 with status "pending"

    Raises:
        NotFoundError: If the skill does not exist
        AuthorizationError: If the skill belongs to someone else
    """
    skill = skill_crud.get_skill(db, skill_id)
    if not skill:
        raise NotFoundError("Skill not found")
    if skill.user_id != caller_id:
        logger.warning("User %s tried to assess skill %s owned by %s", caller_id, skill_id, skill.user_id)
        raise AuthorizationError("Not authorized to assess this skill")

    assessment = assessment_crud.create_assessment(db, skill_id=skill_id, user_id=caller_id)
    commit_or_raise(db, "create assessment")
    db.refresh(assessment)

    logger.info("Assessment %s created for skill %s by user %s", assessment.id, skill_id, caller_id)
    return assessment


def get_assessment(db: Session, assessment_id: int, caller_id: int) -> SkillAssessment:
    return _get_owned_assessment(db, assessment_id, caller_id)


def list_user_assessments(db: Session, caller_id: int) -> List[SkillAssessment]:
    return assessment_crud.get_assessments_by_user(db, caller_id)


def list_skill_assessments(db: Session, skill_id: int, caller_id: int) -> List[SkillAssessment]:
    skill = skill_crud.get_skill(db, skill_id)
    if not skill:
        raise NotFoundError("Skill not found")
    if skill.user_id != caller_id:
        raise AuthorizationError("Not authorized to view these assessments")
    return assessment_crud.get_assessments_by_skill(db, skill_id)


def get_active_assessment(db: Session, skill_id: int, caller_id: int) -> Optional[SkillAssessment]:
    """Latest non-completed attempt; older attempts are kept but ignored."""
    return assessment_crud.get_latest_open_assessment(db, user_id=caller_id, skill_id=skill_id)


# ======================
# STATE TRANSITIONS
# ======================

def advance_step(
    db: Session,
    assessment_id: int,
    caller_id: int,
    score_field: str,
    score_value: int,
) -> SkillAssessment:
    """
    Record one step score and move the assessment to its next step.

    The score field is not required to match the current step: a practical
    score may be written while the assessment is still on the knowledge
    test. The step counter always moves forward by one and stops at review.

    Args:
        db: Database session
        assessment_id: Assessment identifier
        caller_id: Authenticated user ID (must own the assessment)
        score_field: knowledge_score, practical_score or teaching_score
        score_value: Score between 0 and 100

    Returns:
        Updated assessment

    Raises:
        NotFoundError: If the assessment does not exist
        AuthorizationError: If the caller does not own it
        ValidationError: On an unknown field, a score out of range, or a
            completed assessment
    """
    if score_field not in SCORE_FIELDS:
        raise ValidationError(
            "Invalid score field",
            {"score_field": f"Must be one of: {', '.join(SCORE_FIELDS)}"},
        )
    _validate_score(score_field, score_value)

    assessment = _get_owned_assessment(db, assessment_id, caller_id)
    if assessment.status == STATUS_COMPLETED:
        raise ValidationError("Assessment is already completed", {"status": "Completed assessments cannot change"})

    step = current_step(assessment)
    if step.score_field != score_field:
        logger.info(
            "Assessment %s: %s recorded while on step %s (%s)",
            assessment.id,
            score_field,
            step.value,
            step.title,
        )

    setattr(assessment, score_field, score_value)
    if assessment.status == STATUS_PENDING:
        assessment.status = STATUS_IN_PROGRESS
    assessment.current_step = step.next_step().value
    _derive_overall_score(assessment)

    commit_or_raise(db, "update assessment")
    db.refresh(assessment)

    logger.info(
        "Assessment %s advanced to step %s (%s=%s)",
        assessment.id,
        assessment.current_step,
        score_field,
        score_value,
    )
    return assessment


def complete_assessment(db: Session, assessment_id: int, caller_id: int) -> SkillAssessment:
    """
    Finish an assessment that has reached the review step.

    Calling this on an already completed assessment returns it untouched,
    so completed_at keeps its first value.

    Raises:
        NotFoundError: If the assessment does not exist
        AuthorizationError: If the caller does not own it
        ValidationError: If not at step 4 or a score is missing
    """
    assessment = _get_owned_assessment(db, assessment_id, caller_id)
    if assessment.status == STATUS_COMPLETED:
        return assessment

    _check_can_complete(assessment)
    _mark_completed(assessment)

    commit_or_raise(db, "complete assessment")
    db.refresh(assessment)

    logger.info(
        "Assessment %s completed with overall score %s",
        assessment.id,
        assessment.overall_score,
    )
    return assessment


def update_assessment(
    db: Session,
    assessment_id: int,
    caller_id: int,
    patch: AssessmentUpdate,
) -> SkillAssessment:
    """
    Apply a partial update from the assessment client.

    Scores and an explicit step are written as given; overall_score is
    re-derived whenever all three scores are present, and a request for
    status "completed" goes through the same gate as complete_assessment.
    """
    changes = patch.model_dump(exclude_unset=True, exclude_none=True)

    errors: Dict[str, str] = {}
    for field in SCORE_FIELDS:
        if field in changes:
            try:
                _validate_score(field, changes[field])
            except ValidationError as exc:
                errors.update(exc.errors)
    if "current_step" in changes and changes["current_step"] not in {step.value for step in AssessmentStep}:
        errors["current_step"] = "Step must be between 1 and 4"
    if "status" in changes and changes["status"] not in VALID_STATUSES:
        errors["status"] = f"Status must be one of: {', '.join(VALID_STATUSES)}"
    if errors:
        raise ValidationError("Invalid assessment update", errors)

    assessment = _get_owned_assessment(db, assessment_id, caller_id)
    requested_status = changes.pop("status", None)

    if assessment.status == STATUS_COMPLETED:
        if changes or requested_status not in (None, STATUS_COMPLETED):
            raise ValidationError("Assessment is already completed", {"status": "Completed assessments cannot change"})
        return assessment

    # Gate completion against the state the update would produce, before
    # touching the row.
    if requested_status == STATUS_COMPLETED:
        pending_step = changes.get("current_step", assessment.current_step)
        missing = {
            field: "Score is required before completing"
            for field in SCORE_FIELDS
            if changes.get(field, getattr(assessment, field)) is None
        }
        if pending_step != AssessmentStep.REVIEW:
            missing["current_step"] = "Assessment must be at the review step to complete"
        if missing:
            raise ValidationError("Assessment is not ready to be completed", missing)

    wrote_score = False
    for field, value in changes.items():
        setattr(assessment, field, value)
        wrote_score = wrote_score or field in SCORE_FIELDS

    if requested_status == STATUS_COMPLETED:
        _mark_completed(assessment)
    elif requested_status == STATUS_IN_PROGRESS or (wrote_score and assessment.status == STATUS_PENDING):
        assessment.status = STATUS_IN_PROGRESS
    _derive_overall_score(assessment)

    commit_or_raise(db, "update assessment")
    db.refresh(assessment)

    logger.info(
        "Assessment %s updated: status=%s step=%s",
        assessment.id,
        assessment.status,
        assessment.current_step,
    )
    return assessment
