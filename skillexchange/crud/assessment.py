# skillexchange/crud/assessment.py
"""
Assessment CRUD Operations
Key-based reads and writes for assessments and quiz questions
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from skillexchange.models.assessment import SkillAssessment, AssessmentQuestion


# ======================
# ASSESSMENT CRUD
# ======================

def create_assessment(db: Session, skill_id: int, user_id: int) -> SkillAssessment:
    assessment = SkillAssessment(
        skill_id=skill_id,
        user_id=user_id,
        status="pending",
        current_step=1,
    )
    db.add(assessment)
    db.flush()
    return assessment


def get_assessment(db: Session, assessment_id: int) -> Optional[SkillAssessment]:
    return db.query(SkillAssessment).filter(SkillAssessment.id == assessment_id).first()


def get_assessments_by_user(db: Session, user_id: int) -> List[SkillAssessment]:
    return (
        db.query(SkillAssessment)
        .filter(SkillAssessment.user_id == user_id)
        .order_by(SkillAssessment.id.asc())
        .all()
    )


def get_assessments_by_skill(db: Session, skill_id: int) -> List[SkillAssessment]:
    return (
        db.query(SkillAssessment)
        .filter(SkillAssessment.skill_id == skill_id)
        .order_by(SkillAssessment.id.asc())
        .all()
    )


def get_latest_open_assessment(
    db: Session,
    user_id: int,
    skill_id: int,
) -> Optional[SkillAssessment]:
    """Most recent attempt for (user, skill) that is not completed yet."""
    return (
        db.query(SkillAssessment)
        .filter(
            SkillAssessment.user_id == user_id,
            SkillAssessment.skill_id == skill_id,
            SkillAssessment.status != "completed",
        )
        .order_by(SkillAssessment.id.desc())
        .first()
    )


# ======================
# QUESTION POOL
# ======================

def get_questions_by_category(db: Session, category: str) -> List[AssessmentQuestion]:
    return (
        db.query(AssessmentQuestion)
        .filter(AssessmentQuestion.category == category)
        .order_by(AssessmentQuestion.id.asc())
        .all()
    )


def get_questions_by_ids(db: Session, question_ids: List[int]) -> List[AssessmentQuestion]:
    if not question_ids:
        return []
    return db.query(AssessmentQuestion).filter(AssessmentQuestion.id.in_(question_ids)).all()


def count_questions(db: Session) -> int:
    return db.query(AssessmentQuestion).count()


def add_questions(db: Session, rows: List[dict]) -> int:
    db.add_all([AssessmentQuestion(**row) for row in rows])
    db.flush()
    return len(rows)
