# skillexchange/api/assessment.py
"""
Assessment API Router

Endpoints:
- GET /api/assessments/user - Caller's assessments
- GET /api/assessments/skill/{skill_id} - Assessments for one of the caller's skills
- GET /api/assessments/skill/{skill_id}/active - Latest unfinished attempt
- GET /api/assessments/{id} - One assessment
- POST /api/assessments - Start an assessment
- PUT /api/assessments/{id} - Partial update from the assessment client
- POST /api/assessments/{id}/advance - Record a step score and move on
- POST /api/assessments/{id}/complete - Finish at the review step
- GET /api/assessment/questions - Knowledge test questions
- POST /api/assessment/questions/score - Score knowledge test answers
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from skillexchange import models
from skillexchange.config import settings
from skillexchange.database import get_db
from skillexchange.schemas.assessment import (
    AdvanceStepRequest,
    AssessmentCreate,
    AssessmentResponse,
    AssessmentUpdate,
    QuestionResponse,
    QuizScoreResponse,
    QuizSubmission,
)
from skillexchange.services import assessment_service, knowledge_test
from skillexchange.utils.security import get_current_user

router = APIRouter(prefix="/api/assessments", tags=["Assessments"])
questions_router = APIRouter(prefix="/api/assessment", tags=["Assessments"])


@router.get("/user", response_model=List[AssessmentResponse])
def get_user_assessments(
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return [
        assessment_service.serialize_assessment(a)
        for a in assessment_service.list_user_assessments(db, current_user.id)
    ]


@router.get("/skill/{skill_id}", response_model=List[AssessmentResponse])
def get_skill_assessments(
    skill_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return [
        assessment_service.serialize_assessment(a)
        for a in assessment_service.list_skill_assessments(db, skill_id, current_user.id)
    ]


@router.get("/skill/{skill_id}/active", response_model=Optional[AssessmentResponse])
def get_active_assessment(
    skill_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    assessment = assessment_service.get_active_assessment(db, skill_id, current_user.id)
    if not assessment:
        return None
    return assessment_service.serialize_assessment(assessment)


@router.get("/{assessment_id}", response_model=AssessmentResponse)
def get_assessment(
    assessment_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    assessment = assessment_service.get_assessment(db, assessment_id, current_user.id)
    return assessment_service.serialize_assessment(assessment)


@router.post("", response_model=AssessmentResponse, status_code=status.HTTP_201_CREATED)
def create_assessment(
    payload: AssessmentCreate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    assessment = assessment_service.create_assessment(db, payload.skill_id, current_user.id)
    return assessment_service.serialize_assessment(assessment)


@router.put("/{assessment_id}", response_model=AssessmentResponse)
def update_assessment(
    assessment_id: int,
    patch: AssessmentUpdate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    assessment = assessment_service.update_assessment(db, assessment_id, current_user.id, patch)
    return assessment_service.serialize_assessment(assessment)


@router.post("/{assessment_id}/advance", response_model=AssessmentResponse)
def advance_assessment(
    assessment_id: int,
    payload: AdvanceStepRequest,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    assessment = assessment_service.advance_step(
        db,
        assessment_id,
        current_user.id,
        payload.score_field,
        payload.score_value,
    )
    return assessment_service.serialize_assessment(assessment)


@router.post("/{assessment_id}/complete", response_model=AssessmentResponse)
def complete_assessment(
    assessment_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    assessment = assessment_service.complete_assessment(db, assessment_id, current_user.id)
    return assessment_service.serialize_assessment(assessment)


# ======================
# KNOWLEDGE TEST
# ======================

@questions_router.get("/questions", response_model=List[QuestionResponse])
def get_assessment_questions(
    category: str = Query(""),
    count: int = Query(settings.KNOWLEDGE_TEST_QUESTION_COUNT),
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return knowledge_test.sample_questions(db, category, count)


@questions_router.post("/questions/score", response_model=QuizScoreResponse)
def score_assessment_questions(
    submission: QuizSubmission,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return knowledge_test.score_submission(db, submission.question_ids, submission.answers)
