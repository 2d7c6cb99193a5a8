# skillexchange/schemas/assessment.py
"""
Assessment Pydantic Schemas
Request/response models for the four-step skill assessment
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ======================
# ASSESSMENT SCHEMAS
# ======================

class AssessmentCreate(BaseModel):
    """Schema for starting an assessment on one of your skills"""
    skill_id: int = Field(..., description="Skill being assessed")


class AssessmentUpdate(BaseModel):
    """
    Partial update sent by the assessment client.

    overall_score and completed_at are always derived server side, so they
    are not accepted here.
    """
    knowledge_score: Optional[int] = Field(None, description="Knowledge test score (0-100)")
    practical_score: Optional[int] = Field(None, description="Practical exercise score (0-100)")
    teaching_score: Optional[int] = Field(None, description="Teaching sample score (0-100)")
    current_step: Optional[int] = Field(None, description="Step to move to (1-4)")
    status: Optional[str] = Field(None, description="pending, in_progress or completed")


class AdvanceStepRequest(BaseModel):
    """Record one step score and move to the next step"""
    score_field: str = Field(..., description="knowledge_score, practical_score or teaching_score")
    score_value: int = Field(..., description="Score for the step (0-100)")


class AssessmentResponse(BaseModel):
    id: int
    skill_id: int
    user_id: int
    status: str
    current_step: int
    step_name: Optional[str] = None
    knowledge_score: Optional[int] = None
    practical_score: Optional[int] = None
    teaching_score: Optional[int] = None
    overall_score: Optional[int] = None
    completed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


# ======================
# KNOWLEDGE TEST SCHEMAS
# ======================

class QuestionResponse(BaseModel):
    """Quiz question without its answer key"""
    id: int
    category: str
    question: str
    options: List[str]

    model_config = ConfigDict(from_attributes=True)


class QuizSubmission(BaseModel):
    question_ids: List[int] = Field(..., description="Questions in the order they were shown")
    answers: List[Optional[int]] = Field(default_factory=list, description="Chosen option index per question, null if unanswered")


class QuizScoreResponse(BaseModel):
    score: int = Field(..., description="round(100 * correct / total)")
    correct: int
    total: int
