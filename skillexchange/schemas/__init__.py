# skillexchange/schemas/__init__.py

# User schemas
from .user import UserRegister, UserPublic

# Auth schemas
from .auth import Token, TokenData, LoginRequest

# Skill schemas
from .skill import Skill, SkillCreate, SkillUpdate

# Assessment schemas
from .assessment import (
    AssessmentCreate,
    AssessmentUpdate,
    AdvanceStepRequest,
    AssessmentResponse,
    QuestionResponse,
    QuizSubmission,
    QuizScoreResponse,
)

# Messaging schemas
from .message import MessageCreate, MessageResponse, ConversationSummary

# Exchange schemas
from .exchange import ExchangeCreate, ExchangeUpdate, ExchangeResponse

from .dashboard import DashboardStats

__all__ = [
    "UserRegister",
    "UserPublic",
    "Token",
    "TokenData",
    "LoginRequest",
    "Skill",
    "SkillCreate",
    "SkillUpdate",
    "AssessmentCreate",
    "AssessmentUpdate",
    "AdvanceStepRequest",
    "AssessmentResponse",
    "QuestionResponse",
    "QuizSubmission",
    "QuizScoreResponse",
    "MessageCreate",
    "MessageResponse",
    "ConversationSummary",
    "ExchangeCreate",
    "ExchangeUpdate",
    "ExchangeResponse",
    "DashboardStats",
]
