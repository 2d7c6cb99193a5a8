# skillexchange/models/__init__.py
# Import models in dependency order
from .user import User
from .skill import Skill, SKILL_CATEGORIES, PROFICIENCY_LEVELS
from .assessment import SkillAssessment, AssessmentQuestion
from .message import Message
from .exchange import SkillExchange

__all__ = [
    "User",
    "Skill",
    "SKILL_CATEGORIES",
    "PROFICIENCY_LEVELS",
    "SkillAssessment",
    "AssessmentQuestion",
    "Message",
    "SkillExchange",
]
