from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

# ======================
# SKILL SCHEMAS
# ======================
# Enum and length rules are enforced by skill_service so that failures come
# back as 400 responses with per-field errors.

class SkillBase(BaseModel):
    name: str
    description: str
    category: str
    is_teaching: bool
    proficiency: Optional[str] = None
    icon: Optional[str] = None


class SkillCreate(SkillBase):
    pass


class SkillUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    is_teaching: Optional[bool] = None
    proficiency: Optional[str] = None
    icon: Optional[str] = None


class Skill(SkillBase):
    id: int
    user_id: int
    average_rating: Optional[int] = None
    active_students: int = 0
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
