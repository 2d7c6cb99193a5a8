from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ExchangeCreate(BaseModel):
    teacher_id: int
    student_id: int
    teacher_skill_id: int


class ExchangeUpdate(BaseModel):
    status: Optional[str] = Field(None, description="pending, active or completed")
    student_rating: Optional[int] = Field(None, description="Rating entered by the student (1-5)")
    teacher_rating: Optional[int] = Field(None, description="Rating entered by the teacher (1-5)")


class ExchangeResponse(BaseModel):
    id: int
    teacher_id: int
    student_id: int
    teacher_skill_id: int
    status: str
    student_rating: Optional[int] = None
    teacher_rating: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
