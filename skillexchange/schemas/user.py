from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ======================
# USER SCHEMAS
# ======================

class UserRegister(BaseModel):
    username: str = Field(..., min_length=3, max_length=100)
    # Bcrypt limit is 72 bytes; max_length=72 prevents the "password too long" crash
    password: str = Field(..., min_length=6, max_length=72)
    full_name: str = Field(..., min_length=3, max_length=150)
    bio: Optional[str] = None
    profile_image: Optional[str] = None


class UserPublic(BaseModel):
    id: int
    username: str
    full_name: str
    bio: Optional[str] = None
    profile_image: Optional[str] = None
    average_rating: Optional[int] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
