from typing import Optional

from pydantic import BaseModel


class DashboardStats(BaseModel):
    teaching_skills_count: int
    learning_skills_count: int
    active_exchanges_count: int
    average_rating: Optional[float] = None
