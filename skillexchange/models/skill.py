from sqlalchemy import Column, Integer, String, Text, Boolean, ForeignKey, TIMESTAMP, func
from sqlalchemy.orm import relationship
from skillexchange.database import Base

SKILL_CATEGORIES = (
    "programming",
    "design",
    "language",
    "music",
    "business",
    "lifestyle",
    "other",
)

PROFICIENCY_LEVELS = (
    "beginner",
    "intermediate",
    "advanced",
    "expert",
)


# skillexchange/models/skill.py
class Skill(Base):
    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
        nullable=False
    )
    name = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=False)
    category = Column(String(50), nullable=False)
    is_teaching = Column(Boolean, nullable=False)
    proficiency = Column(String(20))  # teaching skills only
    icon = Column(String(100))
    average_rating = Column(Integer, nullable=True)
    active_students = Column(Integer, default=0)
    created_at = Column(TIMESTAMP, server_default=func.now())

    owner = relationship("User", back_populates="skills")
    assessments = relationship("SkillAssessment", back_populates="skill", cascade="all, delete-orphan")
    exchanges = relationship("SkillExchange", back_populates="teacher_skill")
