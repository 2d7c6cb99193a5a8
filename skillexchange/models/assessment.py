# skillexchange/models/assessment.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey, TIMESTAMP, JSON, func, CheckConstraint
from sqlalchemy.orm import relationship
from skillexchange.database import Base


class SkillAssessment(Base):
    __tablename__ = "skill_assessments"

    id = Column(Integer, primary_key=True, index=True)
    skill_id = Column(Integer, ForeignKey("skills.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(String(20), nullable=False, default="pending")  # pending, in_progress, completed
    current_step = Column(Integer, nullable=False, default=1)
    knowledge_score = Column(Integer, nullable=True)
    practical_score = Column(Integer, nullable=True)
    teaching_score = Column(Integer, nullable=True)
    overall_score = Column(Integer, nullable=True)
    completed_at = Column(TIMESTAMP, nullable=True)
    created_at = Column(TIMESTAMP, server_default=func.now())

    __table_args__ = (
        CheckConstraint('current_step >= 1 AND current_step <= 4', name='check_current_step_range'),
    )

    skill = relationship("Skill", back_populates="assessments")
    user = relationship("User", back_populates="assessments")


class AssessmentQuestion(Base):
    __tablename__ = "assessment_questions"

    id = Column(Integer, primary_key=True, index=True)
    category = Column(String(50), nullable=False, index=True)
    question = Column(Text, nullable=False)
    options = Column(JSON, nullable=False)  # ordered list of option strings
    correct_option = Column(Integer, nullable=False)
