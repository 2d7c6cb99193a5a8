# skillexchange/models/exchange.py
from sqlalchemy import Column, Integer, String, ForeignKey, TIMESTAMP, func, CheckConstraint
from sqlalchemy.orm import relationship
from skillexchange.database import Base


class SkillExchange(Base):
    __tablename__ = "skill_exchanges"

    id = Column(Integer, primary_key=True, index=True)
    teacher_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    teacher_skill_id = Column(Integer, ForeignKey("skills.id"), nullable=False)
    status = Column(String(20), nullable=False, default="pending")  # pending, active, completed
    # Named after the rater; each rating also feeds that same user's average.
    student_rating = Column(Integer, nullable=True)
    teacher_rating = Column(Integer, nullable=True)
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, nullable=True)

    __table_args__ = (
        CheckConstraint('student_rating IS NULL OR (student_rating >= 1 AND student_rating <= 5)', name='check_student_rating_range'),
        CheckConstraint('teacher_rating IS NULL OR (teacher_rating >= 1 AND teacher_rating <= 5)', name='check_teacher_rating_range'),
    )

    teacher = relationship("User", foreign_keys=[teacher_id], back_populates="teaching_exchanges")
    student = relationship("User", foreign_keys=[student_id], back_populates="learning_exchanges")
    teacher_skill = relationship("Skill", back_populates="exchanges")
