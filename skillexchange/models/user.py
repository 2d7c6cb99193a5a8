from sqlalchemy import Column, Integer, String, Text, TIMESTAMP, func
from sqlalchemy.orm import relationship
from skillexchange.database import Base


# ---------------- USER (AUTH TABLE) ----------------
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    full_name = Column(String(150), nullable=False)
    bio = Column(Text)
    profile_image = Column(String(255))
    # Running two-point average fed by exchange ratings; NULL until first rated.
    average_rating = Column(Integer, nullable=True)
    created_at = Column(TIMESTAMP, server_default=func.now())

    skills = relationship("Skill", back_populates="owner", cascade="all, delete-orphan")
    assessments = relationship("SkillAssessment", back_populates="user", cascade="all, delete-orphan")
    teaching_exchanges = relationship("SkillExchange", foreign_keys="SkillExchange.teacher_id", back_populates="teacher")
    learning_exchanges = relationship("SkillExchange", foreign_keys="SkillExchange.student_id", back_populates="student")
