from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, Enum, JSON, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base
from app.core.constants import LevelEnum, DifficultyEnum, CompetencyAreaEnum

class Question(Base):
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    prompt = Column(String(1000), nullable=False)
    options = Column(JSON, nullable=False) # [{"text": str, "is_correct": bool}, ...]
    stage = Column(Integer, nullable=False)
    level = Column(Enum(LevelEnum), nullable=False)
    competency_area = Column(Enum(CompetencyAreaEnum), nullable=False)
    difficulty = Column(Enum(DifficultyEnum), nullable=False, default=DifficultyEnum.MEDIUM)
    is_active = Column(Boolean, nullable=False, default=True)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    creator = relationship("User", back_populates="created_questions")

    __table_args__ = (
        Index("ix_questions_stage_active", "stage", "is_active"),
    )

    @property
    def correct_options(self):
        return [index for index, option in enumerate(self.options or []) if option.get("is_correct")]
