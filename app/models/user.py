from sqlalchemy import Boolean, Column, String, Integer, DateTime, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base
from app.core.constants import RoleEnum, LevelEnum

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    role = Column(Enum(RoleEnum), nullable=False, default=RoleEnum.STUDENT)
    is_active = Column(Boolean(), default=True)
    organization = Column(String, nullable=True)
    country = Column(String, nullable=True)

    # Standing, written only when an attempt is finalized
    current_level = Column(Enum(LevelEnum), nullable=True, index=True)
    can_retake = Column(Boolean(), nullable=False, default=True)
    last_attempt_at = Column(DateTime(timezone=True), nullable=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    test_attempts = relationship("TestAttempt", back_populates="user", cascade="all, delete-orphan")
    created_questions = relationship("Question", back_populates="creator")
