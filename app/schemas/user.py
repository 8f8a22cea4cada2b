from pydantic import BaseModel, EmailStr, ConfigDict
from typing import Optional
from datetime import datetime

from app.core.constants import RoleEnum, LevelEnum

class Standing(BaseModel):
    """A user's certified level and retake permission."""
    level: Optional[LevelEnum] = None
    can_retake: bool = True
    last_attempt_at: Optional[datetime] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_user(cls, user) -> "Standing":
        return cls(level=user.current_level, can_retake=user.can_retake, last_attempt_at=user.last_attempt_at)

class StandingUpdate(BaseModel):
    current_level: Optional[LevelEnum] = None
    can_retake: Optional[bool] = None
    last_attempt_at: Optional[datetime] = None

class UserBase(BaseModel):
    full_name: str
    email: EmailStr
    organization: Optional[str] = None
    country: Optional[str] = None

class UserCreate(UserBase):
    role: RoleEnum = RoleEnum.STUDENT

class User(UserBase):
    id: int
    role: RoleEnum
    is_active: bool
    current_level: Optional[LevelEnum] = None
    can_retake: bool
    last_attempt_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)

