from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List
from datetime import datetime

from app.core.constants import (
    StageEnum, LevelEnum, DifficultyEnum, CompetencyAreaEnum, STAGE_LEVELS,
    MIN_OPTIONS_PER_QUESTION, MAX_OPTIONS_PER_QUESTION,
)

class QuestionOption(BaseModel):
    text: str = Field(..., min_length=1, max_length=300)
    is_correct: bool = False

class PublicQuestionOption(BaseModel):
    text: str

class QuestionBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    prompt: str = Field(..., min_length=1, max_length=1000)
    options: List[QuestionOption]
    stage: StageEnum
    level: LevelEnum
    competency_area: CompetencyAreaEnum
    difficulty: DifficultyEnum = DifficultyEnum.MEDIUM
    is_active: bool = True

def _check_options(options):
    if not MIN_OPTIONS_PER_QUESTION <= len(options) <= MAX_OPTIONS_PER_QUESTION:
        raise ValueError(
            f"Question must have between {MIN_OPTIONS_PER_QUESTION} and {MAX_OPTIONS_PER_QUESTION} options"
        )
    if not any(option.is_correct for option in options):
        raise ValueError("Question must have at least one correct answer")
    return options

class QuestionCreate(QuestionBase):

    @field_validator("options")
    def validate_options(cls, v):
        return _check_options(v)

    @field_validator("level")
    def level_matches_stage(cls, v, info):
        stage = info.data.get("stage")
        if stage is not None and v not in STAGE_LEVELS[stage]:
            raise ValueError(f"Level {v.value} is not assessed in stage {int(stage)}")
        return v

class QuestionUpdate(BaseModel):
    """Partial edit; the merged question is re-checked against the create rules."""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    prompt: Optional[str] = Field(None, min_length=1, max_length=1000)
    options: Optional[List[QuestionOption]] = None
    stage: Optional[StageEnum] = None
    level: Optional[LevelEnum] = None
    competency_area: Optional[CompetencyAreaEnum] = None
    difficulty: Optional[DifficultyEnum] = None
    is_active: Optional[bool] = None

    @field_validator("options")
    def validate_options(cls, v):
        return v if v is None else _check_options(v)

class Question(QuestionBase):
    id: int
    created_by: Optional[int] = None
    created_at: datetime
    updated_at: Optional[datetime]

    model_config = ConfigDict(from_attributes=True)

class QuestionSnapshot(BaseModel):
    """What a test attempt keeps about a question it was assigned."""
    question_id: int
    correct_options: List[int]
    option_count: int

class TestQuestion(BaseModel):
    """A question as shown to a test-taker; correctness is never exposed."""
    __test__ = False

    id: int
    title: str
    prompt: str
    options: List[PublicQuestionOption]

    @classmethod
    def from_question(cls, question) -> "TestQuestion":
        return cls(
            id=question.id,
            title=question.title,
            prompt=question.prompt,
            options=[PublicQuestionOption(text=option["text"]) for option in question.options],
        )
