import logging
from typing import List

from sqlalchemy.orm import Session

from app.crud.question import question as crud_question
from app.models.question import Question

logger = logging.getLogger(__name__)


class QuestionSource:
    """Where the session engine draws a stage's question set from."""

    def fetch_active_questions(self, stage: int, count: int) -> List[Question]:
        raise NotImplementedError


class DatabaseQuestionSource(QuestionSource):

    def __init__(self, db: Session):
        self.db = db

    def fetch_active_questions(self, stage: int, count: int) -> List[Question]:
        questions = crud_question.get_random_active_by_stage(self.db, stage=stage, count=count)
        logger.debug(f"Drew {len(questions)} of {count} requested questions for stage {int(stage)}")
        return questions
