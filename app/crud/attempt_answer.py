from sqlalchemy.orm import Session
from typing import List, Optional

from app.crud.base import CRUDBase
from app.models.attempt_answer import AttemptAnswer
from app.schemas.test_attempt import AnswerSubmit

class CRUDAttemptAnswer(CRUDBase[AttemptAnswer, AnswerSubmit, AnswerSubmit]):

    def get_by_attempt_and_question(self, db: Session, attempt_id: int,
                                    question_id: int) -> Optional[AttemptAnswer]:
        return (
            db.query(AttemptAnswer)
            .filter(AttemptAnswer.attempt_id == attempt_id)
            .filter(AttemptAnswer.question_id == question_id)
            .first()
        )

    def get_all_by_attempt(self, db: Session, attempt_id: int) -> List[AttemptAnswer]:
        return (
            db.query(AttemptAnswer)
            .filter(AttemptAnswer.attempt_id == attempt_id)
            .order_by(AttemptAnswer.id)
            .all()
        )

    def count_by_attempt(self, db: Session, attempt_id: int) -> int:
        return db.query(AttemptAnswer).filter(AttemptAnswer.attempt_id == attempt_id).count()


attempt_answer = CRUDAttemptAnswer(AttemptAnswer)
