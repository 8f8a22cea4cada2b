import logging

from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.core.exceptions import InvalidQuestion, QuestionNotFound
from app.crud.question import question as crud_question
from app.models.question import Question
from app.schemas.question import Question as QuestionSchema, QuestionCreate, QuestionUpdate

logger = logging.getLogger(__name__)


class QuestionBankService:
    """Admin edits to single questions.

    Attempts keep their own snapshot of correct options, so nothing here
    touches scores of attempts already started.
    """

    def get_question(self, db: Session, question_id: int) -> Question:
        question = crud_question.get(db, id=question_id)
        if not question:
            raise QuestionNotFound(details={"question_id": question_id})
        return question

    def update_question(self, db: Session, question_id: int, question_in: QuestionUpdate) -> Question:
        question = self.get_question(db, question_id)
        changes = question_in.model_dump(exclude_unset=True)
        merged = {**QuestionSchema.model_validate(question).model_dump(), **changes}
        try:
            checked = QuestionCreate.model_validate(merged)
        except ValidationError as e:
            raise InvalidQuestion(details={
                "validation_errors": [{"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()]
            })

        data = checked.model_dump(include=set(changes))
        if "stage" in data:
            data["stage"] = int(data["stage"])
        question = crud_question.update(db, db_obj=question, obj_in=data)
        logger.info(f"Question {question_id} updated: {sorted(changes)}")
        return question

    def deactivate_question(self, db: Session, question_id: int) -> Question:
        question = self.get_question(db, question_id)
        question = crud_question.update(db, db_obj=question, obj_in={"is_active": False})
        logger.info(f"Question {question_id} deactivated")
        return question


question_bank_service = QuestionBankService()
