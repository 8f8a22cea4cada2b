from sqlalchemy import func
from sqlalchemy.orm import Session
from typing import List, Optional

from app.crud.base import CRUDBase
from app.models.question import Question
from app.schemas.question import QuestionCreate

class CRUDQuestion(CRUDBase[Question, QuestionCreate, QuestionCreate]):

    def create_with_creator(self, db: Session, *, obj_in: QuestionCreate, created_by: Optional[int]) -> Question:
        data = obj_in.model_dump()
        data["stage"] = int(obj_in.stage)
        data["created_by"] = created_by
        return self.create(db, obj_in=data)

    def get_by_stage(self, db: Session, stage: int, active_only: bool = False,
                     skip: int = 0, limit: int = 100) -> List[Question]:
        query = db.query(Question).filter(Question.stage == int(stage))
        if active_only:
            query = query.filter(Question.is_active == True)
        return query.order_by(Question.id).offset(skip).limit(limit).all()

    def get_random_active_by_stage(self, db: Session, stage: int, count: int) -> List[Question]:
        return (
            db.query(Question)
            .filter(Question.stage == int(stage), Question.is_active == True)
            .order_by(func.random())
            .limit(count)
            .all()
        )

    def get_by_ids(self, db: Session, ids: List[int]) -> List[Question]:
        if not ids:
            return []
        return db.query(Question).filter(Question.id.in_(ids)).all()

    def count_active_by_stage(self, db: Session, stage: int) -> int:
        return (
            db.query(func.count(Question.id))
            .filter(Question.stage == int(stage), Question.is_active == True)
            .scalar()
        )


question = CRUDQuestion(Question)
