from sqlalchemy.orm import Session, selectinload
from typing import List, Optional
from pydantic import BaseModel

from app.core.constants import AttemptStatusEnum
from app.crud.base import CRUDBase
from app.models.test_attempt import TestAttempt

class CRUDTestAttempt(CRUDBase[TestAttempt, BaseModel, BaseModel]):

    def _query_with_relationships(self, db: Session):
        return db.query(TestAttempt).options(selectinload(TestAttempt.answers))

    def get(self, db: Session, id: int) -> Optional[TestAttempt]:
        return self._query_with_relationships(db).filter(TestAttempt.id == id).first()

    def get_for_update(self, db: Session, id: int) -> Optional[TestAttempt]:
        """Load an attempt holding a row lock until the transaction ends."""
        return (
            db.query(TestAttempt)
            .filter(TestAttempt.id == id)
            .with_for_update()
            .populate_existing()
            .first()
        )

    def get_in_progress(self, db: Session, user_id: int, stage: int) -> Optional[TestAttempt]:
        return (
            self._query_with_relationships(db)
            .filter(TestAttempt.user_id == user_id)
            .filter(TestAttempt.stage == int(stage))
            .filter(TestAttempt.status == AttemptStatusEnum.IN_PROGRESS)
            .first()
        )

    def get_in_progress_by_user(self, db: Session, user_id: int) -> List[TestAttempt]:
        return (
            self._query_with_relationships(db)
            .filter(TestAttempt.user_id == user_id)
            .filter(TestAttempt.status == AttemptStatusEnum.IN_PROGRESS)
            .order_by(TestAttempt.start_time.desc())
            .all()
        )

    def get_completed_by_user(self, db: Session, user_id: int, skip: int = 0, limit: int = 100) -> List[TestAttempt]:
        return (
            self._query_with_relationships(db)
            .filter(TestAttempt.user_id == user_id)
            .filter(TestAttempt.status == AttemptStatusEnum.COMPLETED)
            .order_by(TestAttempt.end_time.desc(), TestAttempt.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def get_all_in_progress(self, db: Session) -> List[TestAttempt]:
        return (
            db.query(TestAttempt)
            .filter(TestAttempt.status == AttemptStatusEnum.IN_PROGRESS)
            .order_by(TestAttempt.start_time)
            .all()
        )


test_attempt = CRUDTestAttempt(TestAttempt)
