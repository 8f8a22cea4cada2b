from typing import Optional
from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.models.user import User
from app.schemas.user import UserCreate, StandingUpdate

class CRUDUser(CRUDBase[User, UserCreate, StandingUpdate]):

    def get_for_update(self, db: Session, id: int) -> Optional[User]:
        return db.query(User).filter(User.id == id).with_for_update().first()


user = CRUDUser(User)
