from typing import Union, Dict, Any

from sqlalchemy.orm import Session

from app.core.exceptions import UserNotFound
from app.crud.user import user as crud_user
from app.schemas.user import Standing, StandingUpdate


class UserStandingStore:
    """Reads and patches the standing columns of a user."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: int) -> Standing:
        user = crud_user.get(self.db, id=user_id)
        if not user:
            raise UserNotFound()
        return Standing.from_user(user)

    def update(self, user_id: int, patch: Union[StandingUpdate, Dict[str, Any]]) -> None:
        user = crud_user.get_for_update(self.db, id=user_id)
        if not user:
            raise UserNotFound()
        if isinstance(patch, dict):
            patch = StandingUpdate(**patch)
        crud_user.update(self.db, db_obj=user, obj_in=patch.model_dump(exclude_unset=True))
