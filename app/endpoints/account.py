from fastapi import APIRouter, Depends

from app.models.user import User
from app.schemas.response import APIResponse
from app.schemas.user import User as UserSchema
from app.utils import deps

router = APIRouter()


@router.get("/me", response_model=APIResponse[UserSchema])
def get_me(current_user: User = Depends(deps.get_current_user)):
    return APIResponse(message="Profile retrieved successfully", data=UserSchema.model_validate(current_user))
