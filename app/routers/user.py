# app/routers/user.py

from fastapi import APIRouter, Depends, status

from app.common.deps import get_user_service
from app.core.security import create_access_token
from app.models.user import UserCreate, UserRead, UserWithToken
from app.services.user_service import UserService

router = APIRouter()


@router.post("", response_model=UserWithToken, status_code=status.HTTP_201_CREATED)
def create_user(user_in: UserCreate, users: UserService = Depends(get_user_service)):
    user = users.create_user(user_in)
    return UserWithToken(
        **UserRead.model_validate(user).model_dump(),
        access_token=create_access_token(user.id),
    )
