# app/common/deps.py

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from jose import JWTError

from app.common.exceptions import UserNotFoundError
from app.db.session import get_db
from app.core.security import decode_access_token
from app.models.user import User
from app.services.friend_service import FriendService
from app.services.friendship_service import FriendshipService
from app.services.user_service import UserService

# tokens are minted by POST /api/v1/users, there is no password login
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/users")


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db=db)


def get_friend_service(db: Session = Depends(get_db)) -> FriendService:
    return FriendService(db=db)


def get_friendship_service(db: Session = Depends(get_db)) -> FriendshipService:
    return FriendshipService(db=db)


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
) -> User:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        user_id = decode_access_token(token)
        if user_id is None:
            raise credentials_exception
    except JWTError:
        raise credentials_exception

    try:
        return UserService(db=db).get_user(user_id)
    except UserNotFoundError:
        raise credentials_exception
