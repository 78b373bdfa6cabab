# app/routers/my_friend.py

from typing import List

from fastapi import APIRouter, Depends

from app.common.deps import get_current_user, get_friend_service
from app.models.friendship import FriendRead
from app.models.user import User
from app.services.friend_service import FriendService

router = APIRouter()


@router.get("", response_model=List[FriendRead])
def get_all_friends(
    current_user: User = Depends(get_current_user),
    friends: FriendService = Depends(get_friend_service),
):
    return friends.get_all_friends(current_user.id)


@router.get("/{friend_user_id}", response_model=FriendRead)
def get_friend(
    friend_user_id: int,
    current_user: User = Depends(get_current_user),
    friends: FriendService = Depends(get_friend_service),
):
    return friends.get_friend(current_user.id, friend_user_id)
