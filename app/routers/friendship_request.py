# app/routers/friendship_request.py

from typing import List

from fastapi import APIRouter, Depends

from app.common.deps import get_current_user, get_friendship_service
from app.models.friendship import FriendshipRequestRead
from app.models.user import User
from app.services.friendship_service import FriendshipService

router = APIRouter()


@router.get("/outgoing", response_model=List[FriendshipRequestRead])
def get_my_outgoing_requests(
    current_user: User = Depends(get_current_user),
    friendships: FriendshipService = Depends(get_friendship_service),
):
    return friendships.get_outgoing_requests(current_user.id)


@router.post("/{friend_user_id}", response_model=FriendshipRequestRead)
def send_request(
    friend_user_id: int,
    current_user: User = Depends(get_current_user),
    friendships: FriendshipService = Depends(get_friendship_service),
):
    return friendships.send_request(current_user.id, friend_user_id)


# friend_user_id is the user who sent the request
@router.post("/{friend_user_id}/accept", response_model=FriendshipRequestRead)
def accept_request(
    friend_user_id: int,
    current_user: User = Depends(get_current_user),
    friendships: FriendshipService = Depends(get_friendship_service),
):
    return friendships.accept_request(current_user.id, friend_user_id)


@router.post("/{friend_user_id}/decline", response_model=FriendshipRequestRead)
def decline_request(
    friend_user_id: int,
    current_user: User = Depends(get_current_user),
    friendships: FriendshipService = Depends(get_friendship_service),
):
    return friendships.decline_request(current_user.id, friend_user_id)
