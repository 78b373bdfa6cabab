# app/services/friendship_service.py

import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.common.exceptions import (
    FriendshipConflictError,
    FriendshipRequestNotFoundError,
    InvalidFriendshipRequestError,
)
from app.models.friendship import Friendship, FriendshipStatus
from app.services.user_service import UserService

logger = logging.getLogger(__name__)


class FriendshipService:
    """
    Request / accept / decline workflow. The only writer of the friendships
    table; friend views and counts are read by FriendService.
    """

    def __init__(self, db: Session):
        self.db = db

    def _get_edge(self, user_id: int, friend_user_id: int):
        return self.db.query(Friendship).filter(
            Friendship.user_id == user_id,
            Friendship.friend_user_id == friend_user_id,
        ).first()

    def _set_edge(self, user_id: int, friend_user_id: int, status: FriendshipStatus) -> Friendship:
        # update in place when the ordered pair exists, otherwise insert
        edge = self._get_edge(user_id, friend_user_id)
        if edge is None:
            edge = Friendship(user_id=user_id, friend_user_id=friend_user_id, status=status)
            self.db.add(edge)
        else:
            edge.status = status
        return edge

    def _commit(self):
        # IntegrityError: a concurrent writer inserted the same ordered pair first
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning("friendship write conflicted: %s", exc.orig)
            raise FriendshipConflictError() from exc

    def _get_pending_request(self, user_id: int, friend_user_id: int) -> Friendship:
        # the request friend_user_id sent to user_id
        edge = self.db.query(Friendship).filter(
            Friendship.user_id == friend_user_id,
            Friendship.friend_user_id == user_id,
            Friendship.status == FriendshipStatus.REQUESTED,
        ).first()
        if edge is None:
            logger.warning("no pending request from %s to %s", friend_user_id, user_id)
            raise FriendshipRequestNotFoundError()
        return edge

    def send_request(self, user_id: int, friend_user_id: int) -> Friendship:
        if user_id == friend_user_id:
            logger.warning("user %s tried to befriend themselves", user_id)
            raise InvalidFriendshipRequestError("Cannot send a friendship request to yourself")

        # raises UserNotFoundError for an unknown target
        UserService(self.db).get_user(friend_user_id)

        existing = self._get_edge(user_id, friend_user_id)
        if existing is not None and existing.status == FriendshipStatus.ACCEPTED:
            return existing

        edge = self._set_edge(user_id, friend_user_id, FriendshipStatus.REQUESTED)
        self._commit()
        self.db.refresh(edge)
        logger.info("friendship requested %s -> %s", user_id, friend_user_id)
        return edge

    def accept_request(self, user_id: int, friend_user_id: int) -> Friendship:
        request = self._get_pending_request(user_id, friend_user_id)
        request.status = FriendshipStatus.ACCEPTED
        edge = self._set_edge(user_id, friend_user_id, FriendshipStatus.ACCEPTED)

        self._commit()
        self.db.refresh(edge)
        logger.info("friendship accepted %s <-> %s", user_id, friend_user_id)
        return edge

    def decline_request(self, user_id: int, friend_user_id: int) -> Friendship:
        request = self._get_pending_request(user_id, friend_user_id)
        request.status = FriendshipStatus.DECLINED

        self._commit()
        self.db.refresh(request)
        logger.info("friendship declined %s -> %s", friend_user_id, user_id)
        return request

    def get_outgoing_requests(self, user_id: int) -> List[Friendship]:
        return (
            self.db.query(Friendship)
            .filter(
                Friendship.user_id == user_id,
                Friendship.status.in_([FriendshipStatus.REQUESTED, FriendshipStatus.DECLINED]),
            )
            .order_by(Friendship.id)
            .all()
        )
