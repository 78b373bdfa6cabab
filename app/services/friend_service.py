# app/services/friend_service.py

import logging
from typing import List

from pydantic import ValidationError
from sqlalchemy import func, select
from sqlalchemy.orm import Session, aliased

from app.common.exceptions import FriendNotFoundError, FriendViewIntegrityError
from app.models.friendship import FriendRead, Friendship, FriendshipStatus
from app.models.user import User
from app.services.friend_queries import (
    mutual_friend_count,
    mutual_friends_count,
    user_total_friend_count,
)

logger = logging.getLogger(__name__)


class FriendService:

    def __init__(self, db: Session):
        self.db = db

    def _friend_view_query(self, user_id: int, mutual_counts):
        # friends of user_id, each with their total count (always >= 1, they
        # are friends with user_id) and the mutual count, 0 when missing
        friends = aliased(User, name="friends")
        totals = user_total_friend_count().subquery("user_total_friend_count")

        return (
            select(
                friends.id,
                friends.full_name,
                friends.phone_number,
                totals.c.total_friend_count,
                func.coalesce(mutual_counts.c.mutual_friend_count, 0).label("mutual_friend_count"),
            )
            .select_from(friends)
            .join(Friendship, Friendship.friend_user_id == friends.id)
            .join(totals, totals.c.user_id == friends.id)
            .outerjoin(mutual_counts, mutual_counts.c.friend_user_id == friends.id)
            .where(
                Friendship.user_id == user_id,
                Friendship.status == FriendshipStatus.ACCEPTED,
            )
        )

    def _to_friend_read(self, row) -> FriendRead:
        try:
            return FriendRead.model_validate(dict(row._mapping))
        except ValidationError as exc:
            logger.exception("friend row failed validation: %r", dict(row._mapping))
            raise FriendViewIntegrityError() from exc

    def get_friend(self, user_id: int, friend_user_id: int) -> FriendRead:
        mutual_counts = mutual_friend_count(user_id, friend_user_id).subquery("mutual_friend_count")
        stmt = self._friend_view_query(user_id, mutual_counts).where(
            Friendship.friend_user_id == friend_user_id
        )

        row = self.db.execute(stmt).first()
        if row is None:
            logger.debug("user %s has no accepted friend %s", user_id, friend_user_id)
            raise FriendNotFoundError()
        return self._to_friend_read(row)

    def get_all_friends(self, user_id: int) -> List[FriendRead]:
        mutual_counts = mutual_friends_count(user_id).subquery("mutual_friend_count")
        stmt = self._friend_view_query(user_id, mutual_counts).order_by(Friendship.friend_user_id)

        rows = self.db.execute(stmt).all()
        logger.debug("user %s has %d accepted friends", user_id, len(rows))
        return [self._to_friend_read(row) for row in rows]
