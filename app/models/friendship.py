# app/models/friendship.py

import enum

from sqlalchemy import CheckConstraint, Column, Enum, ForeignKey, Index, Integer, UniqueConstraint
from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, PositiveInt
from pydantic.alias_generators import to_camel

from app.db.base_class import Base

class FriendshipStatus(str, enum.Enum):
    REQUESTED = "requested"
    ACCEPTED = "accepted"
    DECLINED = "declined"

class Friendship(Base):
    """
    One directed edge per ordered pair. An accepted friendship is two rows,
    user -> friend and friend -> user, both ACCEPTED.
    """
    # table name: friendships

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    friend_user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    status = Column(
        Enum(
            FriendshipStatus,
            name="friendship_status",
            native_enum=False,
            length=20,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
        default=FriendshipStatus.REQUESTED,
    )

    __table_args__ = (
        UniqueConstraint("user_id", "friend_user_id", name="uq_friendships_user_friend"),
        CheckConstraint("user_id != friend_user_id", name="ck_friendships_no_self_loop"),
        Index("ix_friendships_user_status", "user_id", "status"),
        Index("ix_friendships_friend_status", "friend_user_id", "status"),
    )

class FriendshipRequestRead(BaseModel):
    friend_user_id: int
    status: FriendshipStatus

    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )

class FriendRead(BaseModel):
    """
    What a user sees about one of their accepted friends.
    """
    id: PositiveInt
    full_name: str = Field(min_length=1)
    phone_number: str = Field(min_length=1)
    total_friend_count: NonNegativeInt
    mutual_friend_count: NonNegativeInt

    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )
