# app/services/friend_queries.py
"""
Read-only building blocks over the friendships table.

Every function returns an un-executed ``Select`` so callers can run it on
its own or turn it into a subquery and join it into a bigger statement.
All counts consider ACCEPTED edges only.
"""

from sqlalchemy import Select, and_, distinct, func, select

from app.models.friendship import Friendship, FriendshipStatus


def friendship_edges(status: FriendshipStatus, name: str = "friendship_edges"):
    """(user_id, friend_user_id) for every edge in ``status``, as a subquery."""
    return (
        select(Friendship.user_id, Friendship.friend_user_id)
        .where(Friendship.status == status)
        .subquery(name)
    )


def accepted_friendships(name: str = "accepted_friendships"):
    return friendship_edges(FriendshipStatus.ACCEPTED, name)


def user_total_friend_count() -> Select:
    """
    One row per user with at least one accepted edge:
    (user_id, total_friend_count).
    """
    edges = accepted_friendships()
    return (
        select(
            edges.c.user_id,
            func.count(distinct(edges.c.friend_user_id)).label("total_friend_count"),
        )
        .group_by(edges.c.user_id)
    )


def mutual_friend_count(user_id: int, friend_user_id: int) -> Select:
    """
    Mutual friends of one pair: (user_id, friend_user_id, mutual_friend_count).

    Intersects the accepted friends of ``user_id`` with those of
    ``friend_user_id`` on the shared third party. Yields no row when the
    two have nothing in common, so callers treat a missing row as 0.

    Neither side of the pair can show up as the shared friend because
    edges never point at their own owner (ck_friendships_no_self_loop).
    """
    user_friends = accepted_friendships("user_friends")
    friend_friends = accepted_friendships("friend_friends")

    return (
        select(
            user_friends.c.user_id,
            friend_friends.c.user_id.label("friend_user_id"),
            func.count(friend_friends.c.friend_user_id).label("mutual_friend_count"),
        )
        .select_from(user_friends)
        .join(
            friend_friends,
            friend_friends.c.friend_user_id == user_friends.c.friend_user_id,
        )
        .where(
            user_friends.c.user_id == user_id,
            friend_friends.c.user_id == friend_user_id,
        )
        .group_by(user_friends.c.user_id, friend_friends.c.user_id)
    )


def mutual_friends_count(user_id: int) -> Select:
    """
    Mutual friend counts between ``user_id`` and each of their friends, in
    a single grouped join instead of one query per friend.

    ``user_friends`` holds the user's edges (one per friend X),
    ``friend_friends`` is the whole accepted relation and supplies X's own
    edges X -> C, and ``shared`` keeps only the C the user is also
    friends with. C is never X itself.

    Rows: (user_id, friend_user_id, mutual_friend_count). Friends with no
    mutual friend are absent.
    """
    user_friends = accepted_friendships("user_friends")
    friend_friends = accepted_friendships("friend_friends")
    shared = accepted_friendships("shared_friends")

    return (
        select(
            user_friends.c.user_id,
            user_friends.c.friend_user_id,
            func.count(friend_friends.c.friend_user_id).label("mutual_friend_count"),
        )
        .select_from(user_friends)
        .join(
            friend_friends,
            and_(
                friend_friends.c.user_id == user_friends.c.friend_user_id,
                friend_friends.c.friend_user_id != user_friends.c.friend_user_id,
            ),
        )
        .join(
            shared,
            and_(
                shared.c.user_id == user_friends.c.user_id,
                shared.c.friend_user_id == friend_friends.c.friend_user_id,
            ),
        )
        .where(user_friends.c.user_id == user_id)
        .group_by(user_friends.c.user_id, user_friends.c.friend_user_id)
    )
