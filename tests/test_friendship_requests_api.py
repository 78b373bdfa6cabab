import pytest

from app.common.exceptions import FriendshipConflictError
from app.models.friendship import Friendship
from app.services.friendship_service import FriendshipService


def _outgoing(user):
    response = user.get_my_outgoing_friendship_requests()
    assert response.status_code == 200
    return response.json()


def test_send_request(create_user):
    user_a, user_b = create_user(), create_user()

    response = user_a.send_friendship_request(user_b.id)

    assert response.status_code == 200
    assert response.json() == {"friendUserId": user_b.id, "status": "requested"}
    assert _outgoing(user_a) == [{"friendUserId": user_b.id, "status": "requested"}]
    assert _outgoing(user_b) == []


def test_decline_request(create_user):
    user_a, user_b = create_user(), create_user()
    user_a.send_friendship_request(user_b.id)

    response = user_b.decline_friendship_request(user_a.id)

    assert response.status_code == 200
    assert _outgoing(user_a) == [{"friendUserId": user_b.id, "status": "declined"}]


def test_resend_after_decline_updates_the_same_edge(create_user, db):
    user_a, user_b = create_user(), create_user()
    user_a.send_friendship_request(user_b.id)
    user_b.decline_friendship_request(user_a.id)

    user_a.send_friendship_request(user_b.id)

    assert _outgoing(user_a) == [{"friendUserId": user_b.id, "status": "requested"}]
    edges = db.query(Friendship).filter(
        Friendship.user_id == user_a.id,
        Friendship.friend_user_id == user_b.id,
    ).all()
    assert len(edges) == 1


def test_sending_twice_keeps_one_edge(create_user, db):
    user_a, user_b = create_user(), create_user()
    user_a.send_friendship_request(user_b.id)
    user_a.send_friendship_request(user_b.id)

    assert db.query(Friendship).filter(Friendship.user_id == user_a.id).count() == 1


def test_accept_request(create_user):
    user_a, user_b = create_user(), create_user()
    user_a.send_friendship_request(user_b.id)

    response = user_b.accept_friendship_request(user_a.id)

    assert response.status_code == 200
    assert response.json() == {"friendUserId": user_a.id, "status": "accepted"}
    # accepted edges are friends now, not outgoing requests
    assert _outgoing(user_a) == []
    assert _outgoing(user_b) == []


def test_request_to_existing_friend_is_a_no_op(create_user):
    user_a, user_b = create_user(), create_user()
    user_a.befriend(user_b)

    response = user_a.send_friendship_request(user_b.id)

    assert response.json()["status"] == "accepted"
    assert user_a.get_friend_by_id(user_b.id).status_code == 200


def test_cannot_befriend_yourself(create_user):
    user_a = create_user()

    response = user_a.send_friendship_request(user_a.id)

    assert response.status_code == 400
    assert _outgoing(user_a) == []


def test_request_to_unknown_user(create_user):
    user_a = create_user()

    response = user_a.send_friendship_request(999999)

    assert response.status_code == 404
    assert response.json() == {"detail": "User not found"}


def test_accept_without_request(create_user):
    user_a, user_b = create_user(), create_user()

    response = user_b.accept_friendship_request(user_a.id)

    assert response.status_code == 404
    assert response.json() == {"detail": "Friendship request not found"}


def test_requester_cannot_accept_own_request(create_user):
    user_a, user_b = create_user(), create_user()
    user_a.send_friendship_request(user_b.id)

    assert user_a.accept_friendship_request(user_b.id).status_code == 404


def test_decline_twice(create_user):
    user_a, user_b = create_user(), create_user()
    user_a.send_friendship_request(user_b.id)
    user_b.decline_friendship_request(user_a.id)

    assert user_b.decline_friendship_request(user_a.id).status_code == 404


def test_concurrent_insert_of_same_pair_is_a_conflict(db, add_users, monkeypatch):
    a, b = add_users(2)
    service = FriendshipService(db=db)
    service.send_request(a, b)

    # another writer got there between our read and our insert
    monkeypatch.setattr(service, "_get_edge", lambda user_id, friend_user_id: None)
    with pytest.raises(FriendshipConflictError):
        service.send_request(a, b)

    assert db.query(Friendship).filter(Friendship.user_id == a).count() == 1
