import itertools

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base_class import Base
from app.db.session import get_db
from app.main import app
from app.models.friendship import Friendship, FriendshipStatus
from app.models.user import User

_phone_numbers = itertools.count(100000)


@pytest.fixture
def engine():
    """Fresh in-memory database per test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


class FriendClient:
    """Calls the API as one user"""

    def __init__(self, client, user):
        self.client = client
        self.id = user["id"]
        self.full_name = user["fullName"]
        self.headers = {"Authorization": f"Bearer {user['accessToken']}"}

    def send_friendship_request(self, friend_user_id):
        return self.client.post(
            f"/api/v1/friendship-requests/{friend_user_id}", headers=self.headers
        )

    def accept_friendship_request(self, friend_user_id):
        return self.client.post(
            f"/api/v1/friendship-requests/{friend_user_id}/accept", headers=self.headers
        )

    def decline_friendship_request(self, friend_user_id):
        return self.client.post(
            f"/api/v1/friendship-requests/{friend_user_id}/decline", headers=self.headers
        )

    def get_my_outgoing_friendship_requests(self):
        return self.client.get("/api/v1/friendship-requests/outgoing", headers=self.headers)

    def get_friend_by_id(self, friend_user_id):
        return self.client.get(f"/api/v1/my-friends/{friend_user_id}", headers=self.headers)

    def get_all_friends(self):
        return self.client.get("/api/v1/my-friends", headers=self.headers)

    def befriend(self, other):
        """other sends a request, self accepts it"""
        assert other.send_friendship_request(self.id).status_code == 200
        assert self.accept_friendship_request(other.id).status_code == 200


@pytest.fixture
def create_user(client):
    def _create_user(full_name=None):
        phone_number = f"+1555{next(_phone_numbers)}"
        response = client.post(
            "/api/v1/users",
            json={"fullName": full_name or f"User {phone_number}", "phoneNumber": phone_number},
        )
        assert response.status_code == 201, response.text
        return FriendClient(client, response.json())

    return _create_user


@pytest.fixture
def add_users(db):
    """Insert users straight into the database, returns their ids"""
    def _add_users(count):
        users = [
            User(full_name=f"User {i}", phone_number=f"+1666{next(_phone_numbers)}")
            for i in range(count)
        ]
        db.add_all(users)
        db.commit()
        return [u.id for u in users]

    return _add_users


@pytest.fixture
def befriend(db):
    """Store an accepted friendship as its two accepted edges"""
    def _befriend(user_id, friend_user_id):
        db.add_all([
            Friendship(user_id=user_id, friend_user_id=friend_user_id, status=FriendshipStatus.ACCEPTED),
            Friendship(user_id=friend_user_id, friend_user_id=user_id, status=FriendshipStatus.ACCEPTED),
        ])
        db.commit()

    return _befriend
