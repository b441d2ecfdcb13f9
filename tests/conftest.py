import pytest
from fastapi.testclient import TestClient

from frontdesk.domain.models.room import Room, RoomStatus, RoomType
from frontdesk.domain.schemas.auth import SessionClaims
from frontdesk.infrastructure.repositories.guest_repository import InMemoryGuestStayRepository
from frontdesk.infrastructure.repositories.room_repository import InMemoryRoomRepository
from frontdesk.infrastructure.repositories.user_repository import InMemoryUserRepository
from frontdesk.infrastructure.store import InMemoryStore, get_store

from tests.factories import DEFAULT_EMAIL, DEFAULT_PASSWORD


@pytest.fixture
def store():
    return InMemoryStore(
        rooms=[
            Room(id="101", type=RoomType.SINGLE, rate=100, status=RoomStatus.AVAILABLE),
            Room(id="202", type=RoomType.DOUBLE, rate=150, status=RoomStatus.OCCUPIED),
        ]
    )


@pytest.fixture
def users(store):
    return InMemoryUserRepository(store)


@pytest.fixture
def rooms(store):
    return InMemoryRoomRepository(store)


@pytest.fixture
def guests(store):
    return InMemoryGuestStayRepository(store)


@pytest.fixture
def claims():
    return SessionClaims(id="user-1", email=DEFAULT_EMAIL, phone=None, role="receptionist")


@pytest.fixture
def client():
    """App client over the process-wide store, re-seeded for every test."""
    from frontdesk.main import app

    get_store().reset()
    with TestClient(app) as test_client:
        yield test_client
    get_store().reset()


@pytest.fixture
def auth_headers(client):
    response = client.post(
        "/api/auth/login",
        json={"identifier": DEFAULT_EMAIL, "password": DEFAULT_PASSWORD},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['accessToken']}"}
