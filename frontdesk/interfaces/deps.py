"""
API Dependencies.
"""

from fastapi import Depends

from frontdesk.domain.repositories.guest_repository import GuestStayRepository
from frontdesk.domain.repositories.room_repository import RoomRepository
from frontdesk.domain.repositories.user_repository import UserRepository
from frontdesk.infrastructure.repositories.guest_repository import InMemoryGuestStayRepository
from frontdesk.infrastructure.repositories.room_repository import InMemoryRoomRepository
from frontdesk.infrastructure.repositories.user_repository import InMemoryUserRepository
from frontdesk.infrastructure.store import InMemoryStore, get_store


def get_user_repository(store: InMemoryStore = Depends(get_store)) -> UserRepository:
    """Get user repository instance."""
    return InMemoryUserRepository(store)


def get_room_repository(store: InMemoryStore = Depends(get_store)) -> RoomRepository:
    """Get room repository instance."""
    return InMemoryRoomRepository(store)


def get_guest_repository(store: InMemoryStore = Depends(get_store)) -> GuestStayRepository:
    """Get guest stay repository instance."""
    return InMemoryGuestStayRepository(store)
