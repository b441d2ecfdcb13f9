"""
In-memory data store.

Holds the process-wide users, rooms and guest stays behind one re-entrant
lock. State lives only as long as the process.
"""

import threading
from typing import Iterable, List, Optional

from frontdesk.domain.models.guest_stay import GuestStay
from frontdesk.domain.models.room import Room, RoomStatus, RoomType
from frontdesk.domain.models.user import User

DEFAULT_ROOMS = (
    ("101", RoomType.SINGLE, 100, RoomStatus.AVAILABLE),
    ("102", RoomType.SINGLE, 100, RoomStatus.AVAILABLE),
    ("201", RoomType.DOUBLE, 150, RoomStatus.AVAILABLE),
    ("202", RoomType.DOUBLE, 150, RoomStatus.OCCUPIED),
    ("301", RoomType.SUITE, 250, RoomStatus.AVAILABLE),
)


def default_rooms() -> List[Room]:
    return [Room(id=id, type=type, rate=rate, status=status) for id, type, rate, status in DEFAULT_ROOMS]


class InMemoryStore:
    """Process-wide state shared by every repository."""

    def __init__(self, rooms: Optional[Iterable[Room]] = None):
        self.lock = threading.RLock()
        self.users: List[User] = []
        self.rooms: List[Room] = []
        self.guests: List[GuestStay] = []
        self.reset(rooms)

    def reset(self, rooms: Optional[Iterable[Room]] = None) -> None:
        """Drop all users and stays and re-seed the room inventory."""
        with self.lock:
            self.users.clear()
            self.guests.clear()
            self.rooms[:] = list(rooms) if rooms is not None else default_rooms()
            ids = [room.id for room in self.rooms]
            if len(ids) != len(set(ids)):
                raise ValueError("Room ids must be unique")


store = InMemoryStore()


def get_store() -> InMemoryStore:
    return store
