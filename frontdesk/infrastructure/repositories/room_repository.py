"""
In-memory implementation of the Room Repository.
"""

from typing import Dict

from frontdesk.core.exceptions import ConflictError, NotFoundError
from frontdesk.domain.models.room import Room, RoomStatus
from frontdesk.domain.repositories.room_repository import RoomRepository
from frontdesk.infrastructure.repositories.base_repository import InMemoryRepository
from frontdesk.infrastructure.store import InMemoryStore


class InMemoryRoomRepository(InMemoryRepository[Room], RoomRepository):
    def __init__(self, store: InMemoryStore):
        super().__init__(store, lambda s: s.rooms)

    def count_by_status(self) -> Dict[RoomStatus, int]:
        counts = {status: 0 for status in RoomStatus}
        with self.store.lock:
            for room in self.items:
                counts[room.status] += 1
        return counts

    def occupy(self, room_id: str) -> Room:
        with self.store.lock:
            room = self.get_by_id(room_id)
            if room is None:
                raise NotFoundError(f"Room {room_id} not found.", details={"room": room_id})
            if not room.is_available:
                raise ConflictError(
                    f"Room {room_id} is currently {room.status.value}. Cannot check-in.",
                    details={"room": room_id, "status": room.status.value},
                )
            room.status = RoomStatus.OCCUPIED
            return room
