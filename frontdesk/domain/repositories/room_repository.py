"""
Room Repository Interface.
Defines specific data access operations for the room inventory.
"""

from typing import Dict

from frontdesk.domain.repositories.base import BaseRepository
from frontdesk.domain.models.room import Room, RoomStatus


class RoomRepository(BaseRepository[Room]):
    """Interface for Room-specific operations."""

    def count_by_status(self) -> Dict[RoomStatus, int]:
        """Room count for every status, zero-filled."""
        ...

    def occupy(self, room_id: str) -> Room:
        """Mark an Available room Occupied.

        Raises NotFoundError for an unknown room and ConflictError when the
        room is not Available.
        """
        ...
