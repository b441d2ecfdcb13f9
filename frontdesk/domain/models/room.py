"""Room domain model - fixed inventory seeded at startup."""

from dataclasses import dataclass
from enum import Enum


class RoomType(str, Enum):
    SINGLE = "Single"
    DOUBLE = "Double"
    SUITE = "Suite"


class RoomStatus(str, Enum):
    AVAILABLE = "Available"
    OCCUPIED = "Occupied"


@dataclass
class Room:
    id: str
    type: RoomType
    rate: float
    status: RoomStatus = RoomStatus.AVAILABLE

    def __post_init__(self):
        if self.rate <= 0:
            raise ValueError(f"Room {self.id} rate must be positive")

    @property
    def is_available(self) -> bool:
        return self.status == RoomStatus.AVAILABLE

    def __repr__(self):
        return f"<Room {self.id} {self.status.value}>"
