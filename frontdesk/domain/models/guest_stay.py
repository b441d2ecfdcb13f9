"""GuestStay domain model - one check-in tying a guest to a room."""

from dataclasses import dataclass
from datetime import datetime

CHECKED_IN = "Checked-In"


@dataclass(frozen=True)
class GuestStay:
    id: str
    name: str
    contact: str
    room_number: str
    checkin_time: datetime  # timezone-aware, UTC
    checked_in_by: str
    email: str = ""
    id_type: str = ""
    id_number: str = ""
    nationality: str = ""
    adults: int = 1
    children: int = 0
    expected_checkout: str = ""
    notes: str = ""
    status: str = CHECKED_IN

    @property
    def head_count(self) -> int:
        return self.adults + self.children

    def __repr__(self):
        return f"<GuestStay {self.name} room={self.room_number}>"
