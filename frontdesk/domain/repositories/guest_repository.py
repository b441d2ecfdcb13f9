"""
Guest Stay Repository Interface.
Defines specific data access operations for check-in records.
"""

from datetime import datetime
from typing import List

from frontdesk.domain.repositories.base import BaseRepository
from frontdesk.domain.models.guest_stay import GuestStay


class GuestStayRepository(BaseRepository[GuestStay]):
    """Interface for GuestStay-specific operations."""

    def list_by_status(self, status: str) -> List[GuestStay]:
        """Stays with the given status, in creation order."""
        ...

    def list_checked_in_between(self, start: datetime, end: datetime) -> List[GuestStay]:
        """Stays with start <= checkin_time <= end, in creation order."""
        ...
