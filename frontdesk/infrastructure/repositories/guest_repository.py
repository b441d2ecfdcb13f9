"""
In-memory implementation of the GuestStay Repository.
"""

from datetime import datetime
from typing import List

from frontdesk.domain.models.guest_stay import GuestStay
from frontdesk.domain.repositories.guest_repository import GuestStayRepository
from frontdesk.infrastructure.repositories.base_repository import InMemoryRepository
from frontdesk.infrastructure.store import InMemoryStore


class InMemoryGuestStayRepository(InMemoryRepository[GuestStay], GuestStayRepository):
    def __init__(self, store: InMemoryStore):
        super().__init__(store, lambda s: s.guests)

    def list_by_status(self, status: str) -> List[GuestStay]:
        with self.store.lock:
            return [stay for stay in self.items if stay.status == status]

    def list_checked_in_between(self, start: datetime, end: datetime) -> List[GuestStay]:
        with self.store.lock:
            return [stay for stay in self.items if start <= stay.checkin_time <= end]
