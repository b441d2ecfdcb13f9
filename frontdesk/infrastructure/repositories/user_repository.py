"""
In-memory implementation of the User Repository.
"""

from typing import Optional

from frontdesk.domain.models.user import User
from frontdesk.domain.repositories.user_repository import UserRepository
from frontdesk.infrastructure.repositories.base_repository import InMemoryRepository
from frontdesk.infrastructure.store import InMemoryStore


class InMemoryUserRepository(InMemoryRepository[User], UserRepository):
    def __init__(self, store: InMemoryStore):
        super().__init__(store, lambda s: s.users)

    def get_by_email(self, email: str) -> Optional[User]:
        return self.find_by_identifier(email=email, phone=None)

    def get_by_phone(self, phone: str) -> Optional[User]:
        return self.find_by_identifier(email=None, phone=phone)

    def find_by_identifier(self, email: Optional[str], phone: Optional[str]) -> Optional[User]:
        with self.store.lock:
            for user in self.items:
                if email and user.email == email:
                    return user
                if phone and user.phone == phone:
                    return user
        return None
