"""
User Repository Interface.
Defines specific data access operations for front desk accounts.
"""

from typing import Optional

from frontdesk.domain.repositories.base import BaseRepository
from frontdesk.domain.models.user import User


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by normalized email."""
        ...

    def get_by_phone(self, phone: str) -> Optional[User]:
        """Get a user by digits-only phone."""
        ...

    def find_by_identifier(self, email: Optional[str], phone: Optional[str]) -> Optional[User]:
        """Get the first user whose email or phone matches."""
        ...
