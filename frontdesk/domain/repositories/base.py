"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from typing import ContextManager, TypeVar, List, Optional, Protocol

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for generic read/append operations."""

    def get_by_id(self, id: str) -> Optional[T]:
        """Get a single entity by ID."""
        ...

    def list(self) -> List[T]:
        """List all entities in insertion order."""
        ...

    def add(self, obj: T) -> T:
        """Append a new entity."""
        ...

    def count(self) -> int:
        """Number of stored entities."""
        ...

    def transaction(self) -> ContextManager:
        """Hold the store lock so several reads and writes act as one step."""
        ...
