"""
In-memory implementation of the Base Repository.
"""

from typing import Callable, Generic, List, Optional, TypeVar

from frontdesk.domain.repositories.base import BaseRepository
from frontdesk.infrastructure.store import InMemoryStore

ModelType = TypeVar("ModelType")


class InMemoryRepository(BaseRepository[ModelType], Generic[ModelType]):
    """Generic repository over one of the store's lists."""

    def __init__(self, store: InMemoryStore, items: Callable[[InMemoryStore], List[ModelType]]):
        self.store = store
        self._items = items

    @property
    def items(self) -> List[ModelType]:
        return self._items(self.store)

    def transaction(self):
        return self.store.lock

    def get_by_id(self, id: str) -> Optional[ModelType]:
        with self.store.lock:
            return next((obj for obj in self.items if obj.id == id), None)

    def list(self) -> List[ModelType]:
        with self.store.lock:
            return list(self.items)

    def add(self, obj: ModelType) -> ModelType:
        with self.store.lock:
            self.items.append(obj)
        return obj

    def count(self) -> int:
        with self.store.lock:
            return len(self.items)
