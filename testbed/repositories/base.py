"""Base repository interface and in-memory implementation."""

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from testbed.repositories.locking import ReadWriteLock

T = TypeVar('T')


class Repository(ABC, Generic[T]):
    """
    Base repository interface.

    Abstracts data access so services never touch the storage directly.
    """

    @abstractmethod
    def get(self, id: int) -> Optional[T]:
        """Get entity by ID."""
        pass

    @abstractmethod
    def list(self) -> List[T]:
        """List all entities."""
        pass

    @abstractmethod
    def create(self, build: Callable[[int], T]) -> T:
        """Store a new entity built around the next free ID."""
        pass

    @abstractmethod
    def delete(self, id: int) -> bool:
        """Delete entity by ID. Returns True if deleted, False if not found."""
        pass


class InMemoryRepository(Repository[T]):
    """
    Keyed in-memory collection guarded by one reader/writer lock.

    Entities are dataclasses. Every read hands out a copy, so callers can
    never observe or mutate stored state outside the lock. IDs come from a
    counter that only grows: an ID freed by delete is never handed out
    again.
    """

    def __init__(self):
        self._items: Dict[int, T] = {}
        self._next_id = 1
        self._lock = ReadWriteLock()

    def get(self, id: int) -> Optional[T]:
        """Get a copy of the entity, or None."""
        with self._lock.read_locked():
            item = self._items.get(id)
            return replace(item) if item is not None else None

    def list(self) -> List[T]:
        """Snapshot of all entities. Order is not guaranteed."""
        with self._lock.read_locked():
            return [replace(item) for item in self._items.values()]

    def create(self, build: Callable[[int], T]) -> T:
        """Assign the next ID, build the entity and store it atomically."""
        with self._lock.write_locked():
            item = build(self._next_id)
            self._items[self._next_id] = item
            self._next_id += 1
            return replace(item)

    def delete(self, id: int) -> bool:
        """Remove the entity entirely."""
        with self._lock.write_locked():
            if id in self._items:
                del self._items[id]
                return True
            return False

    def _merge(self, id: int, apply: Callable[[T], None]) -> Optional[T]:
        """Read, modify and write back one entity under a single write lock."""
        with self._lock.write_locked():
            item = self._items.get(id)
            if item is None:
                return None
            apply(item)
            return replace(item)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._items)
