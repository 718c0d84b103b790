"""In-memory keyed repository used for meal plans and carts.

Exposes get / put / list by id so a persistent backing store can replace it
without touching planning or cart logic. FastAPI serves sync endpoints from a
thread pool, so the map is guarded by a lock and callers mutating a single
entity hold `lock_for(entity_id)` for the duration of the mutation.
"""
from __future__ import annotations
from threading import Lock, RLock
from typing import Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class InMemoryRepository(Generic[T]):
    def __init__(self):
        self._items: Dict[str, T] = {}
        self._lock = Lock()
        self._entity_locks: Dict[str, RLock] = {}

    def get(self, entity_id: str) -> Optional[T]:
        with self._lock:
            return self._items.get(entity_id)

    def put(self, entity_id: str, item: T) -> T:
        with self._lock:
            self._items[entity_id] = item
        return item

    def list(self) -> List[T]:
        '''Returns items in insertion order.'''
        with self._lock:
            return list(self._items.values())

    def lock_for(self, entity_id: str) -> RLock:
        with self._lock:
            lock = self._entity_locks.get(entity_id)
            if lock is None:
                lock = self._entity_locks[entity_id] = RLock()
            return lock

    def __contains__(self, entity_id: str) -> bool:
        with self._lock:
            return entity_id in self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
