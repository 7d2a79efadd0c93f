from __future__ import annotations

from collections import deque
from typing import Deque, Generic, Optional, TypeVar

from match3.errors import QueueEmpty, QueueFull

T = TypeVar("T")


class Fifo(Generic[T]):
    """First-in first-out queue that fails fast instead of blocking.

    ``push`` raises ``QueueFull`` once ``capacity`` items are waiting and
    ``pop`` raises ``QueueEmpty`` when nothing is queued. A capacity of None
    means unbounded. No locking: one producer and one consumer, same thread.
    """

    def __init__(self, capacity: Optional[int] = None):
        self.capacity = capacity
        self._items: Deque[T] = deque()

    def push(self, item: T) -> None:
        if self.capacity is not None and len(self._items) >= self.capacity:
            raise QueueFull(f"{type(self).__name__} is full ({self.capacity} items)")
        self._items.append(item)

    def pop(self) -> T:
        if not self._items:
            raise QueueEmpty(f"{type(self).__name__} is empty")
        return self._items.popleft()

    def peek(self) -> T:
        if not self._items:
            raise QueueEmpty(f"{type(self).__name__} is empty")
        return self._items[0]

    def free_capacity(self) -> Optional[int]:
        if self.capacity is None:
            return None
        return self.capacity - len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)
