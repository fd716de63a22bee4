"""Single-slot reply cache with a fixed time-to-live."""

from __future__ import annotations

import threading
import time
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class ReplyCache(Generic[T]):
    """Hold one value until ``ttl`` seconds have passed since it was stored."""

    def __init__(self, ttl: float = 60.0, *, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._lock = threading.Lock()
        self._value: Optional[T] = None
        self._stored_at: Optional[float] = None

    def get(self) -> Optional[T]:
        with self._lock:
            if self._stored_at is None or self._stored_at + self.ttl <= self._clock():
                return None
            return self._value

    def put(self, value: T) -> None:
        with self._lock:
            self._value = value
            self._stored_at = self._clock()

    def clear(self) -> None:
        with self._lock:
            self._value = None
            self._stored_at = None
