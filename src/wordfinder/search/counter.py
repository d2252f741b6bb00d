"""Process-wide occurrence total shared by the workers."""

from __future__ import annotations

import threading


class OccurrenceCounter:
    """Integer counter whose updates are atomic across threads."""

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def add(self, amount: int) -> int:
        with self._lock:
            self._value += amount
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value
