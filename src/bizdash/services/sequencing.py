from __future__ import annotations

import itertools
import threading


class RequestSequencer:
    """
    Monotonic request tickets per view key.

    A response may be applied only if no newer ticket for the same key has
    already been applied; older responses are dropped.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._counter = itertools.count(1)
        self._applied: dict[str, int] = {}

    def issue(self, key: str) -> int:
        with self._lock:
            return next(self._counter)

    def try_apply(self, key: str, ticket: int) -> bool:
        with self._lock:
            if ticket < self._applied.get(key, 0):
                return False
            self._applied[key] = ticket
            return True
