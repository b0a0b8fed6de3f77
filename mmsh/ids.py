"""Identifier generators for commands."""

from __future__ import annotations

import itertools
import threading
import uuid
from collections.abc import Callable

IdGenerator = Callable[[], str]


def uuid_ids() -> str:
    return str(uuid.uuid4())


class SequentialIds:
    """Thread-safe ``prefix-N`` generator, handy for stable output."""

    def __init__(self, prefix: str = "cmd", start: int = 1) -> None:
        self.prefix = prefix
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            value = next(self._counter)
        return f"{self.prefix}-{value}"


__all__ = ["IdGenerator", "SequentialIds", "uuid_ids"]
