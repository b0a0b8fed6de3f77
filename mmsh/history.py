"""History sinks for lines read from the prompt."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


class History(Protocol):
    def append(self, entry: str) -> None: ...


@dataclass
class MemoryHistory:
    entries: list[str] = field(default_factory=list)

    def append(self, entry: str) -> None:
        self.entries.append(entry)


class ReadlineHistory:
    """Pushes entries onto the process-wide readline history."""

    def __init__(self) -> None:
        import readline

        readline.set_auto_history(False)
        self._readline = readline

    def append(self, entry: str) -> None:
        self._readline.add_history(entry)


__all__ = ["History", "MemoryHistory", "ReadlineHistory"]
