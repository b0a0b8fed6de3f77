"""Parser exceptions."""

from __future__ import annotations


class ParseError(ValueError):
    """Base class for malformed command-line input."""


class MalformedRedirection(ParseError):
    """A ``<`` or ``>`` marker with no target after it."""

    def __init__(self, marker: str, fragment: str = "") -> None:
        self.marker = marker
        self.fragment = fragment
        super().__init__(f"Missing redirection target after {marker}")


class DanglingPipe(ParseError):
    """A pipe with no command on one of its sides."""

    def __init__(self, position: int, side: str) -> None:
        self.position = position
        self.side = side
        super().__init__(f"Missing command {side} pipe at position {position}")


__all__ = ["ParseError", "MalformedRedirection", "DanglingPipe"]
