"""Command and fragment types produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Operator(str, Enum):
    """Control operators that separate or relate commands."""

    PIPE = "|"
    SEQUENCE = ";"
    AND = "&&"
    GLOB = "*"


@dataclass(frozen=True, slots=True)
class CommandFragment:
    text: str


@dataclass(frozen=True, slots=True)
class OperatorFragment:
    operator: Operator

    @property
    def text(self) -> str:
        return self.operator.value


Fragment = CommandFragment | OperatorFragment


@dataclass(frozen=True, slots=True)
class Command:
    """One command (or operator) from a compound command line.

    ``input`` and ``output`` hold stream identifiers: either a literal
    redirection target or the id of a command. ``output`` is ``None`` only
    before wiring. ``piped_input`` and ``default_output`` mark the values
    filled in by wiring rather than typed by the user.
    """

    id: str
    name: str
    args: str = ""
    input: str | None = None
    output: str | None = None
    operator: Operator | None = None
    piped_input: bool = False
    default_output: bool = False

    @property
    def is_operator(self) -> bool:
        return self.operator is not None

    @property
    def is_empty(self) -> bool:
        return not self.name

    def to_dict(self) -> dict[str, str | None]:
        return {
            "id": self.id,
            "name": self.name,
            "args": self.args,
            "input": self.input,
            "output": self.output,
        }


__all__ = ["Command", "CommandFragment", "Fragment", "Operator", "OperatorFragment"]
