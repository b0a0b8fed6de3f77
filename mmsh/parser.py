"""Parser for compound command lines.

A command line such as ``foo | bar; baz < fizz.txt`` is split along its
control operators, every fragment becomes a :class:`Command`, and a final
wiring pass connects piped commands::

    >>> [c.name for c in parse("foo | bar; baz < fizz.txt")]
    ['foo', '|', 'bar', ';', 'baz']
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import replace

from .command import Command, CommandFragment, Fragment, Operator, OperatorFragment
from .exceptions import DanglingPipe, MalformedRedirection
from .ids import IdGenerator, uuid_ids

logger = logging.getLogger(__name__)

INPUT_MARKER = "<"
OUTPUT_MARKER = ">"

_SUBCOMMAND_RE = re.compile(r"(&&|\*|\||;)")
_REDIRECT_RE = re.compile(r"([<>])")
_OPERATORS = {op.value: op for op in Operator}


# ----------------------------------------------------------------------
# Splitting
# ----------------------------------------------------------------------
def split_subcommands(multi_cmd_str: str) -> list[str]:
    """Split a command line on control operators, keeping the operators.

    ``"foo | bar; baz < fizz.txt"`` gives
    ``["foo", "|", "bar", ";", "baz < fizz.txt"]``. Empty fragments are
    kept, so command text and operators always alternate.
    """
    return [fragment.strip() for fragment in _SUBCOMMAND_RE.split(multi_cmd_str)]


def fragments_from(multi_cmd_str: str) -> list[Fragment]:
    return [_tag(fragment) for fragment in split_subcommands(multi_cmd_str)]


def _tag(fragment: str) -> Fragment:
    operator = _OPERATORS.get(fragment)
    if operator is not None:
        return OperatorFragment(operator)
    return CommandFragment(fragment)


def parts_from(single_cmd_str: str) -> list[str]:
    """Tokenize one command fragment.

    ``"foo bar1 bar2 < baz > fizz"`` gives
    ``["foo", "bar1", "bar2", "<", "baz", ">", "fizz"]``.
    """
    parts: list[str] = []
    for segment in _REDIRECT_RE.split(single_cmd_str):
        parts.extend(segment.split())
    return parts


# ----------------------------------------------------------------------
# Field extraction
# ----------------------------------------------------------------------
def command_name(parts: Sequence[str]) -> str:
    return parts[0] if parts else ""


def command_args(parts: Sequence[str]) -> str:
    cut = min(_index_or_len(parts, INPUT_MARKER), _index_or_len(parts, OUTPUT_MARKER))
    return " ".join(parts[1:cut])


def input_target(parts: Sequence[str]) -> str | None:
    return _redirect_target(parts, INPUT_MARKER)


def output_target(parts: Sequence[str]) -> str | None:
    return _redirect_target(parts, OUTPUT_MARKER)


def _index_or_len(parts: Sequence[str], token: str) -> int:
    try:
        return parts.index(token)
    except ValueError:
        return len(parts)


def _redirect_target(parts: Sequence[str], marker: str) -> str | None:
    idx = _index_or_len(parts, marker)
    if idx == len(parts):
        return None
    if idx + 1 >= len(parts):
        fragment = " ".join(parts)
        logger.warning(f"Redirection marker {marker!r} has no target in {fragment!r}")
        raise MalformedRedirection(marker, fragment)
    return parts[idx + 1]


# ----------------------------------------------------------------------
# Building and wiring
# ----------------------------------------------------------------------
def cmd_from(fragment: Fragment | str, id_generator: IdGenerator | None = None) -> Command:
    """Build a :class:`Command` with a fresh id from one fragment."""
    new_id = id_generator or uuid_ids
    if isinstance(fragment, str):
        fragment = _tag(fragment.strip())
    if isinstance(fragment, OperatorFragment):
        return Command(id=new_id(), name=fragment.text, operator=fragment.operator)
    parts = parts_from(fragment.text)
    return Command(
        id=new_id(),
        name=command_name(parts),
        args=command_args(parts),
        input=input_target(parts),
        output=output_target(parts),
    )


def io_connect(cmd_list: Sequence[Command]) -> list[Command]:
    """Default every output and connect piped commands.

    Each command without an output gets its own id as output. The command
    right after a ``|`` takes the id of the command right before it as
    input, unless it already redirects its input.
    """
    wired: list[Command] = []
    for idx, command in enumerate(cmd_list):
        if command.operator is Operator.PIPE:
            _check_pipe(cmd_list, idx)
        if command.output is None:
            command = replace(command, output=command.id, default_output=True)
        if idx >= 2 and cmd_list[idx - 1].operator is Operator.PIPE and command.input is None:
            source = cmd_list[idx - 2]
            logger.debug(f"Piping {source.name!r} ({source.id}) into {command.name!r} ({command.id})")
            command = replace(command, input=source.id, piped_input=True)
        wired.append(command)
    return wired


def _check_pipe(cmd_list: Sequence[Command], idx: int) -> None:
    if idx == 0 or not _is_producer(cmd_list[idx - 1]):
        logger.warning(f"Pipe at position {idx} has no command before it")
        raise DanglingPipe(idx, "before")
    if idx + 1 >= len(cmd_list) or not _is_producer(cmd_list[idx + 1]):
        logger.warning(f"Pipe at position {idx} has no command after it")
        raise DanglingPipe(idx, "after")


def _is_producer(command: Command) -> bool:
    return not command.is_operator and not command.is_empty


def parse(multi_cmd_str: str, *, id_generator: IdGenerator | None = None) -> list[Command]:
    """Parse a full command line into wired :class:`Command` values.

    Raises :class:`MalformedRedirection` or :class:`DanglingPipe`; no
    partial list is returned.
    """
    new_id = id_generator or uuid_ids
    fragments = fragments_from(multi_cmd_str)
    logger.debug(f"Split {multi_cmd_str!r} into {len(fragments)} fragments")
    return io_connect([cmd_from(fragment, new_id) for fragment in fragments])


def unparse(cmd_list: Iterable[Command]) -> str:
    """Rebuild a command line from parsed commands.

    Ids assigned by wiring are dropped; literal redirection targets are
    written back.
    """
    pieces: list[str] = []
    for command in cmd_list:
        if command.is_operator:
            pieces.append(command.name)
            continue
        if command.is_empty:
            continue
        words = [command.name]
        if command.args:
            words.append(command.args)
        if command.input is not None and not command.piped_input:
            words.extend([INPUT_MARKER, command.input])
        if command.output is not None and not command.default_output:
            words.extend([OUTPUT_MARKER, command.output])
        pieces.append(" ".join(words))
    return " ".join(pieces)


__all__ = [
    "INPUT_MARKER",
    "OUTPUT_MARKER",
    "cmd_from",
    "command_args",
    "command_name",
    "fragments_from",
    "input_target",
    "io_connect",
    "output_target",
    "parse",
    "parts_from",
    "split_subcommands",
    "unparse",
]
