"""Line assembly: turns continued prompt lines into one command line."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .history import History

logger = logging.getLogger(__name__)

CONTINUATION = "\\"


def strip_continuation(line: str) -> str:
    """Drop a trailing continuation marker, if there is one."""
    stripped = line.rstrip()
    if stripped.endswith(CONTINUATION):
        return stripped[:-1]
    return stripped


def minimize(line: str) -> str:
    r"""Strip surrounding whitespace and a trailing continuation marker.

    A single trailing space survives when the marker was preceded by
    whitespace, so continued lines join as words::

        "  foo \" then "bar"  ->  "foo bar"
        "  foo\"  then "bar"  ->  "foobar"
    """
    cmd = strip_continuation(line)
    rpad = " " if cmd.endswith(" ") else ""
    return f"{cmd.strip()}{rpad}"


def read_command(
    prompt: str,
    *,
    input_func: Callable[[str], str] | None = None,
    history: History | None = None,
) -> str:
    """Read lines until one does not end in a continuation marker.

    ``input_func`` defaults to the builtin ``input``. ``EOFError`` and
    ``KeyboardInterrupt`` propagate.
    """
    read_line = input_func or input
    cmd_lines: list[str] = []
    while True:
        line = read_line(f"{prompt} ").rstrip()
        if line and history is not None:
            history.append(line)
        cmd_lines.append(minimize(line))
        if not line.endswith(CONTINUATION):
            break
        logger.debug(f"Continuing command after {line!r}")
    return "".join(cmd_lines)


__all__ = ["CONTINUATION", "minimize", "read_command", "strip_continuation"]
