"""Command-line interface for mmsh."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from . import config
from .command import Command
from .exceptions import ParseError
from .history import History, ReadlineHistory
from .parser import parse
from .reader import read_command

logger = logging.getLogger(__name__)

EXIT_COMMANDS = {":q", "exit", "quit"}


def _add_common_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print parsed commands as a JSON array.",
    )
    parser.add_argument(
        "--ids",
        choices=config.ID_SCHEMES,
        default=None,
        help=f"Command id generator (default: {config.ID_SCHEME}).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"Logging level (default: {config.LOG_LEVEL}).",
    )


def _configure_logging(level: str | None) -> None:
    logging.basicConfig(
        level=(level or config.LOG_LEVEL).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _write_commands(commands: Sequence[Command], as_json: bool) -> None:
    if as_json:
        sys.stdout.write(json.dumps([command.to_dict() for command in commands], indent=2) + "\n")
        return
    for command in commands:
        fields = [command.id, command.name, command.args, command.input, command.output]
        sys.stdout.write("\t".join(field if field else "-" for field in fields) + "\n")


def _run_parse(args: argparse.Namespace) -> int:
    try:
        commands = parse(args.text, id_generator=args.id_generator)
    except ParseError as exc:
        sys.stderr.write(f"mmsh: {exc}\n")
        return 2
    _write_commands(commands, args.json)
    return 0


def _make_history() -> History | None:
    try:
        return ReadlineHistory()
    except ImportError:
        logger.info("readline is not available; history disabled")
        return None


def _run_shell(args: argparse.Namespace) -> int:
    history = _make_history()
    try:
        while True:
            line = read_command(args.prompt, history=history)
            if line.strip() in EXIT_COMMANDS:
                return 0
            if not line.strip():
                continue
            try:
                commands = parse(line, id_generator=args.id_generator)
            except ParseError as exc:
                sys.stderr.write(f"mmsh: {exc}\n")
                continue
            _write_commands(commands, args.json)
    except (EOFError, KeyboardInterrupt):
        return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="mmsh")
    subparsers = parser.add_subparsers(dest="command_name", required=True)

    parse_parser = subparsers.add_parser("parse", help="Parse a single command line")
    _add_common_flags(parse_parser)
    parse_parser.add_argument("text", help="Command line to parse")
    parse_parser.set_defaults(func=_run_parse)

    shell_parser = subparsers.add_parser("shell", help="Start an interactive parse loop")
    _add_common_flags(shell_parser)
    shell_parser.add_argument(
        "--prompt",
        default=config.PROMPT,
        help=f"Prompt to display (default: {config.PROMPT!r}).",
    )
    shell_parser.set_defaults(func=_run_shell)

    args = parser.parse_args(argv)
    try:
        args.id_generator = config.make_id_generator(args.ids)
    except ValueError as exc:
        parser.error(str(exc))
    _configure_logging(args.log_level)
    exit_code = args.func(args)
    raise SystemExit(exit_code)


__all__ = ["main"]
