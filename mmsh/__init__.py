"""mmsh package: parses compound command lines into linked commands."""

from .command import Command, CommandFragment, Fragment, Operator, OperatorFragment
from .exceptions import DanglingPipe, MalformedRedirection, ParseError
from .history import History, MemoryHistory, ReadlineHistory
from .ids import IdGenerator, SequentialIds, uuid_ids
from .parser import cmd_from, io_connect, parse, parts_from, split_subcommands, unparse
from .reader import minimize, read_command, strip_continuation

__all__ = [
    "parse",
    "unparse",
    "Command",
    "Operator",
    "Fragment",
    "CommandFragment",
    "OperatorFragment",
    "ParseError",
    "MalformedRedirection",
    "DanglingPipe",
    "split_subcommands",
    "parts_from",
    "cmd_from",
    "io_connect",
    "read_command",
    "minimize",
    "strip_continuation",
    "History",
    "MemoryHistory",
    "ReadlineHistory",
    "IdGenerator",
    "SequentialIds",
    "uuid_ids",
]
