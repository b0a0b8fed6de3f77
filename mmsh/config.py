"""Configuration settings for mmsh.

Environment variables:
- MMSH_PROMPT: Prompt shown by the interactive shell (default: ">")
- MMSH_LOG_LEVEL: Log level for the command-line tool (default: "WARNING")
- MMSH_ID_SCHEME: Command id generator, "uuid" or "sequential" (default: "uuid")
"""

import os

from .ids import IdGenerator, SequentialIds, uuid_ids

PROMPT = os.environ.get("MMSH_PROMPT", ">")
LOG_LEVEL = os.environ.get("MMSH_LOG_LEVEL", "WARNING").upper()
ID_SCHEME = os.environ.get("MMSH_ID_SCHEME", "uuid").lower()

ID_SCHEMES = ("uuid", "sequential")


def make_id_generator(scheme: str | None = None) -> IdGenerator:
    """Return the id generator for ``scheme`` (default: ``ID_SCHEME``)."""
    scheme = (scheme or ID_SCHEME).lower()
    if scheme == "uuid":
        return uuid_ids
    if scheme == "sequential":
        return SequentialIds()
    raise ValueError(f"Unknown id scheme '{scheme}'. Expected one of: {', '.join(ID_SCHEMES)}")
