"""
``abb`` command: re-dispatches on its first argument to the reference tables.

Every lookup-capable sub-command follows the same three-way shape:
no key lists the keys, a known key prints the entry, anything else
prints a fixed "unknown" message.
"""

from __future__ import annotations

import logging
from typing import Callable, List, TypeVar

from .commands import COMMANDS, format_command, format_command_table
from .quickref import QUICK_REFERENCE
from .store import ReferenceStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

ABB_USAGE = """Usage: abb <topic> [subtopic]
Available topics:
1. command  - Show RAPID command details
2. quickref - Show programming reference
3. list     - List all commands with descriptions
4. help     - Show this help message

Examples:
  abb command move_j     - Show MoveJ command details
  abb quickref io_handling - Show I/O handling guide
  abb list               - List all available commands"""

UNKNOWN_COMMAND = "Unknown ABB command. Type 'abb command' to see available commands."
UNKNOWN_TOPIC = "Unknown topic. Type 'abb quickref' to see available topics."
UNKNOWN_SUBCOMMAND = "Unknown ABB subcommand. Available: command, quickref, list, help"


def lookup_topic(
    store: ReferenceStore[T],
    args: List[str],
    *,
    list_header: str,
    render: Callable[[T], str],
    not_found: str,
) -> str:
    """List the store's keys, render a single entry, or report a miss."""
    if not args:
        return f"{list_header}\n" + ", ".join(store.keys())
    key = args[0]
    entry = store.get(key)
    if entry is None:
        logger.debug(f"Reference lookup miss for key '{key}'")
        return not_found
    return render(entry)


async def handle_abb(args: List[str]) -> str:
    if not args:
        return ABB_USAGE

    sub, rest = args[0], args[1:]
    if sub == "command":
        return lookup_topic(
            COMMANDS,
            rest,
            list_header="Available commands:",
            render=format_command,
            not_found=UNKNOWN_COMMAND,
        )
    if sub == "quickref":
        return lookup_topic(
            QUICK_REFERENCE,
            rest,
            list_header="Available quick reference topics:",
            render=lambda entry: entry.text,
            not_found=UNKNOWN_TOPIC,
        )
    if sub == "list":
        return format_command_table()
    if sub == "help":
        return ABB_USAGE
    return UNKNOWN_SUBCOMMAND
