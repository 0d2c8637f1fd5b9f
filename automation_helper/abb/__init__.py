# automation_helper/abb/__init__.py
from .store import ReferenceStore
from .commands import COMMANDS, CommandEntry, format_command, format_command_table
from .quickref import QUICK_REFERENCE, QuickRefEntry
from .handler import (
    ABB_USAGE,
    UNKNOWN_COMMAND,
    UNKNOWN_SUBCOMMAND,
    UNKNOWN_TOPIC,
    handle_abb,
    lookup_topic,
)

__all__ = [
    "ReferenceStore",
    "COMMANDS",
    "CommandEntry",
    "format_command",
    "format_command_table",
    "QUICK_REFERENCE",
    "QuickRefEntry",
    "ABB_USAGE",
    "UNKNOWN_COMMAND",
    "UNKNOWN_SUBCOMMAND",
    "UNKNOWN_TOPIC",
    "handle_abb",
    "lookup_topic",
]
