"""
Registry and dispatcher for CLI commands.

Each command is a `Command` dataclass instance holding its name, description,
and async handler.  The registry is built once by `build_registry` and is
read-only afterwards; the REPL receives it explicitly.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Awaitable, Callable, Iterable, List, Mapping, Optional

from .abb import handle_abb
from .assistant import AIHandler
from .model_config import AssistantConfig
from .sensors import handle_sensor

logger = logging.getLogger(__name__)

Handler = Callable[[List[str]], Awaitable[str]]
Registry = Mapping[str, "Command"]


@dataclass(frozen=True, slots=True)
class Command:
    name: str
    description: str
    handler: Handler


def make_registry(commands: Iterable[Command]) -> Registry:
    """Freeze commands into a read-only name -> Command mapping. Raises on duplicates."""
    table = {}
    for command in commands:
        if command.name in table:
            raise ValueError(f"Duplicate CLI command registered: {command.name}")
        table[command.name] = command
    return MappingProxyType(table)


def build_registry(config: AssistantConfig, ai_handler: Optional[AIHandler] = None) -> Registry:
    """The standard command set: sensor, ai, abb."""
    return make_registry([
        Command("sensor", "Generate sensor code", handle_sensor),
        Command("ai", "Get AI assistance with ABB RAPID code", ai_handler or AIHandler(config)),
        Command("abb", "Get ABB robot programming information and examples", handle_abb),
    ])


def unknown_command_message(word: str) -> str:
    return f"Unknown command: {word}\nType 'help' for available commands"


async def dispatch(registry: Registry, line: str) -> Optional[str]:
    """
    Resolve the first word of `line` against the registry and run its handler.
    Returns None for an empty line.
    """
    tokens = line.split()
    if not tokens:
        return None

    word = tokens[0].lower()
    command = registry.get(word)
    if command is None:
        return unknown_command_message(word)

    logger.debug(f"Dispatching '{word}' with args {tokens[1:]}")
    try:
        return await command.handler(tokens[1:])
    except Exception as e:
        logger.error(f"Command '{word}' failed", exc_info=True)
        return f"Error running '{word}': {e}"


def help_text(registry: Registry) -> str:
    lines = ["", "Automation Helper CLI", "====================", "", "Available commands:"]
    for name in sorted(registry):
        lines.append(f"  {name}: {registry[name].description}")
    lines.append("")
    lines.append("Type 'exit' to quit")
    return "\n".join(lines)
