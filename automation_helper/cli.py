#!/usr/bin/env python
"""
Interactive command-line interface for the Automation Helper.
Type `help` for the command list, `exit` to quit.
Commands: `abb` (RAPID reference), `sensor` (condition snippets), `ai` (ask a model).
"""

import argparse
import asyncio
import logging
import os
import sys
from typing import Awaitable, Callable, Dict, Optional

from dotenv import load_dotenv
from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document
from prompt_toolkit.history import FileHistory
from prompt_toolkit.styles import Style

from .abb import COMMANDS, QUICK_REFERENCE
from .assistant import AIHandler
from .cli_commands import Registry, build_registry, dispatch, help_text
from .model_config import API_KEY_VAR, load_assistant_config
from .sensors import SENSOR_TEMPLATES

logger = logging.getLogger(__name__)

HISTORY_FILE = os.getenv("AUTOMATION_HELPER_HISTORY_FILE", ".automation_helper_history")
EXIT_WORDS = ("exit",)
PROMPT = "> "

ReadLine = Callable[[str], Awaitable[str]]
Write = Callable[[str], None]

cli_style = Style.from_dict({
    "prompt": "bold cyan",
    "completion-menu.completion": "bg:#1e1e1e #bcbcbc",
    "completion-menu.completion.current": "bg:#005f5f #ffffff bold",
    "completion-menu.meta": "#6c6c6c italic",
})


def configure_logging(verbose: bool = False) -> logging.Handler:
    """File log at LOG_LEVEL, console at WARNING (DEBUG when verbose). Returns the console handler."""
    log_level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_name, logging.INFO)
    log_file = os.getenv("AUTOMATION_HELPER_LOG_FILE", "automation_helper.log")

    # Clear existing handlers to avoid duplication in repeated runs
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)

    file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    file_handler.setLevel(log_level)
    file_handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    root_level = logging.DEBUG if verbose else log_level
    logging.basicConfig(level=root_level, handlers=[file_handler, console_handler])
    return console_handler


class CommandCompleter(Completer):
    """Completes the command word, then `abb`/`sensor` sub-arguments."""

    def __init__(self, registry: Registry):
        self.registry = registry
        self.top_level = {name: cmd.description for name, cmd in registry.items()}
        self.top_level["help"] = "Show available commands"
        for word in EXIT_WORDS:
            self.top_level[word] = "Exit the CLI"

    def _candidates(self, words: list) -> Dict[str, str]:
        """Candidate word -> meta text shown beside it in the menu."""
        if not words:
            return self.top_level
        head = words[0].lower()
        if head == "abb":
            if len(words) == 1:
                return {"command": "", "help": "", "list": "", "quickref": ""}
            if len(words) == 2 and words[1] == "command":
                return {key: entry.name for key, entry in COMMANDS.items()}
            if len(words) == 2 and words[1] == "quickref":
                return {key: entry.topic for key, entry in QUICK_REFERENCE.items()}
        elif head == "sensor":
            if len(words) == 1:
                return {name: "" for name in SENSOR_TEMPLATES}
            if len(words) == 2:
                return {action: "" for action in SENSOR_TEMPLATES.get(words[1], {})}
        return {}

    def get_completions(self, document: Document, complete_event):
        text = document.text_before_cursor
        words = text.split()
        if text and not text[-1].isspace() and words:
            needle = words.pop()
        else:
            needle = ""
        # only the command word is matched case-insensitively
        prefix = needle if words else needle.lower()
        for candidate, meta in sorted(self._candidates(words).items()):
            if candidate.startswith(prefix):
                yield Completion(
                    text=candidate,
                    start_position=-len(needle),
                    display_meta=meta,
                )


def _paint(text: str, code: str, color: bool) -> str:
    return f"\033[{code}m{text}\033[0m" if color else text


async def run_repl(registry: Registry, read_line: ReadLine, write: Write = print, color: bool = True) -> None:
    """
    Read-eval-print loop. Returns when input ends or the user types `exit`.
    One line is fully handled, including any awaited AI call, before the next read.
    """
    write(_paint("Welcome to Automation Helper CLI!", "1;96", color))
    write(_paint("Type 'help' for available commands or 'exit' to quit", "90", color))

    while True:
        try:
            line = (await read_line(PROMPT)).strip()
        except EOFError:
            logger.info("EOF reached, exiting.")
            break
        except KeyboardInterrupt:
            write(_paint("Cancelled.", "93", color))
            continue

        if not line:
            continue

        word = line.split()[0].lower()
        if word in EXIT_WORDS:
            write(_paint("Goodbye!", "96", color))
            break
        if word == "help":
            write(help_text(registry))
            continue

        result = await dispatch(registry, line)
        if result is not None:
            write(result)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Automation Helper CLI - ABB RAPID reference and AI assistant")
    parser.add_argument("--verbose", "-v", action="store_true", help="Increase console log level to DEBUG.")
    parser.add_argument("--no-color", action="store_true", help="Print banners without ANSI colors.")
    return parser


async def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)
    dotenv_loaded = load_dotenv(override=False)
    configure_logging(verbose=args.verbose)
    if dotenv_loaded:
        logger.info(".env loaded.")

    config = load_assistant_config()
    if not config.is_configured:
        logger.warning(f"{API_KEY_VAR} is not set; the 'ai' command will report a configuration error.")

    ai_handler = AIHandler(config)
    registry = build_registry(config, ai_handler=ai_handler)

    # prompt_toolkit needs a real terminal; piped input is read line by line
    interactive = sys.stdin.isatty() and sys.stdout.isatty()
    if interactive:
        session = PromptSession(
            history=FileHistory(HISTORY_FILE),
            auto_suggest=AutoSuggestFromHistory(),
            completer=CommandCompleter(registry),
            complete_while_typing=True,
            style=cli_style,
        )

        async def read_line(prompt_text: str) -> str:
            return await session.prompt_async(prompt_text)
    else:
        async def read_line(prompt_text: str) -> str:
            return await asyncio.to_thread(input, prompt_text)

    color = interactive and not args.no_color
    try:
        await run_repl(registry, read_line, color=color)
    finally:
        try:
            await ai_handler.aclose()
        except Exception as e:
            logger.error(f"Error closing AI client on exit: {e}", exc_info=True)
    return 0


def run() -> None:
    """Console-script entry point."""
    try:
        code = asyncio.run(main())
    except KeyboardInterrupt:
        print("\nExiting.")
        code = 0
    sys.exit(code)


if __name__ == "__main__":
    run()
