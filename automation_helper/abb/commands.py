"""
RAPID command reference table.

One entry per common instruction, keyed by a snake_case identifier
(``move_j``, ``set_do``...).  Used by ``abb command`` and ``abb list``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .store import ReferenceStore


@dataclass(frozen=True, slots=True)
class CommandEntry:
    name: str
    syntax: str
    example: str
    description: str


COMMANDS: ReferenceStore[CommandEntry] = ReferenceStore({
    "move_j": CommandEntry(
        name="MoveJ",
        syntax="MoveJ Target [Speed] [Zone] [Tool]",
        example="MoveJ pHome, v1000, z50, tool0;",
        description="Joint movement - moves robot to position using axis movement",
    ),
    "move_l": CommandEntry(
        name="MoveL",
        syntax="MoveL Target [Speed] [Zone] [Tool]",
        example="MoveL pPick, v100, fine, tool1;",
        description="Linear movement - moves robot in straight line to position",
    ),
    "set_do": CommandEntry(
        name="SetDO",
        syntax="SetDO Signal Value",
        example="SetDO do_Gripper, 1;",
        description="Sets digital output signal",
    ),
    "wait_di": CommandEntry(
        name="WaitDI",
        syntax="WaitDI Signal Value [\\MaxTime]",
        example="WaitDI di_PartPresent, 1 \\MaxTime:=5;",
        description="Waits for digital input signal to reach specified value",
    ),
    "if_statement": CommandEntry(
        name="IF",
        syntax="IF condition THEN ... ENDIF",
        example=(
            "IF DI_01 = 1 THEN\n"
            "    SetDO do_Lamp, 1;\n"
            "ELSE\n"
            "    SetDO do_Lamp, 0;\n"
            "ENDIF"
        ),
        description="Conditional execution of instructions",
    ),
})


def format_command(entry: CommandEntry) -> str:
    """Render a command entry the way ``abb command <key>`` prints it."""
    return (
        f"\nCommand: {entry.name}\nSyntax: {entry.syntax}\n\n"
        f"Example:\n{entry.example}\n\nDescription:\n{entry.description}"
    )


def format_command_table() -> str:
    lines = ["", "ABB RAPID Commands:", "================"]
    for entry in COMMANDS:
        lines.append(f"{entry.name:<10} - {entry.description}")
    return "\n".join(lines) + "\n"
