"""Command-line argument parsing."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Union

from taskmgr.task import TaskStatus


class UsageError(Exception):
    """Raised when the arguments do not form a known command."""


class StatusShortcut(Enum):
    """One-letter status names accepted on the command line."""

    T = "t"
    P = "p"
    C = "c"

    def to_status(self) -> TaskStatus:
        """Return the task status this shortcut stands for."""
        return {
            StatusShortcut.T: TaskStatus.TODO,
            StatusShortcut.P: TaskStatus.IN_PROGRESS,
            StatusShortcut.C: TaskStatus.COMPLETE,
        }[self]


@dataclass(frozen=True)
class ListCommand:
    """Show all tasks."""


@dataclass(frozen=True)
class AddCommand:
    """Add a task with the given description."""

    description: str


@dataclass(frozen=True)
class DeleteCommand:
    """Delete the task whose id starts with task_id."""

    task_id: str


@dataclass(frozen=True)
class StatusCommand:
    """Set the status of the task whose id starts with task_id."""

    task_id: str
    shortcut: StatusShortcut


Command = Union[ListCommand, AddCommand, DeleteCommand, StatusCommand]


def parse_args(argv: Sequence[str] | None = None) -> Command:
    """Turn arguments (without the program name) into a command."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return ListCommand()
    first = args[0]
    if len(args) == 1:
        if first == "list":
            return ListCommand()
        raise UsageError(f"Unknown command: {first}")
    if first == "add":
        return AddCommand(" ".join(args[1:]))
    if len(args) == 2:
        action = args[1]
        if action == "delete":
            return DeleteCommand(first)
        try:
            return StatusCommand(first, StatusShortcut(action))
        except ValueError:
            pass
    raise UsageError(f"Unknown command: {first}")