"""Entry point of the tm command."""

from __future__ import annotations

from collections.abc import Sequence

from taskmgr.cli import (
    AddCommand,
    DeleteCommand,
    ListCommand,
    StatusCommand,
    StatusShortcut,
    UsageError,
    parse_args,
)
from taskmgr.manager import TaskLookupError, TaskManager
from taskmgr.storage import StorageError, create_storage

_STATUS_NAMES = {
    StatusShortcut.T: "Todo",
    StatusShortcut.P: "In Progress",
    StatusShortcut.C: "Complete",
}


def _save_quietly(manager: TaskManager) -> None:
    try:
        manager.save()
    except StorageError:
        pass


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command given by argv (defaults to the process arguments)."""
    manager = TaskManager(create_storage())
    try:
        manager.load()
    except StorageError:
        pass

    try:
        command = parse_args(argv)
    except UsageError as exc:
        print(f"Error: {exc}")
        return 0

    if isinstance(command, ListCommand):
        manager.show_tasks()
    elif isinstance(command, AddCommand):
        manager.add_task(command.description)
        _save_quietly(manager)
    elif isinstance(command, DeleteCommand):
        try:
            manager.delete_task(command.task_id)
        except TaskLookupError as exc:
            print(f"Error: {exc}")
        else:
            print("Task deleted successfully")
            _save_quietly(manager)
    elif isinstance(command, StatusCommand):
        try:
            manager.update_task_status(command.task_id, command.shortcut)
        except TaskLookupError as exc:
            print(f"Error: {exc}")
        else:
            print(f"Task status updated to: {_STATUS_NAMES[command.shortcut]}")
            _save_quietly(manager)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())