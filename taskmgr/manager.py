"""In-memory task list backed by a storage."""

from __future__ import annotations

from taskmgr.cli import StatusShortcut
from taskmgr.storage import Storage
from taskmgr.task import Task, TaskStatus

_ROW = "{:<8} {:<20} {:<12} {}"
_MAX_DESCRIPTION = 18
_TRUNCATED_LENGTH = 15


class TaskLookupError(LookupError):
    """Raised when an id prefix matches no task or several tasks."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class TaskManager:
    """Holds the task list and persists it through a storage."""

    def __init__(self, storage: Storage) -> None:
        self.storage = storage
        self.tasks: list[Task] = []

    def save(self) -> None:
        """Write the tasks to storage."""
        self.storage.save(self.tasks)

    def load(self) -> None:
        """Replace the tasks with those in storage."""
        self.tasks = self.storage.load()

    def add_task(self, description: str) -> Task:
        """Append a new Todo task and return it."""
        task = Task.create(description)
        self.tasks.append(task)
        return task

    def complete_task(self, task_id: str) -> bool:
        """Mark the task with exactly this id complete; report whether found."""
        for task in self.tasks:
            if task.id == task_id:
                task.status = TaskStatus.COMPLETE
                return True
        return False

    def update_task_status(self, id_prefix: str, shortcut: StatusShortcut) -> None:
        """Set the status of the single task matching the prefix."""
        self.find_task_by_prefix(id_prefix).status = shortcut.to_status()

    def delete_task(self, id_prefix: str) -> None:
        """Remove the single task matching the prefix."""
        target = self.find_task_by_prefix(id_prefix).id
        self.tasks = [task for task in self.tasks if task.id != target]

    def format_tasks(self) -> str:
        """Return the task table as text."""
        lines = [_ROW.format("ID", "Description", "Status", "Created"), "-" * 60]
        for task in self.tasks:
            description = task.description
            if len(description) > _MAX_DESCRIPTION:
                description = description[:_TRUNCATED_LENGTH] + "..."
            lines.append(_ROW.format(
                task.id,
                description,
                task.status.value,
                task.created.strftime("%Y-%m-%d %H:%M"),
            ))
        return "\n".join(lines)

    def show_tasks(self) -> None:
        """Print the task table."""
        print(self.format_tasks())

    def find_task_by_prefix(self, prefix: str) -> Task:
        """Return the one task whose id starts with prefix."""
        matches = [task for task in self.tasks if task.id.startswith(prefix)]
        if not matches:
            raise TaskLookupError(f"No task found with ID starting with '{prefix}'")
        if len(matches) > 1:
            suggestions = "\n".join(f"  {task.id[:4]} - {task.description}" for task in matches)
            raise TaskLookupError(
                f"Ambiguous ID '{prefix}'. Multiple tasks match:\n{suggestions}\n"
                "Please be more specific."
            )
        return matches[0]