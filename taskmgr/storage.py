"""Persistence of task lists as JSON or CSV files."""

from __future__ import annotations

import csv
import json
import os
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from pathlib import Path

from taskmgr.task import Task

CSV_FIELDS = ("id", "description", "status", "created")


class StorageError(Exception):
    """Raised when tasks cannot be saved or loaded."""

    def __init__(self, kind: str, cause: object) -> None:
        super().__init__(f"{kind} error: {cause}")
        self.kind = kind
        self.cause = cause


class Storage(ABC):
    """A place where a list of tasks is kept."""

    def __init__(self, file_path: str | os.PathLike) -> None:
        self.file_path = Path(file_path)

    @abstractmethod
    def save(self, tasks: Sequence[Task]) -> None:
        """Write all tasks, replacing what was stored."""

    @abstractmethod
    def load(self) -> list[Task]:
        """Read all stored tasks; an absent file holds none."""


class JsonStorage(Storage):
    """Tasks kept as a pretty-printed JSON array."""

    def save(self, tasks: Sequence[Task]) -> None:
        text = json.dumps([task.to_dict() for task in tasks], indent=2, ensure_ascii=False)
        try:
            self.file_path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise StorageError("IO", exc) from exc

    def load(self) -> list[Task]:
        try:
            content = self.file_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise StorageError("IO", exc) from exc
        try:
            records = json.loads(content)
            if not isinstance(records, list):
                raise ValueError("expected a JSON array of tasks")
            return [Task.from_dict(record) for record in records]
        except ValueError as exc:
            raise StorageError("JSON", exc) from exc


class CsvStorage(Storage):
    """Tasks kept as CSV rows with a header line."""

    def save(self, tasks: Sequence[Task]) -> None:
        try:
            with self.file_path.open("w", newline="", encoding="utf-8") as handle:
                if tasks:
                    writer = csv.DictWriter(handle, fieldnames=CSV_FIELDS)
                    writer.writeheader()
                    writer.writerows(task.to_dict() for task in tasks)
        except OSError as exc:
            raise StorageError("IO", exc) from exc

    def load(self) -> list[Task]:
        try:
            handle = self.file_path.open(newline="", encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise StorageError("IO", exc) from exc
        with handle:
            try:
                reader = csv.DictReader(handle)
                tasks = []
                for row in reader:
                    if None in row or None in row.values():
                        raise ValueError(f"malformed row on line {reader.line_num}")
                    tasks.append(Task.from_dict(row))
                return tasks
            except (csv.Error, ValueError) as exc:
                raise StorageError("CSV", exc) from exc
            except OSError as exc:
                raise StorageError("IO", exc) from exc


def create_storage(environ: Mapping[str, str] | None = None) -> Storage:
    """Pick the storage named by TM_STORAGE: 'csv', otherwise JSON."""
    env = os.environ if environ is None else environ
    if env.get("TM_STORAGE", "json").lower() == "csv":
        return CsvStorage("tasks.csv")
    return JsonStorage("tasks.json")