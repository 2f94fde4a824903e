"""Task records and identifier generation."""

from __future__ import annotations

import hashlib
import re
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

ID_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
ID_LENGTH = 6

_TIMESTAMP_RE = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<tz>Z|z|[+-]\d{2}:\d{2})?$"
)


class TaskStatus(Enum):
    """The state a task is in; values are the stored names."""

    TODO = "Todo"
    IN_PROGRESS = "InProgress"
    COMPLETE = "Complete"


def generate_id() -> str:
    """Return a short base-62 identifier derived from the current time."""
    stamp = time.time_ns().to_bytes(16, "little")
    num = int.from_bytes(hashlib.blake2b(stamp, digest_size=8).digest(), "little")
    chars = []
    for _ in range(ID_LENGTH):
        num, idx = divmod(num, len(ID_ALPHABET))
        chars.append(ID_ALPHABET[idx])
    return "".join(chars)


def _format_timestamp(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _parse_timestamp(text: str) -> datetime:
    match = _TIMESTAMP_RE.match(text.strip())
    if match is None:
        raise ValueError(f"invalid timestamp: {text!r}")
    value = match["base"].replace(" ", "T")
    fraction = match["fraction"]
    if fraction:
        value += "." + fraction[:6].ljust(6, "0")
    tz = match["tz"]
    if tz is None or tz in ("Z", "z"):
        tz = "+00:00"
    return datetime.fromisoformat(value + tz).astimezone(timezone.utc)


@dataclass
class Task:
    """A single to-do item."""

    id: str
    description: str
    status: TaskStatus
    created: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls, description: str) -> Task:
        """Make a new task with a fresh id, status Todo and the current time."""
        return cls(generate_id(), description, TaskStatus.TODO, datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, str]:
        """Return the task as a flat mapping of strings."""
        return {
            "id": self.id,
            "description": self.description,
            "status": self.status.value,
            "created": _format_timestamp(self.created),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Task:
        """Build a task from a mapping as produced by to_dict."""
        try:
            task_id = data["id"]
            description = data["description"]
            status = TaskStatus(data["status"])
            created_text = data["created"]
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid task record: {exc}") from exc
        if not isinstance(task_id, str) or not isinstance(description, str):
            raise ValueError("task id and description must be strings")
        if not isinstance(created_text, str):
            raise ValueError("task creation time must be a string")
        return cls(task_id, description, status, _parse_timestamp(created_text))