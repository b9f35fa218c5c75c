# src/todo_cli/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any

DATE_INPUT_FORMAT = "%Y-%m-%d %H:%M"


def now_local() -> datetime:
    return datetime.now().astimezone()


def parse_local_datetime(raw: str) -> datetime:
    """
    Parse "YYYY-MM-DD HH:MM" as a wall-clock time in the local timezone.

    Raises ValueError on anything else.
    """
    naive = datetime.strptime(raw.strip(), DATE_INPUT_FORMAT)
    return naive.astimezone()


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Values are what the tasks file stores; `label` is what the CLI prints.
    """

    ACTIVE = "Active"
    DONE = "Done"

    @property
    def label(self) -> str:
        return "on" if self is TaskStatus.ACTIVE else "done"

    @classmethod
    def parse(cls, raw: str) -> TaskStatus:
        """Parse user input: on/active/a or done/d, any case."""
        key = raw.strip().lower()
        if key in ("on", "active", "a"):
            return cls.ACTIVE
        if key in ("done", "d"):
            return cls.DONE
        raise ValueError(f"Invalid status: {raw}")


@dataclass(slots=True)
class Task:
    title: str
    description: str
    category: str
    creation_date: datetime = field(default_factory=now_local)
    status: TaskStatus = TaskStatus.ACTIVE

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "creation_date": self.creation_date.isoformat(),
            "category": self.category,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task:
        created = datetime.fromisoformat(str(raw["creation_date"]))
        if created.tzinfo is None:
            created = created.astimezone()
        return cls(
            title=str(raw["title"]),
            description=str(raw.get("description") or ""),
            category=str(raw.get("category") or ""),
            creation_date=created,
            status=TaskStatus(raw.get("status") or TaskStatus.ACTIVE.value),
        )

    def format_line(self) -> str:
        """One-line rendering used by `list` and `select`."""
        return (
            f"{self.title}: {self.description} ({self.status.label}) - "
            f"{self.category} - {self.creation_date.isoformat(sep=' ', timespec='seconds')}"
        )
