# src/todo_cli/tasks/predicates.py

"""
Filter expressions for `select`.

An expression is one or more clauses of the form

    field operator "value"

Clauses are ANDed together; there is no OR, NOT or grouping.

    category = "work" status = "on"
    date > "2024-05-01 00:00" description like "report"

Supported field/operator pairs:
- category =
- status =          (on/active/a, done/d)
- date < / date >   (YYYY-MM-DD HH:MM, local time)
- description like  (case-sensitive substring)
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime

from ..errors import PredicateError
from .task_models import Task, TaskStatus, parse_local_datetime

CLAUSE_REGEX = re.compile(r'(\w+)\s*(=|<|>|like)\s*"([^"]*)"')


@dataclass(frozen=True, slots=True)
class CategoryEquals:
    category: str

    def matches(self, task: Task) -> bool:
        return task.category == self.category


@dataclass(frozen=True, slots=True)
class StatusEquals:
    status: TaskStatus

    def matches(self, task: Task) -> bool:
        return task.status == self.status


@dataclass(frozen=True, slots=True)
class CreatedBefore:
    date: datetime

    def matches(self, task: Task) -> bool:
        return task.creation_date < self.date


@dataclass(frozen=True, slots=True)
class CreatedAfter:
    date: datetime

    def matches(self, task: Task) -> bool:
        return task.creation_date > self.date


@dataclass(frozen=True, slots=True)
class DescriptionContains:
    text: str

    def matches(self, task: Task) -> bool:
        return self.text in task.description


Predicate = CategoryEquals | StatusEquals | CreatedBefore | CreatedAfter | DescriptionContains


def _parse_date(value: str) -> datetime:
    try:
        return parse_local_datetime(value)
    except ValueError:
        raise PredicateError(f"Invalid date '{value}': expected YYYY-MM-DD HH:MM") from None


def _parse_status(value: str) -> StatusEquals:
    try:
        return StatusEquals(TaskStatus.parse(value))
    except ValueError as e:
        raise PredicateError(str(e)) from None


_BUILDERS: dict[tuple[str, str], Callable[[str], Predicate]] = {
    ("category", "="): CategoryEquals,
    ("status", "="): _parse_status,
    ("date", "<"): lambda v: CreatedBefore(_parse_date(v)),
    ("date", ">"): lambda v: CreatedAfter(_parse_date(v)),
    ("description", "like"): DescriptionContains,
}


def parse_predicates(expression: str) -> list[Predicate]:
    """
    Parse a filter expression into predicates.

    Raises PredicateError if no clause is found, a field/operator pair is
    unknown, or a value does not parse for its field.
    """
    matches = list(CLAUSE_REGEX.finditer(expression))
    if not matches:
        raise PredicateError("Invalid predicate format")

    out: list[Predicate] = []
    for m in matches:
        field_name = m.group(1).lower()
        operator = m.group(2)
        builder = _BUILDERS.get((field_name, operator))
        if builder is None:
            raise PredicateError(f"Unknown predicate: {field_name} {operator}")
        out.append(builder(m.group(3)))
    return out


def matches_all(task: Task, predicates: Iterable[Predicate]) -> bool:
    return all(p.matches(task) for p in predicates)
