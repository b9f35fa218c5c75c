# src/todo_cli/tasks/task_store.py

from __future__ import annotations

import dataclasses
import json
import logging
import os
from pathlib import Path

from ..errors import TaskExistsError, TaskNotFoundError
from .predicates import matches_all, parse_predicates
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON-file task store keyed by title.

    The whole mapping lives in memory and the file is rewritten on every
    mutation:
    - serialize to <path>.tmp
    - os.replace() onto the target

    The in-memory mapping is swapped only after the write succeeded, so a
    failed write leaves the store as it was.
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)
        self._tasks: dict[str, Task] = self._load()
        logger.debug("TaskStore ready path=%s total=%s", self._path, len(self._tasks))

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _load(self) -> dict[str, Task]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.warning("Could not read tasks file %s; starting empty.", self._path, exc_info=True)
            return {}
        if not isinstance(data, dict):
            logger.warning("Tasks file %s is not a JSON object; starting empty.", self._path)
            return {}

        out: dict[str, Task] = {}
        for key, raw in data.items():
            if not isinstance(raw, dict):
                logger.warning("Skipping malformed task record %r", key)
                continue
            try:
                task = Task.from_dict(raw)
            except (KeyError, TypeError, ValueError):
                logger.warning("Skipping malformed task record %r", key, exc_info=True)
                continue
            out[str(key)] = task
        return out

    def _write(self, tasks: dict[str, Task]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = {title: task.to_dict() for title, task in tasks.items()}
        tmp = self._path.with_suffix(".tmp")
        tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, self._path)

    def _commit(self, tasks: dict[str, Task]) -> None:
        self._write(tasks)
        self._tasks = tasks

    def _require(self, title: str) -> Task:
        task = self._tasks.get(title)
        if task is None:
            raise TaskNotFoundError(title)
        return task

    @staticmethod
    def _sort_key(task: Task) -> tuple:
        return (task.creation_date, task.title)

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def get_task(self, title: str) -> Task | None:
        return self._tasks.get(title)

    def add_task(self, task: Task) -> None:
        if task.title in self._tasks:
            raise TaskExistsError(task.title)

        tasks = dict(self._tasks)
        tasks[task.title] = task
        self._commit(tasks)
        logger.debug("Task added title=%r category=%r", task.title, task.category)

    def mark_done(self, title: str) -> None:
        task = self._require(title)

        tasks = dict(self._tasks)
        tasks[title] = dataclasses.replace(task, status=TaskStatus.DONE)
        self._commit(tasks)
        logger.debug("Task marked done title=%r", title)

    def update_task(self, title: str, new_task: Task) -> None:
        """Replace every field of the task; the title itself never changes."""
        self._require(title)
        if new_task.title != title:
            logger.debug("Ignoring title change %r -> %r on update", title, new_task.title)
            new_task = dataclasses.replace(new_task, title=title)

        tasks = dict(self._tasks)
        tasks[title] = new_task
        self._commit(tasks)
        logger.debug("Task updated title=%r status=%s", title, new_task.status.value)

    def delete_task(self, title: str) -> None:
        self._require(title)

        tasks = dict(self._tasks)
        del tasks[title]
        self._commit(tasks)
        logger.debug("Task deleted title=%r", title)

    def list_tasks(self) -> list[Task]:
        """All tasks, oldest first (ties broken by title)."""
        return sorted(self._tasks.values(), key=self._sort_key)

    def filter_tasks(self, expression: str) -> list[Task]:
        """
        Tasks matching every clause of `expression`, in list_tasks() order.

        Raises PredicateError for an unparseable expression.
        """
        predicates = parse_predicates(expression)
        return [t for t in self.list_tasks() if matches_all(t, predicates)]
