# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_cli.core.state import AppState
from todo_cli.tasks.task_models import Task
from todo_cli.tasks.task_store import TaskStore

from .fakes import FakeConsole


def local_dt(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute).astimezone()


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="todo",
        log_level="WARNING",
        log_file=None,
        data_dir=tmp_path,
        tasks_path=tmp_path / "tasks.json",
    )


@pytest.fixture()
def console() -> FakeConsole:
    return FakeConsole()


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_path)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore, console: FakeConsole) -> AppState:
    return AppState(
        settings=settings,
        task_store=store,
        read_line=console.read_line,
        emit=console.emit,
    )


@pytest.fixture()
def sample_tasks() -> list[Task]:
    return [
        Task(
            title="Write report",
            description="Quarterly report for finance",
            category="work",
            creation_date=local_dt(2024, 5, 1, 9, 30),
        ),
        Task(
            title="Buy milk",
            description="Semi-skimmed, two bottles",
            category="home",
            creation_date=local_dt(2024, 5, 10, 18, 0),
        ),
        Task(
            title="Review PR",
            description="Review the report generator PR",
            category="work",
            creation_date=local_dt(2024, 5, 20, 14, 15),
        ),
    ]


@pytest.fixture()
def filled_store(store: TaskStore, sample_tasks: list[Task]) -> TaskStore:
    for task in sample_tasks:
        store.add_task(task)
    return store
