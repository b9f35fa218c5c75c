# src/todo_cli/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the data directory exists,
- wires the task store into AppState.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, tasks_path: str | Path | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings(). `tasks_path` overrides settings.tasks_path.
    """
    if settings is None:
        settings = get_settings()

    path = Path(tasks_path) if tasks_path is not None else Path(settings.tasks_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    logger.debug("Using tasks file %s", path)

    return AppState(settings=settings, task_store=TaskStore(path))
