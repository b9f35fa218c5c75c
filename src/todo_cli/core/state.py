# src/todo_cli/core/state.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..tasks.task_store import TaskStore

LineReader = Callable[[str], str]
Emitter = Callable[[str], None]


def console_read_line(prompt: str = "") -> str:
    return input(prompt)


def console_emit(text: str) -> None:
    print(text, flush=True)


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in with the same attributes).
    settings: object

    task_store: TaskStore

    # Console I/O used by interactive commands; swapped out in tests.
    read_line: LineReader = console_read_line
    emit: Emitter = console_emit
