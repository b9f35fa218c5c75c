# src/todo_cli/cli/console.py

"""
Interactive prompts used by `todo update`.

Each field is asked in turn; an empty answer keeps the current value.
Reading and printing go through injectable callables so the conversation
can be scripted in tests.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable
from datetime import datetime
from typing import TypeVar

from ..core.state import Emitter, LineReader, console_emit, console_read_line
from ..tasks.task_models import Task, TaskStatus, parse_local_datetime

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _EndOfInput(Exception):
    pass


def _ask(read_line: LineReader, emit: Emitter, question: str) -> str:
    emit(question)
    try:
        return read_line("").strip()
    except EOFError:
        logger.info("Console EOF received, keeping remaining values.")
        raise _EndOfInput from None


def _ask_parsed(
    read_line: LineReader,
    emit: Emitter,
    question: str,
    current: T,
    parse: Callable[[str], T],
    what: str,
) -> T:
    answer = _ask(read_line, emit, question)
    if not answer:
        return current
    try:
        return parse(answer)
    except ValueError:
        logger.warning("Ignoring invalid %s %r; keeping current value.", what, answer)
        return current


def prompt_task_update(
    task: Task,
    read_line: LineReader = console_read_line,
    emit: Emitter = console_emit,
) -> Task:
    """
    Ask for a new description, date, category and status.

    Returns the replacement task; the title is never asked for.
    """
    emit(f"Updating task: {task.title}")

    description = task.description
    creation_date: datetime = task.creation_date
    category = task.category
    status: TaskStatus = task.status

    try:
        description = _ask(
            read_line, emit, "Enter new description (press Enter to keep current):"
        ) or description
        creation_date = _ask_parsed(
            read_line,
            emit,
            "Enter new date (YYYY-MM-DD HH:MM) (press Enter to keep current):",
            creation_date,
            parse_local_datetime,
            "date",
        )
        category = _ask(read_line, emit, "Enter new category (press Enter to keep current):") or category
        status = _ask_parsed(
            read_line,
            emit,
            "Enter new status (on/done) (press Enter to keep current):",
            status,
            TaskStatus.parse,
            "status",
        )
    except _EndOfInput:
        pass

    return dataclasses.replace(
        task,
        description=description,
        creation_date=creation_date,
        category=category,
        status=status,
    )
