# src/todo_cli/cli/commands.py

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ..core.state import AppState
from ..errors import TaskNotFoundError
from ..tasks.task_models import Task, parse_local_datetime
from .console import prompt_task_update

CommandHandler = Callable[[AppState, argparse.Namespace], str]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Argument:
    """One positional argument of a subcommand."""

    name: str
    help: str
    type: Callable[[str], Any] | None = None


class CommandRegistry:
    """Subcommand registry: builds the argparse parser and dispatches to handlers."""

    def __init__(self, prog: str = "todo") -> None:
        self.prog = prog
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._arguments: dict[str, list[Argument]] = {}
        self._aliases: dict[str, list[str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        arguments: list[Argument] | None = None,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        self._arguments[key] = list(arguments or [])
        self._aliases[key] = [a.lower() for a in aliases]
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog=self.prog, description="A simple TODO list CLI application"
        )
        parser.add_argument("--file", type=str, default=None, help="Tasks file (default: settings)")
        parser.add_argument("--log-level", type=str, default=None, help="Console log level")

        sub = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)
        for name, help_text in self._help.items():
            p = sub.add_parser(name, help=help_text, aliases=self._aliases[name])
            for arg in self._arguments[name]:
                if arg.type is None:
                    p.add_argument(arg.name, help=arg.help)
                else:
                    p.add_argument(arg.name, help=arg.help, type=arg.type)
        return parser

    def handle(self, state: AppState, args: argparse.Namespace) -> str:
        """Run the handler for args.command and return its output text."""
        name = str(args.command).lower()
        handler = self._handlers.get(name)
        if not handler:
            raise KeyError(f"Unknown command: {name}")
        logger.debug("Dispatching command=%s", name)
        return handler(state, args)


registry = CommandRegistry()


def _date_arg(raw: str) -> datetime:
    try:
        return parse_local_datetime(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid date '{raw}': expected YYYY-MM-DD HH:MM"
        ) from None


def _format_tasks(tasks: list[Task], empty_text: str) -> str:
    if not tasks:
        return empty_text
    return "\n".join(t.format_line() for t in tasks)


def cmd_add(state: AppState, args: argparse.Namespace) -> str:
    task = Task(
        title=args.title,
        description=args.description,
        category=args.category,
        creation_date=args.date,
    )
    state.task_store.add_task(task)
    return f"Task '{task.title}' added successfully"


def cmd_done(state: AppState, args: argparse.Namespace) -> str:
    state.task_store.mark_done(args.title)
    return f"Task '{args.title}' marked as done"


def cmd_update(state: AppState, args: argparse.Namespace) -> str:
    """
    Ask for each field interactively, then replace the task.

    A missing title is reported before any prompt is shown.
    """
    current = state.task_store.get_task(args.title)
    if current is None:
        raise TaskNotFoundError(args.title)

    new_task = prompt_task_update(current, read_line=state.read_line, emit=state.emit)
    state.task_store.update_task(args.title, new_task)
    return f"Task '{args.title}' updated successfully"


def cmd_delete(state: AppState, args: argparse.Namespace) -> str:
    state.task_store.delete_task(args.title)
    return f"Task '{args.title}' deleted successfully"


def cmd_select(state: AppState, args: argparse.Namespace) -> str:
    tasks = state.task_store.filter_tasks(args.predicate)
    return _format_tasks(tasks, "No tasks match the given predicate.")


def cmd_list(state: AppState, args: argparse.Namespace) -> str:
    return _format_tasks(state.task_store.list_tasks(), "No tasks found.")


registry.register(
    "add",
    cmd_add,
    help_text="Add a new task.",
    arguments=[
        Argument("title", "Unique task title"),
        Argument("description", "Free-text description"),
        Argument("date", "Creation date, YYYY-MM-DD HH:MM (local time)", type=_date_arg),
        Argument("category", "Category label"),
    ],
)
registry.register("done", cmd_done, help_text="Mark a task as done.", arguments=[Argument("title", "Task title")])
registry.register(
    "update",
    cmd_update,
    help_text="Update an existing task (interactive).",
    arguments=[Argument("title", "Task title")],
)
registry.register(
    "delete",
    cmd_delete,
    help_text="Delete a task.",
    arguments=[Argument("title", "Task title")],
    aliases=["rm"],
)
registry.register(
    "select",
    cmd_select,
    help_text='Select tasks matching a predicate, e.g. \'category = "work"\'.',
    arguments=[Argument("predicate", "Filter expression")],
)
registry.register("list", cmd_list, help_text="List all tasks.", aliases=["ls"])
