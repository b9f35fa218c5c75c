# src/todo_cli/errors.py


class TodoError(Exception):
    """Base exception for todo-cli domain errors."""

    pass


class TaskStoreError(TodoError):
    """Raised when a store operation cannot be applied."""

    pass


class TaskExistsError(TaskStoreError):
    """Raised when adding a task whose title is already taken."""

    def __init__(self, title: str) -> None:
        super().__init__(f"Task with title '{title}' already exists")
        self.title = title


class TaskNotFoundError(TaskStoreError):
    """Raised when a task title is not in the store."""

    def __init__(self, title: str) -> None:
        super().__init__(f"Task with title '{title}' not found")
        self.title = title


class PredicateError(TodoError):
    """Raised when a filter expression cannot be parsed."""

    pass
