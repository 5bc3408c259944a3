from __future__ import annotations

from htmx_todo.core.domain.task.exceptions.todo_error import TodoError


class InvalidTaskError(TodoError):
    """Raised when request input cannot produce a valid task (empty title, missing id)."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
