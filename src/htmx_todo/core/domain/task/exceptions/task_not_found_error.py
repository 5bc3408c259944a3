from __future__ import annotations

from htmx_todo.core.domain.task.exceptions.todo_error import TodoError


class TaskNotFoundError(TodoError):
    """Raised when a lookup, update or delete targets an id the store does not hold."""

    def __init__(self, task_id: str) -> None:
        self.task_id = task_id
        super().__init__(f"Todo not found: {task_id}")
