from htmx_todo.core.domain.task.exceptions.invalid_task_error import InvalidTaskError
from htmx_todo.core.domain.task.exceptions.task_not_found_error import TaskNotFoundError
from htmx_todo.core.domain.task.exceptions.todo_error import TodoError

__all__ = [
    "InvalidTaskError",
    "TaskNotFoundError",
    "TodoError",
]
