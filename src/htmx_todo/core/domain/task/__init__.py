from htmx_todo.core.domain.task.entities import Task
from htmx_todo.core.domain.task.exceptions import InvalidTaskError, TaskNotFoundError, TodoError

__all__ = ["InvalidTaskError", "Task", "TaskNotFoundError", "TodoError"]
