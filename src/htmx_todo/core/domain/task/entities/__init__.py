from htmx_todo.core.domain.task.entities.task import Task, generate_task_id

__all__ = ["Task", "generate_task_id"]
