from htmx_todo.core.application.services.task_service import TaskService

__all__ = ["TaskService"]
