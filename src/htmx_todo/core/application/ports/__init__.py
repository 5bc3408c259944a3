from htmx_todo.core.application.ports.task_store_port import TaskStorePort

__all__ = ["TaskStorePort"]
