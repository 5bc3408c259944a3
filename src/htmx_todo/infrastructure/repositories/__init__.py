from .in_memory_task_store import InMemoryTaskStore

__all__ = ["InMemoryTaskStore"]
