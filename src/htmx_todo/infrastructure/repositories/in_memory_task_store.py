from collections.abc import Callable
from dataclasses import replace

from htmx_todo.core.application.ports.task_store_port import TaskStorePort
from htmx_todo.core.domain.task.entities.task import Task
from htmx_todo.core.domain.task.exceptions import TaskNotFoundError
from htmx_todo.infrastructure.common.rw_lock import ReadWriteLock


class InMemoryTaskStore(TaskStorePort):
    """
    Process-local task map guarded by a reader/writer lock.
    Tasks are copied on the way in and on the way out, so callers can only
    change the canonical copy through ``update``.
    """

    def __init__(self):
        self._tasks: dict[str, Task] = {}
        self._lock = ReadWriteLock()

    def get_all(self) -> list[Task]:
        with self._lock.read():
            return [replace(task) for task in self._tasks.values()]

    def get(self, task_id: str) -> Task:
        with self._lock.read():
            task = self._tasks.get(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)
            return replace(task)

    def create(self, task: Task) -> None:
        with self._lock.write():
            self._tasks[task.id] = replace(task)

    def update(self, task: Task) -> None:
        with self._lock.write():
            if task.id not in self._tasks:
                raise TaskNotFoundError(task.id)
            self._tasks[task.id] = replace(task)

    def mutate(self, task_id: str, change: Callable[[Task], None]) -> Task:
        with self._lock.write():
            stored = self._tasks.get(task_id)
            if stored is None:
                raise TaskNotFoundError(task_id)
            draft = replace(stored)
            change(draft)
            self._tasks[task_id] = draft
            return replace(draft)

    def delete(self, task_id: str) -> None:
        with self._lock.write():
            if task_id not in self._tasks:
                raise TaskNotFoundError(task_id)
            del self._tasks[task_id]
