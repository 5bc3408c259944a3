from abc import ABC, abstractmethod
from collections.abc import Callable

from htmx_todo.core.domain.task.entities.task import Task


class TaskStorePort(ABC):
    """Port for the authoritative task collection.

    Implementations MUST raise ``TaskNotFoundError`` from ``get``, ``update``
    and ``delete`` when the id is absent, leaving their state unchanged.
    """

    @abstractmethod
    def get_all(self) -> list[Task]:
        """Returns every live task. No ordering is guaranteed."""
        pass

    @abstractmethod
    def get(self, task_id: str) -> Task:
        """Returns the task stored under ``task_id``."""
        pass

    @abstractmethod
    def create(self, task: Task) -> None:
        """Inserts ``task`` under its id, overwriting any existing entry."""
        pass

    @abstractmethod
    def update(self, task: Task) -> None:
        """Replaces an existing task wholesale."""
        pass

    @abstractmethod
    def mutate(self, task_id: str, change: Callable[[Task], None]) -> Task:
        """Applies ``change`` to the stored task as one atomic read-modify-write.

        If ``change`` raises, the stored task is left untouched and the error propagates.
        Returns a copy of the task as stored afterwards.
        """
        pass

    @abstractmethod
    def delete(self, task_id: str) -> None:
        """Removes the task stored under ``task_id``."""
        pass
