from collections.abc import Callable

from htmx_todo.core.application.ports.task_store_port import TaskStorePort
from htmx_todo.core.domain.task.entities.task import Task
from htmx_todo.core.domain.task.exceptions import InvalidTaskError, TaskNotFoundError
from htmx_todo.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger("task_service")


class TaskService:
    """Validates request input and drives task mutations through the store.

    The store never validates; the non-empty title and required id checks
    live here. Edits and toggles run through ``store.mutate`` so concurrent
    requests on one task cannot overwrite each other.
    """

    def __init__(self, store: TaskStorePort):
        self.store = store

    def list_tasks(self) -> list[Task]:
        return sorted(self.store.get_all(), key=lambda t: (t.created_at, t.id))

    def get_task(self, task_id: str) -> Task:
        self._require_id(task_id, "lookup")
        try:
            return self.store.get(task_id)
        except TaskNotFoundError as exc:
            self._log_not_found(exc, "lookup")
            raise

    def create_task(self, title: str, description: str = "") -> Task:
        self._require_title(title, "create")
        task = Task.create(title, description)
        self.store.create(task)
        logger.info("Todo created", task_id=task.id, operation="create", processing_status="SUCCESS")
        return task

    def update_task(self, task_id: str, title: str, description: str) -> Task:
        self._require_id(task_id, "update")

        def _edit(task: Task) -> None:
            # Unknown ids are reported before an empty title
            self._require_title(title, "update")
            task.edit(title, description)

        task = self._mutate(task_id, _edit, "update")
        logger.info("Todo updated", task_id=task.id, operation="update", processing_status="SUCCESS")
        return task

    def toggle_task(self, task_id: str) -> Task:
        self._require_id(task_id, "toggle")
        task = self._mutate(task_id, Task.toggle_completed, "toggle")
        logger.info(
            "Todo toggled",
            task_id=task.id,
            operation="toggle",
            completed=task.completed,
            processing_status="SUCCESS",
        )
        return task

    def delete_task(self, task_id: str) -> None:
        self._require_id(task_id, "delete")
        try:
            self.store.delete(task_id)
        except TaskNotFoundError as exc:
            self._log_not_found(exc, "delete")
            raise
        logger.info("Todo deleted", task_id=task_id, operation="delete", processing_status="SUCCESS")

    def _mutate(self, task_id: str, change: Callable[[Task], None], operation: str) -> Task:
        try:
            return self.store.mutate(task_id, change)
        except TaskNotFoundError as exc:
            self._log_not_found(exc, operation)
            raise

    @staticmethod
    def _require_id(task_id: str | None, operation: str) -> None:
        if not task_id:
            logger.warning(
                "ID is required", operation=operation, error_type="InvalidTaskError"
            )
            raise InvalidTaskError("ID is required")

    @staticmethod
    def _require_title(title: str | None, operation: str) -> None:
        if not title or not title.strip():
            logger.warning(
                "Title is required", operation=operation, error_type="InvalidTaskError"
            )
            raise InvalidTaskError("Title is required")

    @staticmethod
    def _log_not_found(exc: TaskNotFoundError, operation: str) -> None:
        logger.warning(
            "Todo not found",
            task_id=exc.task_id,
            operation=operation,
            error_type=type(exc).__name__,
            error_details=str(exc),
        )
