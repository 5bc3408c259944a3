import pytest
from fastapi.testclient import TestClient

from htmx_todo.core.application.services.task_service import TaskService
from htmx_todo.core.domain.task.entities.task import Task
from htmx_todo.infrastructure.configuration.main_settings import Settings
from htmx_todo.infrastructure.entrypoints.api.app_factory import create_app
from htmx_todo.infrastructure.repositories.in_memory_task_store import InMemoryTaskStore


@pytest.fixture
def settings():
    return Settings(
        app_name="TestTodo",
        app_env="test",
        log_level="WARNING",
        log_format="console",
    )


@pytest.fixture
def store():
    return InMemoryTaskStore()


@pytest.fixture
def service(store):
    return TaskService(store)


@pytest.fixture
def make_task():
    def _make(title: str = "Buy milk", description: str = "") -> Task:
        return Task.create(title, description)

    return _make


@pytest.fixture
def client(settings, store):
    app = create_app(settings, store=store)
    with TestClient(app) as test_client:
        yield test_client
