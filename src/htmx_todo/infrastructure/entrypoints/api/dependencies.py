from fastapi import Request

from htmx_todo.core.application.services.task_service import TaskService
from htmx_todo.infrastructure.rendering.task_renderer_service import TaskRendererService


def get_task_service(request: Request) -> TaskService:
    return request.app.state.task_service


def get_renderer(request: Request) -> TaskRendererService:
    return request.app.state.renderer
