from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from htmx_todo.core.application.ports.task_store_port import TaskStorePort
from htmx_todo.core.application.services.task_service import TaskService
from htmx_todo.core.domain.task.exceptions import InvalidTaskError, TaskNotFoundError
from htmx_todo.infrastructure.configuration.main_settings import Settings
from htmx_todo.infrastructure.entrypoints.api.health_router import router as health_router
from htmx_todo.infrastructure.entrypoints.api.todo_router import router as todo_router
from htmx_todo.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)
from htmx_todo.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from htmx_todo.infrastructure.rendering.task_renderer_service import (
    TaskRendererService,
    TemplateRenderError,
)
from htmx_todo.infrastructure.repositories.in_memory_task_store import InMemoryTaskStore

logger = get_logger("app_factory")


def create_app(settings: Settings, store: TaskStorePort | None = None) -> FastAPI:
    """Builds the app with one store instance shared by every request it serves."""
    configure_logging(settings.log_level, settings.log_format, settings.app_env)

    app = FastAPI(title=settings.app_name)
    app.state.task_store = store if store is not None else InMemoryTaskStore()
    app.state.task_service = TaskService(app.state.task_store)
    app.state.renderer = TaskRendererService(settings.templates_dir, settings.app_name)
    logger.info(
        "App configured",
        app_name=settings.app_name,
        app_env=settings.app_env,
        templates_dir=str(settings.templates_dir),
        store=type(app.state.task_store).__name__,
    )

    app.add_middleware(CorrelationMiddleware)

    @app.exception_handler(TaskNotFoundError)
    async def not_found_handler(request: Request, exc: TaskNotFoundError):
        return PlainTextResponse("Todo not found", status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(InvalidTaskError)
    async def invalid_task_handler(request: Request, exc: InvalidTaskError):
        return PlainTextResponse(exc.message, status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(TemplateRenderError)
    async def render_error_handler(request: Request, exc: TemplateRenderError):
        logger.error(
            "Template rendering failed",
            error_type=type(exc).__name__,
            error_details=str(exc),
        )
        return PlainTextResponse(
            f"Failed to render {exc.template_name}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    app.include_router(health_router)
    app.include_router(todo_router)

    if settings.static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")
    else:
        logger.warning(f"Static directory not found: {settings.static_dir}")

    return app
