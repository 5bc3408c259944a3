import uvicorn

from htmx_todo.infrastructure.configuration.main_settings import Settings
from htmx_todo.infrastructure.entrypoints.api.app_factory import create_app


def dev():
    """Run the development server."""
    settings = Settings()
    uvicorn.run(
        "htmx_todo.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )

# Instantiate global app for ASGI
settings = Settings()
app = create_app(settings)
