from .app_factory import create_app
from .health_router import router as health_router
from .todo_router import router as todo_router

__all__ = ["create_app", "health_router", "todo_router"]
