from .task_renderer_service import TaskRendererService, TemplateRenderError

__all__ = ["TaskRendererService", "TemplateRenderError"]
