from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, select_autoescape

from htmx_todo.core.domain.task.entities.task import Task


class TemplateRenderError(Exception):
    """Raised when a page or fragment template fails to render."""

    def __init__(self, template_name: str, cause: Exception):
        self.template_name = template_name
        super().__init__(f"Error rendering {template_name}: {cause}")


class TaskRendererService:
    """Renders the full page and the HTMX fragments swapped into it."""

    def __init__(self, templates_dir: Path, app_name: str = "HTMX Todo"):
        self.app_name = app_name
        # StrictUndefined turns a missing variable into an error instead of blank markup
        self.jinja_env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render_index(self, tasks: list[Task]) -> str:
        return self._render("index.html", app_name=self.app_name, tasks=tasks)

    def render_list(self, tasks: list[Task]) -> str:
        return self._render("todo_list.html", tasks=tasks)

    def render_item(self, task: Task) -> str:
        return self._render("todo_item.html", task=task)

    def render_form(self, task: Task | None = None) -> str:
        """Empty create form, or an edit form pre-filled from ``task``."""
        form = {
            "id": task.id if task else "",
            "title": task.title if task else "",
            "description": task.description if task else "",
        }
        return self._render("todo_form.html", form=form)

    def render_list_refresh(self, tasks: list[Task]) -> str:
        """
        Response to a create or update: clears the form container and
        restores the Add button out-of-band, then re-renders the list.
        """
        return "".join(
            [
                self._render("form_reset.html"),
                self.render_list(tasks),
                self._render("actions.html"),
            ]
        )

    def _render(self, template_name: str, **context: Any) -> str:
        try:
            template = self.jinja_env.get_template(template_name)
            return template.render(**context)
        except TemplateError as e:
            raise TemplateRenderError(template_name, e) from e
