from fastapi import APIRouter, Depends, Form, Header, Query
from fastapi.responses import HTMLResponse

from htmx_todo.core.application.services.task_service import TaskService
from htmx_todo.infrastructure.entrypoints.api.dependencies import get_renderer, get_task_service
from htmx_todo.infrastructure.rendering.task_renderer_service import TaskRendererService

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
@router.get("/todos", response_class=HTMLResponse)
@router.get("/todos/", response_class=HTMLResponse, include_in_schema=False)
def list_todos(
    hx_request: str | None = Header(default=None),
    service: TaskService = Depends(get_task_service),
    renderer: TaskRendererService = Depends(get_renderer),
) -> HTMLResponse:
    tasks = service.list_tasks()
    # HTMX asks for the list fragment; a plain browser request gets the whole page
    if hx_request == "true":
        return HTMLResponse(renderer.render_list(tasks))
    return HTMLResponse(renderer.render_index(tasks))


@router.get("/todos/form", response_class=HTMLResponse)
def get_todo_form(
    task_id: str = Query(default="", alias="id"),
    service: TaskService = Depends(get_task_service),
    renderer: TaskRendererService = Depends(get_renderer),
) -> HTMLResponse:
    if not task_id:
        return HTMLResponse(renderer.render_form())
    return HTMLResponse(renderer.render_form(service.get_task(task_id)))


@router.post("/todos", response_class=HTMLResponse)
@router.post("/todos/", response_class=HTMLResponse, include_in_schema=False)
def create_todo(
    title: str = Form(default=""),
    description: str = Form(default=""),
    service: TaskService = Depends(get_task_service),
    renderer: TaskRendererService = Depends(get_renderer),
) -> HTMLResponse:
    service.create_task(title, description)
    return HTMLResponse(renderer.render_list_refresh(service.list_tasks()))


@router.post("/todos/update", response_class=HTMLResponse)
def update_todo(
    task_id: str = Form(default="", alias="id"),
    title: str = Form(default=""),
    description: str = Form(default=""),
    service: TaskService = Depends(get_task_service),
    renderer: TaskRendererService = Depends(get_renderer),
) -> HTMLResponse:
    service.update_task(task_id, title, description)
    return HTMLResponse(renderer.render_list_refresh(service.list_tasks()))


@router.post("/todos/toggle", response_class=HTMLResponse)
def toggle_todo(
    task_id: str = Query(default="", alias="id"),
    service: TaskService = Depends(get_task_service),
    renderer: TaskRendererService = Depends(get_renderer),
) -> HTMLResponse:
    task = service.toggle_task(task_id)
    return HTMLResponse(renderer.render_item(task))


@router.delete("/todos/delete", response_class=HTMLResponse)
def delete_todo(
    task_id: str = Query(default="", alias="id"),
    service: TaskService = Depends(get_task_service),
    renderer: TaskRendererService = Depends(get_renderer),
) -> HTMLResponse:
    service.delete_task(task_id)
    # The whole list comes back so the empty placeholder reappears after the last delete
    return HTMLResponse(renderer.render_list(service.list_tasks()))
