import pytest

from htmx_todo.core.domain.task.entities.task import Task
from htmx_todo.infrastructure.rendering.task_renderer_service import (
    TaskRendererService,
    TemplateRenderError,
)


@pytest.fixture
def renderer(settings):
    return TaskRendererService(settings.templates_dir, settings.app_name)


def test_index_renders_full_page_with_tasks(renderer):
    task = Task.create("Buy milk", "")
    html = renderer.render_index([task])

    assert "<!DOCTYPE html>" in html
    assert "<title>TestTodo</title>" in html
    assert 'id="todos-container"' in html
    assert f'id="todo-{task.id}"' in html


def test_list_shows_placeholder_when_empty(renderer):
    html = renderer.render_list([])
    assert 'id="todo-list"' in html
    assert "No todos yet." in html


def test_item_marks_completed_tasks(renderer):
    task = Task.create("Buy milk", "semi-skimmed")
    task.toggle_completed()

    html = renderer.render_item(task)

    assert "todo-item completed" in html
    assert "checked" in html
    assert "semi-skimmed" in html
    assert f'hx-post="/todos/toggle?id={task.id}"' in html
    assert 'hx-target="#todos-container"' in html


def test_item_escapes_user_text(renderer):
    task = Task.create("<script>alert(1)</script>", "")
    html = renderer.render_item(task)

    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html


def test_empty_form_posts_to_create(renderer):
    html = renderer.render_form()

    assert "Create New Todo" in html
    assert 'hx-post="/todos"' in html
    assert 'name="id"' not in html


def test_edit_form_is_prefilled(renderer):
    task = Task.create("Buy milk", "two litres")
    html = renderer.render_form(task)

    assert "Edit Todo" in html
    assert 'hx-post="/todos/update"' in html
    assert f'name="id" value="{task.id}"' in html
    assert 'value="Buy milk"' in html
    assert "two litres</textarea>" in html


def test_list_refresh_clears_form_and_restores_add_button(renderer):
    html = renderer.render_list_refresh([Task.create("Buy milk", "")])

    assert html.index('id="form-container"') < html.index('id="todo-list"')
    assert html.index('id="todo-list"') < html.index('id="actions-container"')
    assert html.count('hx-swap-oob="true"') == 2


def test_broken_template_raises_render_error(tmp_path):
    (tmp_path / "todo_list.html").write_text("{{ missing_variable }}")
    renderer = TaskRendererService(tmp_path)

    with pytest.raises(TemplateRenderError) as exc:
        renderer.render_list([])

    assert exc.value.template_name == "todo_list.html"


def test_missing_template_raises_render_error(tmp_path):
    renderer = TaskRendererService(tmp_path)

    with pytest.raises(TemplateRenderError):
        renderer.render_item(Task.create("Buy milk", ""))
