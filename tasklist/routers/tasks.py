"""Task list router."""

from html import escape
from urllib.parse import quote

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import HTMLResponse

from ..client import LoadFailed, TaskListClient, TaskListError
from ..models import Task, TaskListResponse, TaskStatus, ViewState

router = APIRouter(prefix="/tasks", tags=["tasks"])


def get_task_client(request: Request) -> TaskListClient:
    """The client opened in the application lifespan."""
    return request.app.state.task_client


# =============================================================================
# Helper Functions
# =============================================================================


def render_task_item(task: Task) -> str:
    """Render a single task as HTML."""
    name = escape(task.name)
    key = escape(quote(task.name, safe=""))
    css = "task-item" if task.status == TaskStatus.TODO else "task-item done"
    return f"""
    <li class="{css}">
        <span class="task-name">{name} : {task.status.value}</span>
        <button
            class="complete-btn"
            hx-patch="/tasks/htmx/complete?name={key}"
            hx-target="#task-list"
        >Done</button>
        <button
            class="remove-btn"
            hx-delete="/tasks/htmx?name={key}"
            hx-target="#task-list"
        >Remove</button>
    </li>
    """


def render_error(error: TaskListError) -> str:
    return f'<p class="error">{escape(str(error))}</p>'


def render_task_list(client: TaskListClient) -> str:
    """Render the list container body for the client's view state and last error."""
    error = client.last_error
    parts = []
    if error is not None and not isinstance(error, LoadFailed):
        parts.append(render_error(error))

    if client.state == ViewState.FAILED:
        message = str(error) if isinstance(error, LoadFailed) else "Could not load tasks."
        parts.append(
            f'<div class="load-error">{escape(message)} '
            '<button hx-get="/tasks/htmx" hx-target="#task-list">Retry</button>'
            "</div>"
        )

    if client.tasks is not None:
        if not client.tasks:
            items = '<li class="empty-message">No tasks</li>'
        else:
            items = "".join(render_task_item(task) for task in client.tasks)
        parts.append(f'<ul class="task-list">{items}</ul>')

    return "".join(parts)


# =============================================================================
# HTMX Endpoints (HTML Fragments)
# =============================================================================


@router.get("/htmx", response_class=HTMLResponse)
async def list_tasks_htmx(client: TaskListClient = Depends(get_task_client)):
    """Reload the collection and return it as an HTML fragment."""
    try:
        await client.load_all()
    except LoadFailed:
        # rendered from client.last_error with a retry button
        pass
    return render_task_list(client)


@router.post("/htmx", response_class=HTMLResponse)
async def create_task_htmx(
    name: str = Form(""), client: TaskListClient = Depends(get_task_client)
):
    """Add a task and return the reloaded list."""
    await client.add_task(name)
    return render_task_list(client)


@router.patch("/htmx/complete", response_class=HTMLResponse)
async def complete_task_htmx(name: str, client: TaskListClient = Depends(get_task_client)):
    """Mark a task as done and return the reloaded list."""
    await client.complete_task(name)
    return render_task_list(client)


@router.delete("/htmx", response_class=HTMLResponse)
async def delete_task_htmx(name: str, client: TaskListClient = Depends(get_task_client)):
    """Delete a task and return the reloaded list."""
    await client.delete_task(name)
    return render_task_list(client)


# =============================================================================
# JSON Endpoint
# =============================================================================


@router.get("", response_model=TaskListResponse)
async def list_tasks(client: TaskListClient = Depends(get_task_client)):
    """Get the current collection as loaded from the remote API."""
    try:
        tasks = await client.load_all()
    except LoadFailed as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        ) from e
    return TaskListResponse(items=tasks)
