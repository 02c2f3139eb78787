"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from .client import TaskListClient
from .config import get_settings
from .logging_setup import setup_logging
from .routers import tasks

TEMPLATES_DIR = Path(__file__).parent / "templates"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the task list client on startup and close it on shutdown."""
    client = TaskListClient.from_settings(get_settings())
    app.state.task_client = client
    try:
        yield
    finally:
        await client.aclose()


app = FastAPI(
    title="Task List",
    description="Task list client for the remote todo API",
    version="0.1.0",
    lifespan=lifespan,
)

templates = Jinja2Templates(directory=TEMPLATES_DIR)

app.include_router(tasks.router)


@app.get("/", response_class=HTMLResponse)
def index(request: Request):
    """Render the main page."""
    return templates.TemplateResponse(request, "index.html", {"title": "TASK LIST"})


def main():
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    setup_logging(level=settings.log_level, log_file=settings.log_file)
    uvicorn.run(
        "tasklist.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
