"""Pydantic models for the todo collaborator API."""

from enum import Enum

from pydantic import BaseModel, Field


class TaskStatus(str, Enum):
    """Task status enumeration."""

    TODO = "todo"
    DONE = "done"


class Task(BaseModel):
    """A task as stored by the remote API. The name is its key.

    Empty names are accepted when decoding so that a degenerate item already
    on the server does not make the whole list unloadable; ``add_task``
    rejects them before anything is sent.
    """

    name: str = Field(...)
    status: TaskStatus = TaskStatus.TODO


class TaskListResponse(BaseModel):
    """Response model for the full collection."""

    items: list[Task]


class ViewState(str, Enum):
    """Rendering gate for the task list."""

    UNLOADED = "unloaded"
    LOADING = "loading"
    LOADED = "loaded"
    EMPTY = "empty"
    FAILED = "failed"
