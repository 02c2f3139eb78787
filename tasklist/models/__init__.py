"""Models package."""

from .task import Task, TaskListResponse, TaskStatus, ViewState

__all__ = [
    "TaskStatus",
    "Task",
    "TaskListResponse",
    "ViewState",
]
