"""Client package for the remote todo API."""

from .api import TodoApi
from .errors import (
    DecodeError,
    InvalidTaskName,
    LoadFailed,
    NetworkError,
    NotFound,
    TaskListError,
    UnexpectedStatus,
)
from .sync import Result, TaskListClient

__all__ = [
    "TodoApi",
    "TaskListClient",
    "Result",
    "TaskListError",
    "NetworkError",
    "DecodeError",
    "NotFound",
    "UnexpectedStatus",
    "InvalidTaskName",
    "LoadFailed",
]
