"""Error types raised by the task list client."""


class TaskListError(Exception):
    """Base class for every client-side failure."""


class NetworkError(TaskListError):
    """The collaborator API could not be reached (refused, timeout, ...)."""


class DecodeError(TaskListError):
    """The response body is not JSON or does not match the task models."""


class NotFound(TaskListError):
    """No task with the given name exists on the server."""

    def __init__(self, name: str):
        super().__init__(f"Task not found: {name!r}")
        self.name = name


class UnexpectedStatus(TaskListError):
    """The server answered with a non-2xx status other than 404."""

    def __init__(self, status_code: int, body: str = ""):
        super().__init__(f"Unexpected HTTP status {status_code}: {body[:200]}")
        self.status_code = status_code
        self.body = body


class InvalidTaskName(TaskListError):
    """Task names must be non-empty."""


class LoadFailed(TaskListError):
    """Loading the collection failed; ``cause`` holds the underlying error."""

    def __init__(self, cause: TaskListError):
        super().__init__(f"Could not load tasks: {cause}")
        self.cause = cause
