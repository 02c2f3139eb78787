"""Keeps a local view of the task collection in step with the server.

Every mutation is awaited and then followed by a full reload of the
collection; the local list is never patched in place.
"""

import logging
from collections.abc import Awaitable
from dataclasses import dataclass

from ..config import Settings, get_settings
from ..models import Task, TaskStatus, ViewState
from .api import TodoApi
from .errors import InvalidTaskName, LoadFailed, TaskListError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Result:
    """Outcome of a mutation.

    ``error`` is the mutation's own failure. ``reload_error`` is set when
    the follow-up reload failed, in which case ``tasks`` still holds the
    previous collection.
    """

    error: TaskListError | None = None
    reload_error: LoadFailed | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class TaskListClient:
    def __init__(self, api: TodoApi):
        self.api = api
        self.tasks: list[Task] | None = None
        self.state = ViewState.UNLOADED
        self.last_error: TaskListError | None = None

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "TaskListClient":
        settings = settings or get_settings()
        api = TodoApi(settings.api_base_url, timeout=settings.api_timeout_seconds)
        return cls(api)

    async def aclose(self) -> None:
        await self.api.aclose()

    async def load_all(self) -> list[Task]:
        """Replace local state with the server's collection.

        Raises ``LoadFailed``; on failure the previously loaded tasks are
        kept as they were.
        """
        self.state = ViewState.LOADING
        try:
            tasks = await self.api.all_tasks()
        except TaskListError as e:
            self.state = ViewState.FAILED
            self.last_error = LoadFailed(e)
            logger.warning("Loading tasks failed: %s", e)
            raise self.last_error from e

        self.tasks = tasks
        self.state = ViewState.LOADED if tasks else ViewState.EMPTY
        self.last_error = None
        logger.debug("Loaded %d task(s)", len(tasks))
        return list(tasks)

    async def get_task(self, name: str) -> Task:
        """Fetch a single task by name. Does not touch local state."""
        return await self.api.get_task(name)

    async def add_task(self, name: str) -> Result:
        if not name or not name.strip():
            error = InvalidTaskName("Task name must not be empty")
            self.last_error = error
            return Result(error=error)
        return await self._mutate(
            f"add {name!r}", self.api.put_task(name, TaskStatus.TODO)
        )

    async def complete_task(self, name: str) -> Result:
        return await self._mutate(f"complete {name!r}", self._complete(name))

    async def delete_task(self, name: str) -> Result:
        return await self._mutate(f"delete {name!r}", self.api.delete_task(name))

    async def _complete(self, name: str) -> None:
        # create doubles as an upsert, so check existence first
        await self.api.get_task(name)
        await self.api.put_task(name, TaskStatus.DONE)

    async def _mutate(self, label: str, request: Awaitable[None]) -> Result:
        """Await ``request`` to completion, then reload the collection."""
        error: TaskListError | None = None
        try:
            await request
        except TaskListError as e:
            logger.warning("Failed to %s: %s", label, e)
            error = e
        else:
            logger.info("Done: %s", label)

        reload_error: LoadFailed | None = None
        try:
            await self.load_all()
        except LoadFailed as e:
            reload_error = e

        if error is not None:
            self.last_error = error
        return Result(error=error, reload_error=reload_error)
