"""HTTP operations against the todo collaborator API."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from ..models import Task, TaskListResponse, TaskStatus
from .errors import DecodeError, NetworkError, NotFound, UnexpectedStatus

logger = logging.getLogger(__name__)

ALL_PATH = "/todo/all"
GET_PATH = "/todo/get"
CREATE_PATH = "/todo/create"
DELETE_PATH = "/todo/delete"


def make_timeout(seconds: float) -> httpx.Timeout:
    """Connect timeout is capped so an unreachable host fails quickly."""
    return httpx.Timeout(seconds, connect=min(seconds, 5.0))


class TodoApi:
    """One coroutine per route of the collaborator API.

    Every method raises a ``TaskListError`` subclass on failure; nothing is
    swallowed here.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=make_timeout(timeout),
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> "TodoApi":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(
        self, method: str, path: str, *, key: str | None = None, **kwargs: Any
    ) -> httpx.Response:
        """Send a request, mapping transport and status failures.

        ``key`` is the task name the request targets; when given, a 404 is
        reported as ``NotFound`` for that name.
        """
        if key is not None:
            kwargs["params"] = {"key": key}
        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.DecodingError as e:
            logger.warning("%s %s body could not be decoded: %s", method, path, e)
            raise DecodeError(f"Response body could not be decoded: {e}") from e
        except httpx.RequestError as e:
            # transport failures and redirect loops
            logger.warning("%s %s%s failed: %s", method, self.base_url, path, e)
            raise NetworkError(f"Cannot reach {self.base_url}: {e}") from e

        if response.status_code == 404 and key is not None:
            raise NotFound(key)
        if response.is_error:
            logger.warning(
                "%s %s returned %s", method, path, response.status_code
            )
            raise UnexpectedStatus(response.status_code, response.text)
        return response

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"Response is not valid JSON: {e}") from e

    async def all_tasks(self) -> list[Task]:
        """GET /todo/all, in server order."""
        response = await self._request("GET", ALL_PATH)
        try:
            return TaskListResponse.model_validate(self._json(response)).items
        except ValidationError as e:
            raise DecodeError(f"Unexpected task list payload: {e}") from e

    async def get_task(self, name: str) -> Task:
        """GET /todo/get?key=<name>."""
        response = await self._request("GET", GET_PATH, key=name)
        try:
            return Task.model_validate(self._json(response))
        except ValidationError as e:
            raise DecodeError(f"Unexpected task payload: {e}") from e

    async def put_task(self, name: str, status: TaskStatus) -> None:
        """POST /todo/create. Creates the task or overwrites its status."""
        task = Task(name=name, status=status)
        await self._request("POST", CREATE_PATH, json=task.model_dump(mode="json"))

    async def delete_task(self, name: str) -> None:
        """DELETE /todo/delete?key=<name>."""
        await self._request("DELETE", DELETE_PATH, key=name)
