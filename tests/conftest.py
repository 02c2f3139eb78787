# tests/conftest.py

from __future__ import annotations

import pytest
import pytest_asyncio

from tasklist.client import TaskListClient, TodoApi

from .fakes import FakeTodoServer

BASE_URL = "http://todo.test"


@pytest.fixture()
def server() -> FakeTodoServer:
    return FakeTodoServer()


@pytest.fixture()
def api(server: FakeTodoServer) -> TodoApi:
    return TodoApi(BASE_URL, transport=server.transport())


@pytest_asyncio.fixture()
async def client(api: TodoApi):
    """
    TaskListClient wired to the fake server.

    NOTE: only for async tests. Route tests build their own client because
    TestClient runs requests on its own event loop.
    """
    c = TaskListClient(api)
    yield c
    await c.aclose()
