# tests/test_cli.py

from __future__ import annotations

import io

import pytest
from rich.console import Console

from tasklist import cli
from tasklist.client import TaskListClient

from .fakes import FakeTodoServer


@pytest.fixture()
def output(monkeypatch: pytest.MonkeyPatch) -> io.StringIO:
    buf = io.StringIO()
    monkeypatch.setattr(cli, "console", Console(file=buf, width=100, color_system=None))
    return buf


@pytest.mark.asyncio
async def test_add_and_done_commands(
    server: FakeTodoServer, client: TaskListClient, output: io.StringIO
) -> None:
    assert await cli.handle_command(client, "add buy milk")
    assert server.items["buy milk"]["status"] == "todo"

    assert await cli.handle_command(client, "done buy milk")
    assert server.items["buy milk"]["status"] == "done"
    assert "buy milk" in output.getvalue()


@pytest.mark.asyncio
async def test_rm_missing_prints_error(client: TaskListClient, output: io.StringIO) -> None:
    assert await cli.handle_command(client, "rm ghost")
    text = output.getvalue()
    assert "Error" in text
    assert "ghost" in text


@pytest.mark.asyncio
async def test_ls_when_offline(
    server: FakeTodoServer, client: TaskListClient, output: io.StringIO
) -> None:
    server.offline = True
    assert await cli.handle_command(client, "ls")
    text = output.getvalue()
    assert "Could not load tasks" in text
    assert "retry" in text


@pytest.mark.asyncio
async def test_quit_and_unknown(client: TaskListClient, output: io.StringIO) -> None:
    assert await cli.handle_command(client, "frobnicate") is True
    assert "Unknown command" in output.getvalue()
    assert await cli.handle_command(client, "quit") is False


@pytest.mark.asyncio
async def test_failed_add_reports_error_and_failed_reload(
    server: FakeTodoServer, client: TaskListClient, output: io.StringIO
) -> None:
    server.offline = True
    assert await cli.handle_command(client, "add buy milk")
    text = output.getvalue()
    assert "Error: Cannot reach" in text
    assert "Could not load tasks" in text
