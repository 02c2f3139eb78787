"""Interactive terminal client for the remote task list."""

import asyncio
import sys

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from .client import LoadFailed, Result, TaskListClient
from .config import get_settings
from .logging_setup import setup_logging
from .models import Task, TaskStatus, ViewState

console = Console()

STATUS_LABELS = {TaskStatus.TODO: "todo", TaskStatus.DONE: "done"}
STATUS_ICONS = {TaskStatus.TODO: "⭕", TaskStatus.DONE: "✅"}

HELP_TEXT = """\
ls            reload and show all tasks
add <name>    add a new task
done <name>   mark a task as done
rm <name>     delete a task
quit          exit"""


# =============================================================================
# Display
# =============================================================================


def render_tasks(tasks: list[Task]) -> Table:
    table = Table(show_header=True, header_style="bold blue")
    table.add_column("Task", style="bold", min_width=20)
    table.add_column("Status", justify="center", width=10)

    for task in tasks:
        icon = STATUS_ICONS.get(task.status, "")
        label = STATUS_LABELS.get(task.status, task.status.value)
        table.add_row(escape(task.name), f"{icon} {label}")
    return table


def show_tasks(client: TaskListClient) -> None:
    if client.state == ViewState.FAILED and isinstance(client.last_error, LoadFailed):
        console.print(f"[red]{escape(str(client.last_error))}[/red]")
    if client.tasks is None:
        console.print("[dim]Tasks not loaded. Type 'ls' to retry.[/dim]")
    elif not client.tasks:
        console.print("[dim]No tasks.[/dim]")
    else:
        console.print(render_tasks(client.tasks))


def show_result(client: TaskListClient, result: Result) -> None:
    if result.error is not None:
        console.print(f"[red]Error: {escape(str(result.error))}[/red]")
    if result.reload_error is not None and result.reload_error is not client.last_error:
        console.print(f"[yellow]{escape(str(result.reload_error))}[/yellow]")
    show_tasks(client)


# =============================================================================
# Commands
# =============================================================================


async def handle_command(client: TaskListClient, line: str) -> bool:
    """Run one console command. Returns False when the loop should stop."""
    command, _, arg = line.strip().partition(" ")
    command = command.lower()
    arg = arg.strip()

    if command in ("quit", "exit", "q"):
        return False
    if command in ("help", "?"):
        console.print(HELP_TEXT)
    elif command in ("ls", "list"):
        try:
            await client.load_all()
        except LoadFailed:
            # reported by show_tasks
            pass
        show_tasks(client)
    elif command == "add":
        show_result(client, await client.add_task(arg))
    elif command == "done":
        show_result(client, await client.complete_task(arg))
    elif command in ("rm", "delete"):
        show_result(client, await client.delete_task(arg))
    elif command:
        console.print(f"[yellow]Unknown command: {escape(command)}. Type 'help'.[/yellow]")
    return True


# =============================================================================
# Main
# =============================================================================


async def interactive_mode(client: TaskListClient) -> None:
    console.print(
        Panel(
            f"Task list at {client.api.base_url}\n[dim]help: commands, quit: exit[/dim]",
            border_style="cyan",
            padding=(0, 2),
        )
    )
    await handle_command(client, "ls")

    while True:
        console.print()
        user_input = Prompt.ask("[bold cyan]tasks[/bold cyan]").strip()
        if not await handle_command(client, user_input):
            console.print("[green]Bye.[/green]")
            break


async def run() -> None:
    client = TaskListClient.from_settings(get_settings())
    try:
        await interactive_mode(client)
    finally:
        await client.aclose()


def main() -> None:
    settings = get_settings()
    setup_logging(level=settings.log_level, log_file=settings.log_file)
    try:
        asyncio.run(run())
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
    except Exception as e:
        Console(stderr=True).print(f"[red]Error: {e}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
