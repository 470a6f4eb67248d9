"""Main CLI application."""

import asyncio
import logging
import re
import sys
from datetime import date
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional, TypeVar

import click
import httpx
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from everhour_client import __version__
from everhour_client.cli.config_commands import config
from everhour_client.core.client import EverhourApiClient
from everhour_client.core.config import API_KEY_ENV_VAR, ConfigManager
from everhour_client.core.exceptions import EverhourError
from everhour_client.endpoints import (
    add_time,
    clients_report,
    get_all_projects,
    get_all_users,
    get_current_user,
    get_project_tasks,
    get_running_timer,
    get_user_time_records,
    projects_report,
    start_timer,
    stop_timer,
    users_report,
)
from everhour_client.models import TimeRecordRequest, TimerRequest

console = Console()
error_console = Console(stderr=True)

T = TypeVar("T")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DURATION_PATTERN = re.compile(r"^(?:(\d+)h)?\s*(?:(\d+)m)?\s*(?:(\d+)s)?$")


def get_config(config_path: Optional[str] = None) -> ConfigManager:
    """Get ConfigManager instance with optional custom config file."""
    return ConfigManager(Path(config_path) if config_path else None)


def setup_logging(level_name: str) -> None:
    """Send log records at or above the given level to stderr."""
    level = getattr(logging, level_name.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)


def build_http_client(timeout: float) -> httpx.AsyncClient:
    """Create the transport used by CLI commands."""
    return httpx.AsyncClient(timeout=timeout)


def load_settings(ctx: click.Context) -> dict[str, Any]:
    """Load the config file and resolve the API key, once per invocation.

    Exits with status 1 if the config file is invalid or no API key is set.
    """
    if "settings" not in ctx.obj:
        try:
            config_mgr = get_config(ctx.obj.get("config_path"))
            api_key = config_mgr.resolve_api_key(ctx.obj.get("api_key"))
        except ValueError as e:
            error_console.print(f"[red]Error:[/red] {e}")
            sys.exit(1)

        log_level = config_mgr.get("advanced.log_level", "WARNING")
        setup_logging("DEBUG" if ctx.obj.get("verbose") else log_level)
        ctx.obj["settings"] = {
            "api_key": api_key,
            "timeout": config_mgr.get("api.timeout", 30),
            "time_format": config_mgr.get("display.time_format", "human"),
            "show_seconds": config_mgr.get("display.show_seconds", False),
        }
    settings: dict[str, Any] = ctx.obj["settings"]
    return settings


def run_api(ctx: click.Context, call: Callable[[EverhourApiClient], Awaitable[T]]) -> T:
    """Run an API call with a client built from the CLI options.

    Errors reported by the client are printed and end the command with exit
    status 1.
    """
    settings = load_settings(ctx)

    async def runner() -> T:
        async with build_http_client(settings["timeout"]) as http_client:
            client = EverhourApiClient(settings["api_key"], http_client)
            return await call(client)

    try:
        return asyncio.run(runner())
    except (EverhourError, ValueError, httpx.HTTPError) as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


def format_duration(
    seconds: Optional[int], time_format: str = "human", show_seconds: bool = False
) -> str:
    """Format duration in seconds to human-readable string."""
    if seconds is None:
        return "-"

    if time_format == "decimal":
        return f"{seconds / 3600:.2f}h"

    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60

    if hours > 0:
        text = f"{hours}h {minutes}m"
    elif minutes > 0 or not show_seconds:
        text = f"{minutes}m"
    else:
        return f"{secs}s"
    if show_seconds and secs:
        text += f" {secs}s"
    return text


def format_money(cents: Optional[int]) -> str:
    """Format an amount in cents."""
    if cents is None:
        return "-"
    return f"{cents / 100:,.2f}"


def parse_duration(value: str) -> int:
    """Parse a duration like '1h30m', '45m', '90s' or '3600' into seconds.

    Raises:
        ValueError: If the value is not a positive duration
    """
    value = value.strip().lower()
    if value.isdigit():
        seconds = int(value)
    else:
        match = DURATION_PATTERN.match(value)
        if not match or not any(match.groups()):
            raise ValueError(f"Invalid duration: {value!r}. Use e.g. 1h30m, 45m or 90s")
        hours, minutes, secs = (int(g) if g else 0 for g in match.groups())
        seconds = hours * 3600 + minutes * 60 + secs
    if seconds <= 0:
        raise ValueError("Duration must be greater than zero")
    return seconds


def _duration(ctx: click.Context, seconds: Optional[int]) -> str:
    settings = load_settings(ctx)
    return format_duration(seconds, settings["time_format"], settings["show_seconds"])


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--api-key",
    envvar=API_KEY_ENV_VAR,
    help=f"Everhour API key (default: ${API_KEY_ENV_VAR} or api.key from config)",
)
@click.option("--config", "config_path", type=click.Path(), help="Path to config file")
@click.option("-v", "--verbose", is_flag=True, help="Log requests to stderr")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.pass_context
def cli(
    ctx: click.Context,
    api_key: Optional[str],
    config_path: Optional[str],
    verbose: bool,
    no_color: bool,
) -> None:
    """Everhour - Command-line client for the Everhour time-tracking API.

    Check timers, log time, and browse projects and reports.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["api_key"] = api_key
    ctx.obj["verbose"] = verbose

    if no_color:
        console.no_color = True
        error_console.no_color = True


cli.add_command(config)


@cli.command()
@click.pass_context
def me(ctx: click.Context) -> None:
    """Show the user the API key belongs to.

    Example:
        everhour me
    """
    user = run_api(ctx, get_current_user)

    lines = [
        f"[bold]{user['name']}[/bold]",
        f"ID: {user['id']}",
        f"Role: {user['role']}",
        f"Status: {user['status']}",
    ]
    if user.get("headline"):
        lines.append(f"Headline: {user['headline']}")
    console.print(Panel("\n".join(lines), title="Current User", border_style="green"))


@cli.command()
@click.pass_context
def users(ctx: click.Context) -> None:
    """List team members.

    Example:
        everhour users
    """
    team = run_api(ctx, get_all_users)

    if not team:
        console.print("[yellow]No users found[/yellow]")
        return

    table = Table(title="Team Members")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Role")
    table.add_column("Status")

    for user in team:
        status_style = "green" if user["status"] == "active" else "yellow"
        table.add_row(
            str(user["id"]),
            user["name"],
            user["role"],
            f"[{status_style}]{user['status']}[/{status_style}]",
        )

    console.print(table)


@cli.command()
@click.option("-q", "--query", help="Search projects by name")
@click.option("-l", "--limit", type=int, help="Maximum number of projects")
@click.pass_context
def projects(ctx: click.Context, query: Optional[str], limit: Optional[int]) -> None:
    """List projects.

    Examples:
        everhour projects
        everhour projects -q website --limit 10
    """
    result = run_api(ctx, lambda client: get_all_projects(client, limit=limit, query=query))

    if not result:
        console.print("[yellow]No projects found[/yellow]")
        return

    table = Table(title="Projects")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Workspace")

    for project in result:
        table.add_row(
            project["id"],
            project["name"],
            project.get("type", "-"),
            project.get("workspaceName", "-"),
        )

    console.print(table)


@cli.command()
@click.argument("project_id")
@click.option("-q", "--query", help="Search tasks by name")
@click.option("--exclude-closed", is_flag=True, help="Hide closed tasks")
@click.option("-l", "--limit", type=int, help="Maximum number of tasks")
@click.pass_context
def tasks(
    ctx: click.Context,
    project_id: str,
    query: Optional[str],
    exclude_closed: bool,
    limit: Optional[int],
) -> None:
    """List tasks of a project.

    Example:
        everhour tasks ev:1234567890 --exclude-closed
    """
    result = run_api(
        ctx,
        lambda client: get_project_tasks(
            client,
            project_id,
            limit=limit,
            exclude_closed=exclude_closed or None,
            query=query,
        ),
    )

    if not result:
        console.print("[yellow]No tasks found[/yellow]")
        return

    table = Table(title=f"Tasks in {project_id}")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Status")
    table.add_column("Time", justify="right")
    table.add_column("Estimate", justify="right")

    for task in result:
        time_total = task.get("time", {}).get("total")
        estimate_total = task.get("estimate", {}).get("total")
        table.add_row(
            task["id"],
            task["name"],
            task.get("status", "-"),
            _duration(ctx, time_total),
            _duration(ctx, estimate_total),
        )

    console.print(table)


@cli.group()
def timer() -> None:
    """Start, stop and inspect the running timer."""
    pass


@timer.command("status")
@click.pass_context
def timer_status(ctx: click.Context) -> None:
    """Show the running timer.

    Example:
        everhour timer status
    """
    current = run_api(ctx, get_running_timer)

    if not current or current.get("status") != "active":
        console.print("[yellow]No timer running[/yellow]")
        return

    task = current.get("task", {})
    console.print(f"[green]●[/green] Running: {task.get('name', 'unknown task')}")
    if task.get("id"):
        console.print(f"  Task: {task['id']}")
    console.print(f"  Duration: {_duration(ctx, current.get('duration'))}")
    if current.get("today") is not None:
        console.print(f"  Today on this task: {_duration(ctx, current['today'])}")
    if current.get("comment"):
        console.print(f"  Comment: {current['comment']}")


@timer.command("start")
@click.argument("task_id")
@click.option("-c", "--comment", help="Timer comment")
@click.pass_context
def timer_start(ctx: click.Context, task_id: str, comment: Optional[str]) -> None:
    """Start a timer on a task.

    Example:
        everhour timer start ev:1234567890 -c "Code review"
    """
    started = run_api(
        ctx, lambda client: start_timer(client, TimerRequest(task=task_id, comment=comment))
    )

    task = started.get("task", {})
    console.print(f"[green]✓[/green] Started timer: {task.get('name', task_id)}")
    if started.get("startedAt"):
        console.print(f"  Started: {started['startedAt']}")


@timer.command("stop")
@click.pass_context
def timer_stop(ctx: click.Context) -> None:
    """Stop the running timer.

    Example:
        everhour timer stop
    """
    stopped = run_api(ctx, stop_timer)

    task = stopped.get("task", {})
    console.print(f"[green]✓[/green] Stopped timer: {task.get('name', 'unknown task')}")
    if stopped.get("duration") is not None:
        console.print(f"  Duration: {_duration(ctx, stopped['duration'])}")


@cli.group()
def time() -> None:
    """Log and list time records."""
    pass


@time.command("add")
@click.argument("task_id")
@click.argument("duration")
@click.option("-d", "--date", "record_date", help="Day to log time on (YYYY-MM-DD, default: today)")
@click.option("-c", "--comment", help="Comment for the time record")
@click.option("-u", "--user", "user_id", type=int, help="Log time for another user")
@click.pass_context
def time_add(
    ctx: click.Context,
    task_id: str,
    duration: str,
    record_date: Optional[str],
    comment: Optional[str],
    user_id: Optional[int],
) -> None:
    """Add time to a task.

    DURATION accepts 1h30m, 45m, 90s or plain seconds.

    Examples:
        everhour time add ev:1234567890 1h30m
        everhour time add ev:1234567890 45m --date 2024-03-01 -c "Planning"
    """
    try:
        seconds = parse_duration(duration)
        payload = TimeRecordRequest(
            date=record_date or date.today(),
            time=seconds,
            user=user_id,
            comment=comment,
        )
    except ValueError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    record = run_api(ctx, lambda client: add_time(client, task_id, payload))

    console.print(f"[green]✓[/green] Added {_duration(ctx, seconds)} to {task_id}")
    console.print(f"  Date: {record.get('date', payload.date.isoformat())}")
    if record.get("time") is not None:
        console.print(f"  Total for the day: {_duration(ctx, record['time'])}")


@time.command("list")
@click.option("--from", "date_from", help="First day (YYYY-MM-DD)")
@click.option("--to", "date_to", help="Last day (YYYY-MM-DD)")
@click.option("-l", "--limit", type=int, help="Maximum number of records")
@click.pass_context
def time_list(
    ctx: click.Context,
    date_from: Optional[str],
    date_to: Optional[str],
    limit: Optional[int],
) -> None:
    """List your time records.

    Example:
        everhour time list --from 2024-03-01 --to 2024-03-31
    """

    async def fetch(client: EverhourApiClient) -> list[Any]:
        user = await get_current_user(client)
        return await get_user_time_records(client, user["id"], date_from, date_to, limit)

    records = run_api(ctx, fetch)

    if not records:
        console.print("[yellow]No time records found[/yellow]")
        return

    table = Table(title="Time Records")
    table.add_column("Date", style="cyan")
    table.add_column("Task")
    table.add_column("Time", justify="right", style="green")
    table.add_column("Comment")

    total = 0
    for record in records:
        total += record.get("time", 0)
        task = record.get("task", {})
        table.add_row(
            record["date"],
            task.get("name", task.get("id", "-")),
            _duration(ctx, record.get("time")),
            record.get("comment", ""),
        )

    console.print(table)
    console.print(f"\nTotal: {_duration(ctx, total)}")


REPORTS: dict[str, tuple[Callable[..., Awaitable[list[Any]]], str, str]] = {
    "users": (users_report, "memberName", "Member"),
    "projects": (projects_report, "projectName", "Project"),
    "clients": (clients_report, "clientName", "Client"),
}


@cli.command()
@click.argument("type", type=click.Choice(list(REPORTS)))
@click.option("--from", "date_from", help="First day (YYYY-MM-DD)")
@click.option("--to", "date_to", help="Last day (YYYY-MM-DD)")
@click.pass_context
def report(ctx: click.Context, type: str, date_from: Optional[str], date_to: Optional[str]) -> None:
    """Show a dashboard report.

    Types:
        users    - Time and billing per team member
        projects - Time and billing per project
        clients  - Time and billing per client

    Examples:
        everhour report users --from 2024-03-01 --to 2024-03-31
        everhour report projects
    """
    fetch, name_key, label = REPORTS[type]
    rows = run_api(ctx, lambda client: fetch(client, date_gte=date_from, date_lte=date_to))

    if not rows:
        console.print("[yellow]No data for this period[/yellow]")
        return

    table = Table(title=f"{label} Report")
    table.add_column(label, style="cyan")
    table.add_column("Time", justify="right", style="green")
    table.add_column("Billable", justify="right")
    table.add_column("Amount", justify="right")
    table.add_column("Uninvoiced", justify="right")

    for row in rows:
        table.add_row(
            str(row.get(name_key, "-")),
            _duration(ctx, row.get("time")),
            _duration(ctx, row.get("billableTime")),
            format_money(row.get("billableAmount")),
            format_money(row.get("uninvoicedAmount")),
        )

    console.print(table)


if __name__ == "__main__":
    cli(obj={})
