"""CLI commands for configuration management."""

import json
import shutil
import sys
from pathlib import Path
from typing import Any, Optional

import click
from rich.console import Console
from rich.table import Table

from everhour_client.core.config import ConfigManager

console = Console()
error_console = Console(stderr=True)

SECRET_KEYS = {"api.key"}


def _config_manager(ctx: click.Context) -> ConfigManager:
    """Load the config file chosen with the top-level --config option."""
    obj = ctx.find_root().obj or {}
    config_path: Optional[str] = obj.get("config_path")
    try:
        return ConfigManager(Path(config_path) if config_path else None)
    except ValueError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


def _mask(key: str, value: Any) -> Any:
    if key in SECRET_KEYS and value:
        text = str(value)
        return f"{text[:4]}…" if len(text) > 4 else "****"
    return value


@click.group()
def config() -> None:
    """Manage Everhour client configuration.

    Configuration is stored in ~/.everhour/config.yml
    """
    pass


@config.command("show")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def config_show(ctx: click.Context, as_json: bool) -> None:
    """Show all configuration settings.

    The API key is masked.

    Example:
        everhour config show
        everhour config show --json
    """
    config_mgr = _config_manager(ctx)

    if as_json:
        data = config_mgr.to_dict()
        data["api"]["key"] = _mask("api.key", data["api"].get("key"))
        print(json.dumps(data, indent=2))
        return

    table = Table(title="Everhour Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    for key in config_mgr.get_all_keys():
        table.add_row(key, str(_mask(key, config_mgr.get(key))))

    console.print(table)
    console.print(f"\nConfig file: {config_mgr.config_path}")


@config.command("get")
@click.argument("key")
@click.pass_context
def config_get(ctx: click.Context, key: str) -> None:
    """Get a specific configuration value.

    Uses dot notation to access nested values.

    Example:
        everhour config get api.timeout
    """
    config_mgr = _config_manager(ctx)
    value = config_mgr.get(key)

    if value is None:
        error_console.print(f"[red]Error:[/red] Configuration key '{key}' not found")
        sys.exit(1)

    if isinstance(value, dict):
        console.print(json.dumps(value, indent=2))
    else:
        console.print(str(value))


@config.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_context
def config_set(ctx: click.Context, key: str, value: str) -> None:
    """Set a configuration value.

    Values are automatically converted to appropriate types.
    Use 'true'/'false' for booleans, numbers for integers.

    Example:
        everhour config set api.key 1234-5678-abcd
        everhour config set api.timeout 60
        everhour config set display.time_format decimal
    """
    config_mgr = _config_manager(ctx)

    converted_value: Any = value
    if value.lower() in ("true", "yes"):
        converted_value = True
    elif value.lower() in ("false", "no"):
        converted_value = False
    elif value.lower() == "null":
        converted_value = None
    elif key not in SECRET_KEYS:
        try:
            converted_value = int(value)
        except ValueError:
            try:
                converted_value = float(value)
            except ValueError:
                converted_value = value

    try:
        config_mgr.set(key, converted_value)
        console.print(f"[green]✓[/green] Set {key} = {_mask(key, converted_value)}")
    except ValueError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


@config.command("reset")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
def config_reset(ctx: click.Context, yes: bool) -> None:
    """Reset configuration to defaults.

    Example:
        everhour config reset
        everhour config reset --yes
    """
    config_mgr = _config_manager(ctx)

    if not yes:
        console.print("[yellow]Warning:[/yellow] This will reset all configuration to defaults.")
        if not click.confirm("Continue?"):
            console.print("Cancelled")
            return

    backup_path = config_mgr.config_path.with_suffix(".yml.backup")
    if config_mgr.config_path.exists():
        shutil.copy(config_mgr.config_path, backup_path)
        console.print(f"Backed up current config to {backup_path}")

    config_mgr.reset()
    console.print("[green]✓[/green] Configuration reset to defaults")
    console.print(f"Config file: {config_mgr.config_path}")


@config.command("path")
@click.pass_context
def config_path(ctx: click.Context) -> None:
    """Show path to configuration file.

    Example:
        everhour config path
    """
    config_mgr = _config_manager(ctx)
    console.print(str(config_mgr.config_path))
