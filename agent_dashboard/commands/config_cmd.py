"""
Configuration management command.

Allows users to view and modify agent-dash settings.
"""
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table

from agent_dashboard.config.defaults import (
    DEFAULT_BAND_COLORS,
    DEFAULT_INTERVALS,
    DEFAULT_PREFERENCES,
    get_all_defaults,
)
from agent_dashboard.config.settings import resolve_claude_stats_file, resolve_sessions_file
from agent_dashboard.config.user_config import CONFIG_PATH, load_config, save_config


def run(console: Console, action: str, key: Optional[str] = None, value: Optional[str] = None,
        config_path: Optional[Path] = None) -> None:
    """
    Handle configuration commands.

    Args:
        console: Rich console for output
        action: Configuration action to perform
        key: Setting name for 'set'
        value: Setting value for 'set'
        config_path: Config file location (default: ~/.config/agent-dash/config.json)

    Actions:
        show - Display all current settings
        set <key> <value> - Change a setting
        reset - Restore all defaults
    """
    if action == "show":
        _show_config(console, config_path)

    elif action == "set":
        if not key or value is None:
            console.print("[red]Error: Setting name and value required[/red]")
            console.print("[yellow]Usage: agent-dash config set refresh_interval 15[/yellow]")
            return

        if key not in get_all_defaults():
            console.print(f"[red]Error: Unknown setting: {key}[/red]")
            return

        config = load_config(config_path)
        config[key] = value
        save_config(config, config_path)
        console.print(f"[green]✓ {key} set to: {value}[/green]")
        console.print("[dim]Restart any running dashboard to use the new value.[/dim]")

    elif action == "reset":
        save_config(get_all_defaults(), config_path)
        console.print("[green]✓ Settings reset to defaults[/green]")

    else:
        console.print(f"[red]Unknown action: {action}[/red]")
        console.print("\n[yellow]Available actions:[/yellow]")
        console.print("  show              - Display all settings")
        console.print("  set <key> <value> - Change a setting")
        console.print("  reset             - Restore all defaults")


def _settings_table(title: str, config: dict, keys) -> Table:
    table = Table(title=title, show_header=False, box=None, padding=(0, 2))
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for key in keys:
        shown = config.get(key)
        table.add_row(key, str(shown) if shown not in (None, "") else "[dim](auto)[/dim]")
    return table


def _show_config(console: Console, config_path: Optional[Path] = None) -> None:
    """Display all current configuration settings."""
    config = load_config(config_path)

    console.print("\n[bold cyan]agent-dash Configuration[/bold cyan]\n")
    console.print(f"[dim]Config file: {config_path or CONFIG_PATH}[/dim]\n")

    table = Table(title="Data Sources", show_header=False, box=None, padding=(0, 2))
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("Sessions file", str(resolve_sessions_file(configured=config.get("sessions_file"))))
    table.add_row("Claude stats file", str(resolve_claude_stats_file(configured=config.get("claude_stats_file"))))
    console.print(table)
    console.print()

    console.print(_settings_table("Preferences", config, DEFAULT_PREFERENCES))
    console.print()
    console.print(_settings_table("Intervals", config, DEFAULT_INTERVALS))
    console.print()
    console.print(_settings_table("Band Colors", config, DEFAULT_BAND_COLORS))

    console.print("\n[dim]To change settings, run:[/dim]")
    console.print("[dim]  agent-dash config set <key> <value>[/dim]")
    console.print()
