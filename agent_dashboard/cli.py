"""
agent-dash CLI - Command-line interface using typer.

Main entry point for all agent-dash commands.
"""
from functools import partial
from typing import Optional

import typer
from rich.console import Console

from agent_dashboard.commands import config_cmd, dashboard, today
from agent_dashboard.config.settings import resolve_claude_stats_file, resolve_sessions_file
from agent_dashboard.config.user_config import (
    get_band_colors,
    get_refresh_interval,
    get_stats_timeout,
    get_watch_debounce,
    load_config,
)
from agent_dashboard.data.stats_source import fetch_all_stats
from agent_dashboard.utils.log import setup_logging


# Create typer app
app = typer.Typer(
    name="agent-dash",
    help="Live terminal dashboard for agent session spend and usage",
    add_completion=False,
    no_args_is_help=False,
)

# Create console for commands
console = Console()


def _run_dashboard(sessions_file: Optional[str], stats_file: Optional[str], tab: Optional[str]) -> None:
    config = load_config()
    setup_logging(str(config.get("log_level", "WARNING")))

    claude_stats_file = resolve_claude_stats_file(stats_file, config.get("claude_stats_file"))
    dashboard.run(
        console,
        resolve_sessions_file(sessions_file, config.get("sessions_file")),
        stats_loader=partial(fetch_all_stats, claude_stats_file, get_stats_timeout(config)),
        default_tab=tab or str(config.get("default_tab", dashboard.TAB_OVERVIEW)),
        refresh_interval=get_refresh_interval(config),
        watch_debounce=get_watch_debounce(config),
        colors=get_band_colors(config),
    )


@app.callback(invoke_without_command=True)
def default_callback(
    ctx: typer.Context,
    sessions_file: Optional[str] = typer.Option(None, "--sessions", "-s", help="Sessions file (JSON or JSONL)"),
    stats_file: Optional[str] = typer.Option(None, "--claude-stats", help="Claude stats-cache.json location"),
    tab: Optional[str] = typer.Option(None, "--tab", "-t", help="Tab shown on start (overview, sessions, usage)"),
):
    """
    Live terminal dashboard for agent session spend and usage.

    Run without command to show the interactive dashboard.
    """
    if ctx.invoked_subcommand is None:
        _run_dashboard(sessions_file, stats_file, tab)


@app.command(name="dashboard")
def dashboard_command(
    sessions_file: Optional[str] = typer.Option(None, "--sessions", "-s", help="Sessions file (JSON or JSONL)"),
    stats_file: Optional[str] = typer.Option(None, "--claude-stats", help="Claude stats-cache.json location"),
    tab: Optional[str] = typer.Option(None, "--tab", "-t", help="Tab shown on start (overview, sessions, usage)"),
):
    """Show the interactive dashboard with file watching and keyboard shortcuts."""
    _run_dashboard(sessions_file, stats_file, tab)


@app.command(name="today")
def today_command(
    sessions_file: Optional[str] = typer.Option(None, "--sessions", "-s", help="Sessions file (JSON or JSONL)"),
    as_json: bool = typer.Option(False, "--json", help="Print the aggregate as JSON"),
):
    """Print today's spend, session count and token totals."""
    config = load_config()
    setup_logging(str(config.get("log_level", "WARNING")))
    today.run(
        console,
        resolve_sessions_file(sessions_file, config.get("sessions_file")),
        as_json=as_json,
        colors=get_band_colors(config),
    )


@app.command(name="config")
def config_command(
    action: str = typer.Argument(..., help="Action: show, set, reset"),
    key: Optional[str] = typer.Argument(None, help="Setting name for 'set'"),
    value: Optional[str] = typer.Argument(None, help="Setting value for 'set'"),
):
    """Manage configuration (data sources, intervals, colors)."""
    config_cmd.run(console, action, key, value)


def main() -> None:
    """
    Main CLI entry point for agent-dash.

    Usage:
        agent-dash                      Show interactive dashboard
        agent-dash --sessions FILE      Use a specific sessions file
        agent-dash today --json         Print today's spend as JSON
        agent-dash config show          Show settings

    Exit:
        Press Ctrl+C, [q], or [Esc] to exit
    """
    try:
        app()
    except KeyboardInterrupt:
        # Ctrl+C at any point - exit immediately without message
        import sys
        sys.exit(0)


if __name__ == "__main__":
    main()
