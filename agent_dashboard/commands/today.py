#region Imports
import json
import sys
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from rich.console import Console

from agent_dashboard.aggregation.daily_cost import compute
from agent_dashboard.data.session_loader import load_sessions
from agent_dashboard.visualization.daily_cost import build_banner, render_daily_cost
#endregion


#region Functions


def run(console: Console, sessions_file: Path, as_json: bool = False,
        now: Optional[datetime] = None, colors: Optional[dict] = None) -> None:
    """
    Print today's spend for a sessions file.

    Args:
        console: Rich console for output
        sessions_file: JSON or JSONL file with the session list
        as_json: Print the aggregate and its display strings as JSON
        now: Current time (default: now, UTC)
        colors: Band color mapping

    Exit:
        Exits with status 1 if the sessions file doesn't exist or can't be read
    """
    try:
        sessions = load_sessions(sessions_file)
    except OSError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    aggregate = compute(sessions, now or datetime.now(timezone.utc))

    if as_json:
        banner = build_banner(aggregate)
        payload = asdict(aggregate)
        payload.update({
            "cost_text": banner.cost_text,
            "band": banner.band.value,
            "sessions_text": banner.sessions_text,
            "tokens_in_text": banner.tokens_in_text,
            "tokens_out_text": banner.tokens_out_text,
        })
        console.print_json(json.dumps(payload))
        return

    console.print(render_daily_cost(aggregate, colors))


#endregion
