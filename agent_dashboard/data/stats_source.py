#region Imports
import json
import shutil
import subprocess
import time
from pathlib import Path

from agent_dashboard.aggregation.usage_stats import (
    UsageStats,
    error_block,
    parse_claude_stats,
    parse_opencode_stats,
)
from agent_dashboard.utils.log import get_logger
#endregion


logger = get_logger(__name__)


#region Functions


def fetch_claude_stats(stats_file: Path) -> dict:
    """
    Read Claude Code's stats cache.

    Args:
        stats_file: Path to stats-cache.json

    Returns:
        Parsed block, or an error block if the file is missing or invalid
    """
    try:
        with open(stats_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return error_block("No stats file")
    except (json.JSONDecodeError, UnicodeDecodeError):
        return error_block("Invalid JSON")
    except OSError as e:
        return error_block(f"Cannot read stats file: {e}")

    if not isinstance(data, dict):
        return error_block("Invalid JSON")
    return parse_claude_stats(data)


def fetch_opencode_stats(timeout: float = 10.0) -> dict:
    """
    Run 'opencode stats' and parse its output.

    Args:
        timeout: Seconds to wait for the command

    Returns:
        Parsed block, or an error block if the tool is missing or fails
    """
    executable = shutil.which("opencode")
    if executable is None:
        return error_block("OpenCode not installed")

    try:
        result = subprocess.run(
            [executable, "stats"],
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        return error_block("Timeout fetching stats")
    except OSError as e:
        return error_block(f"Failed to run opencode: {e}")

    output = (result.stdout or "") + (result.stderr or "")
    if result.returncode != 0:
        return error_block(f"Command failed: {output.strip()}")
    return parse_opencode_stats(output)


def fetch_all_stats(claude_stats_file: Path, timeout: float = 10.0) -> UsageStats:
    """
    Fetch both usage blocks.

    Failures become error blocks so the dashboard can still render.

    Args:
        claude_stats_file: Path to Claude's stats-cache.json
        timeout: Timeout for 'opencode stats' in seconds

    Returns:
        UsageStats with the current time as updated_at
    """
    stats = UsageStats(
        opencode=fetch_opencode_stats(timeout),
        claude=fetch_claude_stats(claude_stats_file),
        updated_at=int(time.time()),
    )
    if stats.is_all_error:
        logger.warning(
            "Usage stats unavailable: opencode=%s, claude=%s",
            stats.opencode["error"],
            stats.claude["error"],
        )
    return stats


#endregion
