#region Imports
import os
from pathlib import Path
from typing import Final, Optional
#endregion


#region Constants
# Base directory for agent-dash data and configuration
APP_CONFIG_DIR: Final[Path] = Path.home() / ".config" / "agent-dash"

# Session list written by the agent runner
DEFAULT_SESSIONS_FILE: Final[Path] = APP_CONFIG_DIR / "sessions.json"

# Claude Code's own usage cache
DEFAULT_CLAUDE_STATS_FILE: Final[Path] = Path.home() / ".claude" / "stats-cache.json"

# Environment overrides (command-line surface only)
SESSIONS_FILE_ENV: Final[str] = "AGENT_DASH_SESSIONS_FILE"
CLAUDE_STATS_FILE_ENV: Final[str] = "CLAUDE_STATS_FILE"
#endregion


#region Functions


def resolve_sessions_file(explicit: Optional[str] = None, configured: Optional[str] = None) -> Path:
    """
    Resolve the sessions file location.

    Priority: explicit argument > environment variable > config file > default.

    Args:
        explicit: Path given on the command line
        configured: Path stored in the user config

    Returns:
        Path to the sessions file (may not exist yet)
    """
    for candidate in (explicit, os.environ.get(SESSIONS_FILE_ENV), configured):
        if candidate:
            return Path(candidate).expanduser()
    return DEFAULT_SESSIONS_FILE


def resolve_claude_stats_file(explicit: Optional[str] = None, configured: Optional[str] = None) -> Path:
    """
    Resolve the Claude stats cache location.

    Priority: explicit argument > environment variable > config file > default.

    Args:
        explicit: Path given on the command line
        configured: Path stored in the user config

    Returns:
        Path to the stats cache (may not exist)
    """
    for candidate in (explicit, os.environ.get(CLAUDE_STATS_FILE_ENV), configured):
        if candidate:
            return Path(candidate).expanduser()
    return DEFAULT_CLAUDE_STATS_FILE


#endregion
