#region Imports
import re
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from agent_dashboard.utils.formatting import format_cost, format_tokens
#endregion


#region Constants
_OPENCODE_INT_PATTERNS = {
    "sessions": re.compile(r"Sessions\s+(\d+)"),
    "messages": re.compile(r"Messages\s+(\d+)"),
    "days": re.compile(r"Days\s+(\d+)"),
}

_OPENCODE_STRING_PATTERNS = {
    "total_cost": re.compile(r"Total Cost\s+(\$[\d.]+)"),
    "input_tokens": re.compile(r"Input\s+([\d.]+[KMG]?)"),
    "output_tokens": re.compile(r"Output\s+([\d.]+[KMG]?)"),
    "cache_read": re.compile(r"Cache Read\s+([\d.]+[KMG]?)"),
}
#endregion


#region Data Classes


@dataclass
class UsageStats:
    """
    Usage statistics from the two tracked tools.

    Attributes:
        opencode: OpenCode block (see parse_opencode_stats) or {"error": ...}
        claude: Claude block (see parse_claude_stats) or {"error": ...}
        updated_at: Epoch seconds of the fetch (0 = never fetched)
    """

    opencode: dict = field(default_factory=dict)
    claude: dict = field(default_factory=dict)
    updated_at: int = 0

    @property
    def is_all_error(self) -> bool:
        """True when every block failed to load."""
        return "error" in self.opencode and "error" in self.claude

    def to_dict(self) -> dict:
        return {"opencode": self.opencode, "claude": self.claude, "updated_at": self.updated_at}


#endregion


#region Functions


def _number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value


def parse_claude_stats(data: Mapping[str, Any]) -> dict:
    """
    Summarize Claude Code's stats cache.

    Token counts are summed over every model in 'modelUsage'.

    Args:
        data: Decoded stats-cache.json

    Returns:
        Dictionary with sessions, messages, input_tokens, output_tokens,
        cache_read, cost and models
    """
    models = data.get("modelUsage") or {}
    if not isinstance(models, Mapping):
        models = {}
    usages = [usage for usage in models.values() if isinstance(usage, Mapping)]

    total_input = sum(_number(usage.get("inputTokens")) for usage in usages)
    total_output = sum(_number(usage.get("outputTokens")) for usage in usages)
    total_cache_read = sum(_number(usage.get("cacheReadInputTokens")) for usage in usages)
    total_cost = sum(_number(usage.get("costUSD")) for usage in usages)

    return {
        "sessions": data.get("totalSessions") or 0,
        "messages": data.get("totalMessages") or 0,
        "input_tokens": format_tokens(total_input),
        "output_tokens": format_tokens(total_output),
        "cache_read": format_tokens(total_cache_read),
        "cost": format_cost(total_cost),
        "models": sorted(models.keys()),
    }


def parse_opencode_stats(output: str) -> dict:
    """
    Extract the headline numbers from 'opencode stats' output.

    Args:
        output: Text printed by the command

    Returns:
        Dictionary with integer sessions, messages, days (0 when missing) and
        string total_cost, input_tokens, output_tokens, cache_read ("N/A" when missing)
    """
    stats: dict = {}
    for key, pattern in _OPENCODE_INT_PATTERNS.items():
        match = pattern.search(output)
        stats[key] = int(match.group(1)) if match else 0
    for key, pattern in _OPENCODE_STRING_PATTERNS.items():
        match = pattern.search(output)
        stats[key] = match.group(1) if match else "N/A"
    return stats


def error_block(message: Optional[str]) -> dict:
    """Block shown in place of numbers when a source failed."""
    return {"error": message or "Failed to fetch"}


#endregion
