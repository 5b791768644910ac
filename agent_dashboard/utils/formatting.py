#region Imports
from typing import Any

from agent_dashboard.models.bands import CostBand
#endregion


#region Constants
# Spend thresholds in USD
COST_ALERT_THRESHOLD = 10.0
COST_WARNING_THRESHOLD = 5.0

# Below this a cost is shown with 4 decimals instead of 2
SUB_CENT = 0.01
#endregion


#region Functions


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value == value


def format_cost(cost: Any) -> str:
    """
    Format a cost value for display.

    Amounts of a cent or more are rounded to 2 decimals, positive amounts
    below a cent to 4 decimals. Zero, negative and non-numeric values
    render as "$0.00".

    Args:
        cost: Cost in USD

    Returns:
        Formatted string (e.g., "$12.00", "$1.24", "$0.0050", "$0.00")
    """
    if not _is_number(cost) or cost <= 0:
        return "$0.00"
    if cost >= SUB_CENT:
        return f"${cost:.2f}"
    return f"${cost:.4f}"


def cost_band(cost: Any) -> CostBand:
    """
    Classify a cost into a display band.

    Args:
        cost: Cost in USD

    Returns:
        CostBand.ALERT from $10, CostBand.WARNING from $5, otherwise CostBand.NOMINAL
    """
    if not _is_number(cost):
        return CostBand.NOMINAL
    if cost >= COST_ALERT_THRESHOLD:
        return CostBand.ALERT
    elif cost >= COST_WARNING_THRESHOLD:
        return CostBand.WARNING
    else:
        return CostBand.NOMINAL


def format_tokens(n: Any) -> str:
    """
    Format a token count with a magnitude suffix.

    Args:
        n: Token count

    Returns:
        Formatted string (e.g., "1.5M", "1.0K", "999"), "0" for non-numeric input
    """
    if not _is_number(n):
        return "0"
    if n >= 1_000_000:
        return f"{n / 1_000_000:.1f}M"
    elif n >= 1_000:
        return f"{n / 1_000:.1f}K"
    else:
        return f"{n}"


def pluralize(n: int, word: str) -> str:
    """Return "1 word" for one, "{n} words" otherwise."""
    if n == 1:
        return f"1 {word}"
    return f"{n} {word}s"


#endregion
