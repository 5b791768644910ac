#region Imports
from typing import Any, Mapping, Optional

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from agent_dashboard.events import Emit, RefreshRequested
#endregion


#region Constants
DIM = "grey50"
GREEN = "#00C853"
BLUE = "dodger_blue1"

# (block key in usage stats, display title, key holding the cost string)
DEFAULT_BLOCKS = (
    ("opencode", "OpenCode", "total_cost"),
    ("claude", "Claude", "cost"),
)
#endregion


#region Functions


def _get(stats: Any, key: str) -> Any:
    if isinstance(stats, Mapping):
        return stats.get(key)
    return getattr(stats, key, None)


def _block_line(block: Optional[Mapping[str, Any]], cost_key: str) -> Text:
    """One-line summary of a block: sessions and cost, or the error text."""
    block = block or {}
    line = Text()

    if block.get("error"):
        line.append(str(block["error"]), style="red")
        return line

    sessions = block.get("sessions")
    cost = block.get(cost_key)
    line.append(str(sessions if sessions is not None else 0), style="bold white")
    line.append(" sess  ", style=DIM)
    line.append(str(cost if cost is not None else "$0"), style=GREEN)
    return line


def _block_details(block: Optional[Mapping[str, Any]]) -> Text:
    """Token and message details shown in the detailed layout."""
    block = block or {}
    details = Text()
    if block.get("error"):
        return details

    details.append("msgs ", style=DIM)
    details.append(str(block.get("messages") or 0))
    details.append("  ↓ ", style=DIM)
    details.append(str(block.get("input_tokens") or "0"), style=BLUE)
    details.append("  ↑ ", style=DIM)
    details.append(str(block.get("output_tokens") or "0"), style=BLUE)
    details.append("  cache ", style=DIM)
    details.append(str(block.get("cache_read") or "0"))
    return details


#endregion


#region Classes


class UsageSummaryView:
    """
    Two side-by-side usage blocks with a manual refresh trigger.

    Pure display: the blocks arrive already aggregated and formatted.
    """

    def __init__(self, emit: Emit, blocks: tuple = DEFAULT_BLOCKS):
        """
        Args:
            emit: Callback receiving upward events
            blocks: (stats key, title, cost key) triples, one per column
        """
        self.emit = emit
        self.blocks = blocks

    def request_refresh(self) -> None:
        """Report that the user asked for fresh statistics."""
        self.emit(RefreshRequested())

    def render(self, usage_stats: Any, detailed: bool = False) -> Panel:
        """
        Render the usage blocks.

        Args:
            usage_stats: Mapping or object exposing one mapping per block key
            detailed: Also show message and token counts

        Returns:
            Rich Panel
        """
        grid = Table.grid(expand=True, padding=(0, 2))
        for _ in self.blocks:
            grid.add_column(ratio=1)

        grid.add_row(*[Text(title, style=DIM) for _, title, _ in self.blocks])
        grid.add_row(*[_block_line(_get(usage_stats, key), cost_key) for key, _, cost_key in self.blocks])
        if detailed:
            grid.add_row(*[_block_details(_get(usage_stats, key)) for key, _, _ in self.blocks])

        return Panel(
            grid,
            title="[bold]Usage[/bold]",
            title_align="left",
            subtitle="[dim][r] ↻[/dim]",
            subtitle_align="right",
            border_style=DIM,
            padding=(0, 1),
        )


#endregion
