#region Imports
from dataclasses import dataclass
from typing import Optional

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from agent_dashboard.aggregation.daily_cost import DailyAggregate
from agent_dashboard.config.defaults import DEFAULT_BAND_COLORS
from agent_dashboard.models.bands import CostBand
from agent_dashboard.utils.formatting import cost_band, format_cost, format_tokens, pluralize
#endregion


#region Constants
DIM = "grey50"
#endregion


#region Data Classes


@dataclass(frozen=True)
class DailyCostBanner:
    """
    Display strings and band derived from today's aggregate.

    Attributes:
        aggregate: The aggregate the strings were derived from
        cost_text: Formatted spend (e.g., "$2.50")
        band: Cost band for coloring the spend
        sessions_text: Pluralized session count (e.g., "1 session")
        tokens_in_text: Formatted input tokens (e.g., "1.2K")
        tokens_out_text: Formatted output tokens
    """

    aggregate: DailyAggregate
    cost_text: str
    band: CostBand
    sessions_text: str
    tokens_in_text: str
    tokens_out_text: str


#endregion


#region Functions


def build_banner(aggregate: DailyAggregate) -> DailyCostBanner:
    """Derive the banner's display strings from an aggregate."""
    return DailyCostBanner(
        aggregate=aggregate,
        cost_text=format_cost(aggregate.total_cost),
        band=cost_band(aggregate.total_cost),
        sessions_text=pluralize(aggregate.session_count, "session"),
        tokens_in_text=format_tokens(aggregate.tokens_in_total),
        tokens_out_text=format_tokens(aggregate.tokens_out_total),
    )


def render_daily_cost(aggregate: DailyAggregate, colors: Optional[dict] = None) -> Panel:
    """
    Render today's spend as a compact banner.

    Layout: spend and session count on the left, token totals on the right.

    Args:
        aggregate: Today's aggregate
        colors: Band color mapping (see config.defaults.DEFAULT_BAND_COLORS)

    Returns:
        Rich Panel
    """
    if colors is None:
        colors = DEFAULT_BAND_COLORS

    banner = build_banner(aggregate)
    cost_style = colors.get(f"cost_{banner.band.value}", DEFAULT_BAND_COLORS[f"cost_{banner.band.value}"])

    left = Text()
    left.append(banner.cost_text, style=f"bold {cost_style}")
    left.append("  ")
    left.append(banner.sessions_text, style=DIM)

    right = Text(justify="right")
    right.append("↓ ", style=DIM)
    right.append(banner.tokens_in_text)
    right.append("  ")
    right.append("↑ ", style=DIM)
    right.append(banner.tokens_out_text)

    grid = Table.grid(expand=True)
    grid.add_column(ratio=1)
    grid.add_column(justify="right")
    grid.add_row(left, right)

    return Panel(
        grid,
        title="[bold]Today's Spend[/bold]",
        title_align="left",
        border_style=DIM,
        padding=(0, 1),
    )


#endregion
