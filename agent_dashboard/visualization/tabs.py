#region Imports
from dataclasses import dataclass
from typing import Optional, Sequence

from rich.text import Text

from agent_dashboard.config.defaults import DEFAULT_BAND_COLORS
from agent_dashboard.events import Emit, SelectTab
from agent_dashboard.models.bands import BadgeBand, StatusBand
from agent_dashboard.models.tab import Tab, TabStatus
#endregion


#region Constants
YELLOW = "bright_yellow"
DIM = "grey50"

_STATUS_BANDS = {
    TabStatus.RUNNING: StatusBand.PULSING_SUCCESS,
    TabStatus.IDLE: StatusBand.INFO,
    TabStatus.ERROR: StatusBand.ERROR,
    TabStatus.WARNING: StatusBand.WARNING,
}

NAVIGATION_KEYS = ("left", "right", "home", "end")
#endregion


#region Data Classes


@dataclass(frozen=True)
class TabView:
    """
    Render description of one tab.

    Attributes:
        tab_id: Tab identifier
        label: Tab label
        selected: True for the active tab
        focusable: True for the single tab that takes keyboard focus
        badge: Badge count (None when absent)
        badge_visible: True when the badge is present and positive
        badge_band: Color band of the badge
        status_visible: True when the tab advertises a status
        status_band: Color band of the status dot
    """

    tab_id: str
    label: str
    selected: bool
    focusable: bool
    badge: Optional[int]
    badge_visible: bool
    badge_band: BadgeBand
    status_visible: bool
    status_band: StatusBand


#endregion


#region Functions


def badge_band(tab: Tab, active_tab: Optional[str]) -> BadgeBand:
    """Active tab wins, then urgent, then attention."""
    if active_tab == tab.id:
        return BadgeBand.PRIMARY
    elif tab.urgent:
        return BadgeBand.ALERT
    elif tab.attention:
        return BadgeBand.WARNING
    else:
        return BadgeBand.NEUTRAL


def status_band(status: object) -> StatusBand:
    """
    Map a tab status to its dot band.

    Accepts TabStatus members or their string values; anything else,
    including None, maps to StatusBand.MUTED.
    """
    if not isinstance(status, str):
        return StatusBand.MUTED
    try:
        return _STATUS_BANDS[TabStatus(status)]
    except ValueError:
        return StatusBand.MUTED


def describe_tabs(tabs: Sequence[Tab], active_tab: Optional[str]) -> list[TabView]:
    """
    Describe how each tab renders for the given active tab.

    Selection is derived solely from active_tab. Exactly one tab is
    focusable: the selected one, or the first tab when active_tab names no tab.

    Args:
        tabs: Ordered tab definitions
        active_tab: Id of the active tab (owned by the parent)

    Returns:
        One TabView per tab, in order
    """
    has_selection = any(active_tab == tab.id for tab in tabs)
    views = []
    for position, tab in enumerate(tabs):
        selected = active_tab == tab.id
        views.append(TabView(
            tab_id=tab.id,
            label=tab.label,
            selected=selected,
            focusable=selected if has_selection else position == 0,
            badge=tab.badge,
            badge_visible=tab.badge is not None and tab.badge > 0,
            badge_band=badge_band(tab, active_tab),
            status_visible=tab.status is not None,
            status_band=status_band(tab.status),
        ))
    return views


def neighbor_tab(tabs: Sequence[Tab], active_tab: Optional[str], key: str) -> Optional[str]:
    """
    Resolve keyboard navigation to a target tab id.

    'left' and 'right' wrap around; 'home' and 'end' jump to the first and
    last tab. When active_tab is unknown, navigation starts from the first tab.

    Args:
        tabs: Ordered tab definitions
        active_tab: Id of the active tab
        key: One of 'left', 'right', 'home', 'end'

    Returns:
        Target tab id, or None when there are no tabs or the key is unknown
    """
    if not tabs or key not in NAVIGATION_KEYS:
        return None

    ids = [tab.id for tab in tabs]
    if key == "home":
        return ids[0]
    if key == "end":
        return ids[-1]

    index = ids.index(active_tab) if active_tab in ids else 0
    step = -1 if key == "left" else 1
    return ids[(index + step) % len(ids)]


#endregion


#region Classes


class TabSelector:
    """
    Tab bar for the dashboard.

    Controlled component: it holds no active-tab state of its own. The
    parent passes the active tab on every render and receives a SelectTab
    event when the user picks a tab.
    """

    def __init__(self, emit: Emit, colors: Optional[dict] = None):
        """
        Args:
            emit: Callback receiving upward events
            colors: Band color mapping (see config.defaults.DEFAULT_BAND_COLORS)
        """
        self.emit = emit
        self.colors = colors if colors is not None else DEFAULT_BAND_COLORS

    def select(self, tab_id: str) -> None:
        """Report that the user picked tab_id."""
        self.emit(SelectTab(tab_id))

    def _style(self, key: str) -> str:
        return self.colors.get(key, DEFAULT_BAND_COLORS[key])

    def render(self, tabs: Sequence[Tab], active_tab: Optional[str]) -> Text:
        """
        Render the tab bar.

        Format: [1]Overview  [2]Sessions (3) ●  [3]Usage

        Args:
            tabs: Ordered tab definitions
            active_tab: Id of the active tab

        Returns:
            Rich Text with one segment per tab
        """
        bar = Text()
        for position, view in enumerate(describe_tabs(tabs, active_tab), start=1):
            if position > 1:
                bar.append("  ")

            if view.selected:
                bar.append(f"[{position}]{view.label}", style=f"black on {YELLOW}")
            else:
                bar.append("[", style=DIM)
                bar.append(str(position), style="white")
                bar.append(f"]{view.label}", style=DIM)

            if view.badge_visible:
                bar.append(" ")
                bar.append(f" {view.badge} ", style=self._style(f"badge_{view.badge_band.value}"))

            if view.status_visible:
                bar.append(" ")
                bar.append("●", style=self._style(f"status_{view.status_band.value}"))

        return bar


#endregion
