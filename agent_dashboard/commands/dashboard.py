#region Imports
import queue
import sys
import threading
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence

from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from agent_dashboard.aggregation.daily_cost import DailyAggregate, compute, filter_today
from agent_dashboard.aggregation.usage_stats import UsageStats
from agent_dashboard.config.defaults import DEFAULT_BAND_COLORS, DEFAULT_TABS
from agent_dashboard.data.session_loader import load_sessions
from agent_dashboard.events import Event, RefreshRequested, SelectTab
from agent_dashboard.models.bands import CostBand
from agent_dashboard.models.session_record import SessionLike, SessionRecord, coerce_session
from agent_dashboard.models.tab import Tab, TabStatus
from agent_dashboard.utils.file_watcher import FileWatcher
from agent_dashboard.utils.formatting import cost_band, format_cost, format_tokens
from agent_dashboard.utils.log import get_logger
from agent_dashboard.visualization.daily_cost import render_daily_cost
from agent_dashboard.visualization.tabs import NAVIGATION_KEYS, TabSelector, neighbor_tab
from agent_dashboard.visualization.usage_summary import UsageSummaryView
#endregion


logger = get_logger(__name__)


#region Constants
TAB_OVERVIEW = "overview"
TAB_SESSIONS = "sessions"
TAB_USAGE = "usage"

YELLOW = "bright_yellow"
DIM = "grey50"

QUIT_KEYS = ("q", "esc")
REFRESH_KEY = "r"
#endregion


#region Classes


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DashboardState:
    """
    Parent container of the dashboard components.

    Owns the session list, the active tab and the usage statistics. The
    components it renders report user actions through handle_event; this
    is the only place where that state changes.
    """

    def __init__(
        self,
        sessions: Iterable[SessionLike] = (),
        active_tab: str = TAB_OVERVIEW,
        tab_definitions: Sequence[dict] = DEFAULT_TABS,
        stats_loader: Optional[Callable[[], UsageStats]] = None,
        clock: Callable[[], datetime] = _utc_now,
        colors: Optional[dict] = None,
    ):
        """
        Args:
            sessions: Initial session list
            active_tab: Tab shown first (falls back to the first tab if unknown)
            tab_definitions: Tab mappings with 'id' and 'label'
            stats_loader: Callable fetching fresh usage statistics
            clock: Returns the current time; injected for deterministic renders
            colors: Band color mapping
        """
        self.tab_definitions = [dict(definition) for definition in tab_definitions]
        self.sessions: list[SessionRecord] = [coerce_session(s) for s in sessions]
        self.usage_stats = UsageStats()
        self.stats_loader = stats_loader
        self.clock = clock
        self.colors = colors if colors is not None else DEFAULT_BAND_COLORS
        self.should_quit = False

        tab_ids = self.tab_ids()
        if active_tab in tab_ids:
            self.active_tab = active_tab
        else:
            self.active_tab = tab_ids[0] if tab_ids else ""

        self.tab_selector = TabSelector(self.handle_event, self.colors)
        self.usage_view = UsageSummaryView(self.handle_event)

    def tab_ids(self) -> list[str]:
        return [str(definition["id"]) for definition in self.tab_definitions]

    def set_sessions(self, sessions: Iterable[SessionLike]) -> None:
        """Replace the session list (called when the data source reports new data)."""
        self.sessions = [coerce_session(s) for s in sessions]

    def reload_sessions(self, sessions_file: Path) -> bool:
        """
        Reload the session list from disk.

        A file that is missing or unreadable leaves the current list in place.

        Returns:
            True if the session list was replaced
        """
        try:
            sessions = load_sessions(sessions_file)
        except OSError as e:
            logger.warning("Keeping previous sessions, cannot reload %s: %s", sessions_file, e)
            return False
        self.set_sessions(sessions)
        return True

    def aggregate(self, now: Optional[datetime] = None) -> DailyAggregate:
        """Today's aggregate for the current session list."""
        return compute(self.sessions, now or self.clock())

    def today_sessions(self, now: Optional[datetime] = None) -> list[SessionRecord]:
        """Today's sessions, most recently updated first."""
        today = filter_today(self.sessions, now or self.clock())
        return sorted(today, key=lambda record: record.updated_at, reverse=True)

    def tabs(self, now: Optional[datetime] = None) -> list[Tab]:
        """
        Build the tab set for this render.

        The sessions tab carries today's session count; its badge turns to
        an alert when a session reports an error and to a warning once
        today's spend reaches the warning band. The usage tab shows an error
        dot when no statistics could be loaded.
        """
        # one clock read so the badge and the band describe the same UTC day
        now = now or self.clock()
        today = self.today_sessions(now)
        statuses = {(record.status or "").lower() for record in today}
        band = cost_band(self.aggregate(now).total_cost)

        tabs = []
        for definition in self.tab_definitions:
            tab = Tab.from_mapping(definition)
            if tab.id == TAB_SESSIONS:
                if TabStatus.ERROR.value in statuses:
                    status = TabStatus.ERROR
                elif TabStatus.RUNNING.value in statuses:
                    status = TabStatus.RUNNING
                elif today:
                    status = TabStatus.IDLE
                else:
                    status = None
                tab = Tab(
                    id=tab.id,
                    label=tab.label,
                    badge=len(today),
                    status=status,
                    urgent=TabStatus.ERROR.value in statuses,
                    attention=band is not CostBand.NOMINAL,
                )
            elif tab.id == TAB_USAGE:
                if self.usage_stats.is_all_error:
                    status = TabStatus.ERROR
                elif "error" in self.usage_stats.opencode or "error" in self.usage_stats.claude:
                    status = TabStatus.WARNING
                else:
                    status = tab.status
                tab = Tab(id=tab.id, label=tab.label, badge=tab.badge, status=status,
                          urgent=tab.urgent, attention=tab.attention)
            tabs.append(tab)
        return tabs

    def refresh_stats(self) -> None:
        """
        Reload usage statistics through the stats loader.

        When every source fails the previous statistics are kept.
        """
        if self.stats_loader is None:
            return

        stats = self.stats_loader()
        if stats.is_all_error and self.usage_stats.updated_at:
            logger.warning("Stats fetch failed during refresh, using cached state")
            return
        self.usage_stats = stats

    def handle_event(self, event: Event) -> None:
        """
        Apply an event reported by a component.

        Args:
            event: SelectTab or RefreshRequested
        """
        if isinstance(event, SelectTab):
            if event.tab_id in self.tab_ids():
                self.active_tab = event.tab_id
            else:
                logger.warning("Ignoring selection of unknown tab %r", event.tab_id)
        elif isinstance(event, RefreshRequested):
            self.refresh_stats()
        else:
            logger.warning("Ignoring unknown event %r", event)

    def handle_key(self, key: str) -> None:
        """
        Translate a key press into a component action.

        Digits pick tabs by position, arrows/Home/End move between tabs,
        'r' requests a refresh, 'q' and Esc quit.
        """
        if key in QUIT_KEYS:
            self.should_quit = True
        elif key == REFRESH_KEY:
            self.usage_view.request_refresh()
        elif key in NAVIGATION_KEYS:
            target = neighbor_tab(self.tabs(), self.active_tab, key)
            if target is not None:
                self.tab_selector.select(target)
        elif key.isdigit() and key != "0":
            ids = self.tab_ids()
            position = int(key)
            if position <= len(ids):
                self.tab_selector.select(ids[position - 1])


#endregion


#region Functions


def _format_updated(updated_at: int) -> str:
    if updated_at <= 0:
        return "-"
    moment = datetime.fromtimestamp(updated_at / 1000, tz=timezone.utc)
    return moment.strftime("%H:%M:%S")


def _create_sessions_table(state: DashboardState, now: datetime) -> Panel:
    """Table of today's sessions, newest first."""
    sessions = state.today_sessions(now)
    if not sessions:
        return Panel(Text("No sessions today.", style=DIM), title="[bold]Sessions[/bold]",
                     title_align="left", border_style=DIM)

    table = Table(show_header=True, header_style=f"bold {DIM}", box=None, expand=True, padding=(0, 1))
    table.add_column("Session", style="white", no_wrap=True)
    table.add_column("Model", style=DIM)
    table.add_column("Status")
    table.add_column("Updated (UTC)", justify="right", style=DIM)
    table.add_column("Cost", justify="right")
    table.add_column("↓ In", justify="right", style="dodger_blue1")
    table.add_column("↑ Out", justify="right", style="dodger_blue1")

    for record in sessions:
        cost_style = state.colors.get(f"cost_{cost_band(record.cost).value}", "white")
        table.add_row(
            record.label or record.session_id or "-",
            record.model or "-",
            record.status or "-",
            _format_updated(record.updated_at),
            Text(format_cost(record.cost), style=cost_style),
            format_tokens(record.tokens_in),
            format_tokens(record.tokens_out),
        )

    return Panel(table, title="[bold]Sessions[/bold]", title_align="left", border_style=DIM)


def _create_footer(state: DashboardState, now: datetime) -> Text:
    """Key hints and the time of this render."""
    footer = Text()
    count = len(state.tab_definitions)
    footer.append("Use ", style=DIM)
    footer.append(f"1-{count}" if count > 1 else "1", style=f"bold {YELLOW}")
    footer.append(" or ", style=DIM)
    footer.append("← →", style=f"bold {YELLOW}")
    footer.append(" to switch tabs, ", style=DIM)
    footer.append(REFRESH_KEY, style=f"bold {YELLOW}")
    footer.append(" to refresh usage, ", style=DIM)
    footer.append("esc", style=f"bold {YELLOW}")
    footer.append(" key to quit.\n", style=DIM)
    footer.append("Rendered: ", style=DIM)
    footer.append(now.astimezone(timezone.utc).strftime("%H:%M:%S UTC"), style="bold cyan")
    return footer


def render_dashboard(state: DashboardState) -> Group:
    """
    Render the whole dashboard for the current state.

    Only the active tab's panel is rendered.

    Args:
        state: Dashboard state

    Returns:
        Rich Group (tab bar, active panel, footer)
    """
    now = state.clock()
    parts = [state.tab_selector.render(state.tabs(now), state.active_tab), Text()]

    if state.active_tab == TAB_OVERVIEW:
        parts.append(render_daily_cost(state.aggregate(now), state.colors))
        parts.append(state.usage_view.render(state.usage_stats))
    elif state.active_tab == TAB_SESSIONS:
        parts.append(render_daily_cost(state.aggregate(now), state.colors))
        parts.append(_create_sessions_table(state, now))
    elif state.active_tab == TAB_USAGE:
        parts.append(state.usage_view.render(state.usage_stats, detailed=True))
    else:
        parts.append(Text(f"No content for tab '{state.active_tab}'.", style=DIM))

    parts.append(_create_footer(state, now))
    return Group(*parts)


def _read_key(stdin) -> Optional[str]:
    """Read one key press and name it ('left', 'esc', 'r', ...)."""
    import select

    key = stdin.read(1)
    if key != '\x1b':
        return key.lower()

    # Escape sequences: ESC [ C/D/H/F or ESC O H/F
    remaining = []
    for _ in range(2):
        if select.select([stdin], [], [], 0.05)[0]:
            remaining.append(stdin.read(1))
        else:
            break

    if len(remaining) == 2 and remaining[0] in ('[', 'O'):
        return {
            'C': "right",
            'D': "left",
            'H': "home",
            'F': "end",
        }.get(remaining[1])
    return "esc"


def _keyboard_listener(keys: "queue.Queue[str]", stop_event: threading.Event) -> None:
    """
    Listen for key presses and queue them for the render thread.

    Runs in a separate thread to handle keyboard input without blocking the dashboard.

    Args:
        keys: Queue receiving key names
        stop_event: Threading event to signal when to stop listening
    """
    import select
    import termios
    import tty

    old_settings = termios.tcgetattr(sys.stdin)
    try:
        tty.setcbreak(sys.stdin.fileno())
        while not stop_event.is_set():
            if select.select([sys.stdin], [], [], 0.1)[0]:
                key = _read_key(sys.stdin)
                if key:
                    keys.put(key)
    finally:
        termios.tcsetattr(sys.stdin, termios.TCSADRAIN, old_settings)


def run(
    console: Console,
    sessions_file: Path,
    stats_loader: Optional[Callable[[], UsageStats]] = None,
    default_tab: str = TAB_OVERVIEW,
    refresh_interval: int = 30,
    watch_debounce: float = 1.0,
    colors: Optional[dict] = None,
) -> None:
    """
    Run the live dashboard.

    The sessions file is watched for changes and reloaded; the screen is
    also re-rendered every refresh_interval seconds so "today" rolls over
    at UTC midnight.

    Keyboard shortcuts:
        1-9        - Switch to the tab at that position
        ← → Home End - Move between tabs
        r          - Refresh usage statistics
        q / Esc    - Quit

    Args:
        console: Rich console for output
        sessions_file: JSON or JSONL file with the session list
        stats_loader: Callable fetching usage statistics
        default_tab: Tab shown on start
        refresh_interval: Seconds between periodic re-renders
        watch_debounce: Minimum seconds between sessions file reloads
        colors: Band color mapping

    Exit:
        Exits with status 1 if the sessions file doesn't exist or can't be read
    """
    try:
        sessions = load_sessions(sessions_file)
    except OSError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    state = DashboardState(sessions, active_tab=default_tab, stats_loader=stats_loader, colors=colors)
    with console.status("[bold #ff8800]Loading usage statistics...", spinner="dots", spinner_style="#ff8800"):
        state.refresh_stats()

    sessions_changed = threading.Event()
    watcher = FileWatcher(sessions_file, sessions_changed.set, watch_debounce)
    watcher.start()

    keys: "queue.Queue[str]" = queue.Queue()
    stop_event = threading.Event()
    if sys.stdin.isatty():
        keyboard_thread = threading.Thread(target=_keyboard_listener, args=(keys, stop_event), daemon=True)
        keyboard_thread.start()

    try:
        with Live(render_dashboard(state), console=console, auto_refresh=False, transient=False) as live:
            last_render = time.time()
            while not state.should_quit:
                changed = False

                while not keys.empty():
                    state.handle_key(keys.get_nowait())
                    changed = True

                if sessions_changed.is_set():
                    sessions_changed.clear()
                    changed = state.reload_sessions(sessions_file)

                if changed or time.time() - last_render >= refresh_interval:
                    live.update(render_dashboard(state), refresh=True)
                    last_render = time.time()

                time.sleep(0.05)
    except KeyboardInterrupt:
        pass
    finally:
        stop_event.set()
        watcher.stop()


#endregion
