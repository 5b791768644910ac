"""Unit tests for the tab selector."""

import pytest

from agent_dashboard.events import SelectTab
from agent_dashboard.models.bands import BadgeBand, StatusBand
from agent_dashboard.models.tab import Tab, TabStatus
from agent_dashboard.visualization.tabs import (
    TabSelector,
    badge_band,
    describe_tabs,
    neighbor_tab,
    status_band,
)


TABS = [
    Tab(id="work", label="Work", badge=5),
    Tab(id="agents", label="Agents", badge=0),
    Tab(id="system", label="System"),
]


class TestDescribeTabs:
    def test_active_tab_with_badge(self):
        work, agents, _ = describe_tabs(TABS, "work")
        assert work.selected and work.focusable
        assert work.badge_visible
        assert work.badge_band is BadgeBand.PRIMARY

        assert not agents.selected and not agents.focusable
        assert not agents.badge_visible

    def test_absent_badge_hidden(self):
        system = describe_tabs(TABS, "work")[2]
        assert system.badge is None
        assert not system.badge_visible

    def test_exactly_one_focusable(self):
        views = describe_tabs(TABS, "agents")
        assert [view.tab_id for view in views if view.focusable] == ["agents"]
        assert [view.tab_id for view in views if view.selected] == ["agents"]

    def test_unknown_active_tab_selects_nothing(self):
        assert not any(view.selected for view in describe_tabs(TABS, "missing"))

    @pytest.mark.parametrize("active_tab", ["missing", None, ""])
    def test_unknown_active_tab_keeps_first_focusable(self, active_tab):
        views = describe_tabs(TABS, active_tab)
        assert [view.tab_id for view in views if view.focusable] == ["work"]

    def test_no_tabs(self):
        assert describe_tabs([], "work") == []

    def test_status_visibility(self):
        tabs = [Tab(id="a", label="A", status=TabStatus.RUNNING), Tab(id="b", label="B")]
        a, b = describe_tabs(tabs, "a")
        assert a.status_visible and a.status_band is StatusBand.PULSING_SUCCESS
        assert not b.status_visible and b.status_band is StatusBand.MUTED


class TestBadgeBand:
    def test_active_wins_over_urgent(self):
        tab = Tab(id="x", label="X", badge=1, urgent=True, attention=True)
        assert badge_band(tab, "x") is BadgeBand.PRIMARY

    def test_urgent_before_attention(self):
        tab = Tab(id="x", label="X", badge=1, urgent=True, attention=True)
        assert badge_band(tab, "other") is BadgeBand.ALERT

    def test_attention(self):
        tab = Tab(id="x", label="X", badge=1, attention=True)
        assert badge_band(tab, "other") is BadgeBand.WARNING

    def test_neutral(self):
        assert badge_band(Tab(id="x", label="X", badge=1), "other") is BadgeBand.NEUTRAL


class TestStatusBand:
    @pytest.mark.parametrize("status, expected", [
        (TabStatus.RUNNING, StatusBand.PULSING_SUCCESS),
        (TabStatus.IDLE, StatusBand.INFO),
        (TabStatus.ERROR, StatusBand.ERROR),
        (TabStatus.WARNING, StatusBand.WARNING),
        ("running", StatusBand.PULSING_SUCCESS),
        ("idle", StatusBand.INFO),
    ])
    def test_known_statuses(self, status, expected):
        assert status_band(status) is expected

    @pytest.mark.parametrize("status", [None, "paused", "", 3, ["running"], {"a": 1}])
    def test_default_arm(self, status):
        assert status_band(status) is StatusBand.MUTED


class TestNeighborTab:
    def test_right_and_wrap(self):
        assert neighbor_tab(TABS, "work", "right") == "agents"
        assert neighbor_tab(TABS, "system", "right") == "work"

    def test_left_and_wrap(self):
        assert neighbor_tab(TABS, "agents", "left") == "work"
        assert neighbor_tab(TABS, "work", "left") == "system"

    def test_home_end(self):
        assert neighbor_tab(TABS, "agents", "home") == "work"
        assert neighbor_tab(TABS, "agents", "end") == "system"

    def test_empty_and_unknown_key(self):
        assert neighbor_tab([], "work", "right") is None
        assert neighbor_tab(TABS, "work", "up") is None


class TestTabSelector:
    def test_select_emits_once_without_state_change(self):
        received = []
        selector = TabSelector(received.append)
        selector.select("agents")
        assert received == [SelectTab("agents")]
        assert not hasattr(selector, "active_tab")

    def test_render(self, render_text):
        selector = TabSelector(lambda event: None)
        text = render_text(selector.render(TABS, "work"))
        assert "[1]Work" in text
        assert " 5 " in text
        assert "[2]Agents" in text
        assert "[3]System" in text
        assert " 0 " not in text

    def test_render_status_dot(self, render_text):
        selector = TabSelector(lambda event: None)
        text = render_text(selector.render([Tab(id="a", label="A", status="error")], "a"))
        assert "●" in text


class TestTabFromMapping:
    def test_known_status_is_enum(self):
        tab = Tab.from_mapping({"id": "a", "status": "idle", "badge": 2})
        assert tab.status is TabStatus.IDLE
        assert tab.label == "a"
        assert tab.badge == 2

    def test_unknown_status_kept(self):
        assert Tab.from_mapping({"id": "a", "status": "paused"}).status == "paused"

    def test_invalid_badge_dropped(self):
        assert Tab.from_mapping({"id": "a", "badge": "lots"}).badge is None
