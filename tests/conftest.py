"""Shared fixtures for agent-dash tests."""

import io
from datetime import datetime, timezone

import pytest
from rich.console import Console


NOW = datetime(2026, 10, 19, 15, 30, 0, tzinfo=timezone.utc)
TODAY_START_MS = int(datetime(2026, 10, 19, tzinfo=timezone.utc).timestamp()) * 1000


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def today_start():
    return TODAY_START_MS


@pytest.fixture
def render_text():
    """Render a rich renderable to plain text."""

    def _render(renderable, width: int = 120) -> str:
        buffer = io.StringIO()
        console = Console(file=buffer, width=width, color_system=None, force_terminal=False)
        console.print(renderable)
        return buffer.getvalue()

    return _render

