"""Configuration module for agent-dash."""

from agent_dashboard.config.defaults import (
    DEFAULT_BAND_COLORS,
    DEFAULT_TABS,
    DEFAULT_INTERVALS,
    DEFAULT_PREFERENCES,
    get_all_defaults,
)

__all__ = [
    "DEFAULT_BAND_COLORS",
    "DEFAULT_TABS",
    "DEFAULT_INTERVALS",
    "DEFAULT_PREFERENCES",
    "get_all_defaults",
]
