"""
Default configuration values for agent-dash.

Edit this file to change default settings.
This file is used for:
1. Values missing from the user's config file
2. Reset to defaults ('agent-dash config reset')

Band colors are rich style strings (color names or hex values).
"""

#region Band Color Defaults
# Keys are the band values from agent_dashboard.models.bands, prefixed by
# the band family so one flat dict can be edited from the config file.

DEFAULT_BAND_COLORS = {
    # Daily cost banner
    "cost_nominal": "#00C853",          # Green below $5
    "cost_warning": "#FFC10C",          # Yellow for $5-$10
    "cost_alert": "#FF1744",            # Red from $10
    # Tab badges
    "badge_primary": "black on bright_yellow",
    "badge_alert": "bold white on #FF1744",
    "badge_warning": "black on #FFC10C",
    "badge_neutral": "grey50",
    # Tab status dots
    "status_pulsing_success": "bold #00C853 blink",
    "status_info": "dodger_blue1",
    "status_error": "#FF1744",
    "status_warning": "#FFC10C",
    "status_muted": "grey35",
}

#endregion


#region Tab Defaults

DEFAULT_TABS = [
    {"id": "overview", "label": "Overview"},
    {"id": "sessions", "label": "Sessions"},
    {"id": "usage", "label": "Usage"},
]

#endregion


#region Interval Defaults

DEFAULT_INTERVALS = {
    "refresh_interval": "30",   # Re-render interval in seconds (rolls "today" over at midnight)
    "watch_debounce": "1",      # Minimum seconds between sessions file reloads
    "stats_timeout": "10",      # Timeout for 'opencode stats' in seconds
}

#endregion


#region Other Defaults

DEFAULT_PREFERENCES = {
    "default_tab": "overview",      # Tab shown on start
    "sessions_file": "",            # custom path or empty (auto-detect)
    "claude_stats_file": "",        # custom path or empty (auto-detect)
    "log_level": "WARNING",         # DEBUG | INFO | WARNING | ERROR
}

#endregion


def get_all_defaults() -> dict:
    """
    Get all default settings merged into a single dictionary.

    Returns:
        Dictionary with all default settings combined
    """
    defaults = {}
    defaults.update(DEFAULT_BAND_COLORS)
    defaults.update(DEFAULT_INTERVALS)
    defaults.update(DEFAULT_PREFERENCES)
    return defaults
