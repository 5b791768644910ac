#region Imports
import json
from pathlib import Path
from typing import Optional

from agent_dashboard.config.defaults import DEFAULT_BAND_COLORS, get_all_defaults
from agent_dashboard.config.settings import APP_CONFIG_DIR
#endregion


#region Constants
_CONFIG_FILENAME = "config.json"
CONFIG_PATH = APP_CONFIG_DIR / _CONFIG_FILENAME
#endregion


#region Helpers

def _ensure_app_dir() -> bool:
    """Ensure the application config directory exists. Returns True if available."""
    try:
        APP_CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        return True
    except (PermissionError, OSError):
        return False


#endregion


#region Functions


def load_config(path: Optional[Path] = None) -> dict:
    """
    Load user configuration from disk, merged over the defaults.

    An unreadable or malformed file yields the defaults.

    Args:
        path: Config file location (default: ~/.config/agent-dash/config.json)

    Returns:
        Configuration dictionary with every known key present
    """
    config_path = path or CONFIG_PATH
    config = get_default_config()

    if config_path.exists():
        try:
            with open(config_path, "r") as f:
                stored = json.load(f)
        except (json.JSONDecodeError, IOError):
            return config
        if isinstance(stored, dict):
            config.update(stored)

    return config


def save_config(config: dict, path: Optional[Path] = None) -> None:
    """
    Save user configuration to disk.

    Args:
        config: Configuration dictionary to save
        path: Config file location (default: ~/.config/agent-dash/config.json)

    Raises:
        IOError: If config cannot be written
    """
    config_path = path or CONFIG_PATH
    if path is None:
        _ensure_app_dir()
    else:
        config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        json.dump(config, f, indent=2)


def get_default_config() -> dict:
    """
    Get default configuration values.

    Returns:
        Default configuration dictionary
    """
    return get_all_defaults()


def get_band_colors(config: Optional[dict] = None) -> dict:
    """
    Get the band-to-style mapping used by the renderers.

    Args:
        config: Loaded configuration (loaded from disk if not given)

    Returns:
        Dictionary with every band color key
    """
    config = config if config is not None else load_config()
    return {key: config.get(key) or default for key, default in DEFAULT_BAND_COLORS.items()}


def get_refresh_interval(config: Optional[dict] = None) -> int:
    """
    Get the dashboard re-render interval in seconds.

    Returns:
        Interval in seconds, at least 1
    """
    config = config if config is not None else load_config()
    try:
        return max(1, int(config.get("refresh_interval", "30")))
    except (TypeError, ValueError):
        return 30


def get_stats_timeout(config: Optional[dict] = None) -> float:
    """
    Get the timeout for external stats commands in seconds.

    Returns:
        Timeout in seconds
    """
    config = config if config is not None else load_config()
    try:
        return float(config.get("stats_timeout", "10"))
    except (TypeError, ValueError):
        return 10.0


def get_watch_debounce(config: Optional[dict] = None) -> float:
    """
    Get the minimum seconds between sessions file reloads.

    Returns:
        Debounce in seconds
    """
    config = config if config is not None else load_config()
    try:
        return float(config.get("watch_debounce", "1"))
    except (TypeError, ValueError):
        return 1.0


#endregion
