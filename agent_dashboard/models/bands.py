"""
Display-color bands.

A band is a discrete classification derived from a threshold or an
enumerated status. Bands are mapped to concrete rich styles only at the
rendering boundary (see config.defaults.DEFAULT_BAND_COLORS).
"""
from enum import Enum


class CostBand(str, Enum):
    """Band for today's spend."""

    NOMINAL = "nominal"
    WARNING = "warning"
    ALERT = "alert"


class BadgeBand(str, Enum):
    """Band for a tab's badge."""

    PRIMARY = "primary"
    ALERT = "alert"
    WARNING = "warning"
    NEUTRAL = "neutral"


class StatusBand(str, Enum):
    """Band for a tab's status dot."""

    PULSING_SUCCESS = "pulsing_success"
    INFO = "info"
    ERROR = "error"
    WARNING = "warning"
    MUTED = "muted"
