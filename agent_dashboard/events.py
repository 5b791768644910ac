"""
Upward notifications emitted by dashboard components.

Components never change their own state; they hand one of these events
to the emit callback supplied by the parent, which owns all state and
re-renders.
"""
#region Imports
from dataclasses import dataclass
from typing import Callable, Union
#endregion


#region Data Classes


@dataclass(frozen=True)
class SelectTab:
    """The user picked the tab with this id."""

    tab_id: str


@dataclass(frozen=True)
class RefreshRequested:
    """The user asked for the usage statistics to be reloaded."""


Event = Union[SelectTab, RefreshRequested]
Emit = Callable[[Event], None]


#endregion
