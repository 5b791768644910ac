#region Imports
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Union
#endregion


#region Enums


class TabStatus(str, Enum):
    """Closed set of statuses a tab can advertise with its status dot."""

    RUNNING = "running"
    IDLE = "idle"
    ERROR = "error"
    WARNING = "warning"


#endregion


#region Data Classes


@dataclass(frozen=True)
class Tab:
    """
    Display-only description of a single dashboard tab.

    Attributes:
        id: Identifier, unique within one tab set
        label: Text shown on the tab
        badge: Optional count shown next to the label (0 or None hides it)
        status: Optional status; unknown values are kept and shown muted
        urgent: Colors the badge as an alert when the tab is not active
        attention: Colors the badge as a warning when the tab is not active
    """

    id: str
    label: str
    badge: Optional[int] = None
    status: Union[TabStatus, str, None] = None
    urgent: bool = False
    attention: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Tab":
        """
        Build a Tab from a mapping such as a config entry.

        Args:
            data: Mapping with at least 'id'; 'label' defaults to the id

        Returns:
            Tab instance
        """
        tab_id = str(data["id"])
        status = data.get("status")
        if isinstance(status, str):
            try:
                status = TabStatus(status)
            except ValueError:
                pass  # kept verbatim, rendered with the default band

        badge = data.get("badge")
        if isinstance(badge, bool) or not isinstance(badge, int):
            badge = None

        return cls(
            id=tab_id,
            label=str(data.get("label", tab_id)),
            badge=badge,
            status=status,
            urgent=bool(data.get("urgent", False)),
            attention=bool(data.get("attention", False)),
        )


#endregion
