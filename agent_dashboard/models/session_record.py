#region Imports
import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union
#endregion


#region Data Classes


@dataclass(frozen=True)
class SessionRecord:
    """
    Represents a single agent session as handed to the dashboard.

    Only the timestamp and the cost/token counters take part in
    aggregation; the remaining fields are descriptive and shown in the
    sessions tab.

    Attributes:
        updated_at: Last activity timestamp in milliseconds since the UTC epoch
        cost: Spend in USD for this session
        tokens_in: Input tokens consumed by the session
        tokens_out: Output tokens produced by the session
        session_id: Identifier of the session (may be empty)
        label: Human-readable session name
        status: Free-form status reported by the data source (e.g. 'running')
        model: Model name, if known
    """

    updated_at: int = 0
    cost: float = 0.0
    tokens_in: int = 0
    tokens_out: int = 0
    session_id: str = ""
    label: str = ""
    status: Optional[str] = None
    model: Optional[str] = None

    @property
    def total_tokens(self) -> int:
        """Calculate total tokens across input and output."""
        return self.tokens_in + self.tokens_out

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SessionRecord":
        """
        Build a SessionRecord from a loosely-typed mapping.

        Missing, None or non-numeric counters become 0 so that a
        partially filled record can always be aggregated.

        Args:
            data: Mapping such as a decoded JSON object

        Returns:
            SessionRecord with defaults substituted for unusable values
        """
        session_id = data.get("session_id", data.get("id", ""))
        label = data.get("label") or session_id or ""
        status = data.get("status")
        model = data.get("model")

        return cls(
            updated_at=_as_int(data.get("updated_at")),
            cost=_as_float(data.get("cost")),
            tokens_in=_as_int(data.get("tokens_in")),
            tokens_out=_as_int(data.get("tokens_out")),
            session_id=str(session_id) if session_id is not None else "",
            label=str(label),
            status=str(status) if status is not None else None,
            model=str(model) if model is not None else None,
        )


#endregion


#region Functions


SessionLike = Union[SessionRecord, Mapping[str, Any]]


def coerce_session(value: SessionLike) -> SessionRecord:
    """Return value unchanged if it is a SessionRecord, otherwise build one from the mapping."""
    if isinstance(value, SessionRecord):
        return value
    return SessionRecord.from_mapping(value)


def _as_float(value: Any) -> float:
    # bool is an int subclass but never a meaningful cost
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    # NaN, infinities and negatives are all out of domain
    if not math.isfinite(value) or value < 0:
        return 0.0
    return float(value)


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if not math.isfinite(value) or value < 0:
        return 0
    return int(value)


#endregion
