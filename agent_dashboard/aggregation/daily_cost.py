#region Imports
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable

from agent_dashboard.models.session_record import SessionLike, coerce_session
#endregion


#region Data Classes


@dataclass(frozen=True)
class DailyAggregate:
    """
    Today's summed usage across all sessions.

    Recomputed on every render and never persisted.

    Attributes:
        total_cost: Total spend in USD
        session_count: Number of sessions active today
        tokens_in_total: Total input tokens
        tokens_out_total: Total output tokens
    """

    total_cost: float = 0.0
    session_count: int = 0
    tokens_in_total: int = 0
    tokens_out_total: int = 0


#endregion


#region Functions


def today_start_ms(now: datetime) -> int:
    """
    Get midnight UTC of the UTC day containing now, in epoch milliseconds.

    Naive datetimes are taken to be UTC.

    Args:
        now: Current time

    Returns:
        Epoch milliseconds of 00:00:00 UTC on the same UTC calendar day

    Raises:
        TypeError: If now is not a datetime
    """
    if not isinstance(now, datetime):
        raise TypeError(f"now must be a datetime, got {type(now).__name__}")

    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    utc_now = now.astimezone(timezone.utc)
    midnight = utc_now.replace(hour=0, minute=0, second=0, microsecond=0)
    return int(midnight.timestamp()) * 1000


def filter_today(sessions: Iterable[SessionLike], now: datetime) -> list:
    """
    Select the sessions updated at or after today's UTC midnight.

    There is no upper bound, so future-dated records are included.

    Args:
        sessions: Session records or mappings
        now: Current time

    Returns:
        List of SessionRecord objects active today
    """
    start = today_start_ms(now)
    records = (coerce_session(session) for session in sessions)
    return [record for record in records if record.updated_at >= start]


def compute(sessions: Iterable[SessionLike], now: datetime) -> DailyAggregate:
    """
    Aggregate today's cost, session count and token totals.

    Pure function: the same sessions and now always give the same result.
    The cost sum is exactly rounded, so input order never changes it.

    Args:
        sessions: Session records or mappings
        now: Current time

    Returns:
        DailyAggregate for the UTC day containing now
    """
    costs = []
    session_count = 0
    tokens_in_total = 0
    tokens_out_total = 0

    for record in filter_today(sessions, now):
        # records built directly bypass from_mapping, so re-check the cost domain
        costs.append(record.cost if math.isfinite(record.cost) and record.cost > 0 else 0.0)
        session_count += 1
        tokens_in_total += record.tokens_in
        tokens_out_total += record.tokens_out

    return DailyAggregate(
        total_cost=math.fsum(costs),
        session_count=session_count,
        tokens_in_total=tokens_in_total,
        tokens_out_total=tokens_out_total,
    )


#endregion
