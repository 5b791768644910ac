"""Unit tests for the daily cost aggregation and banner."""

import itertools
from datetime import datetime, timedelta, timezone

import pytest

from agent_dashboard.aggregation.daily_cost import DailyAggregate, compute, filter_today, today_start_ms
from agent_dashboard.models.bands import CostBand
from agent_dashboard.models.session_record import SessionRecord
from agent_dashboard.visualization.daily_cost import build_banner, render_daily_cost


class TestTodayStart:
    def test_midnight_utc(self, now, today_start):
        assert today_start_ms(now) == today_start

    def test_naive_is_utc(self, today_start):
        assert today_start_ms(datetime(2026, 10, 19, 23, 59, 59)) == today_start

    def test_other_timezone_uses_utc_day(self, today_start):
        # 08:00 on Oct 20 in UTC+9 is 23:00 on Oct 19 UTC
        tokyo = timezone(timedelta(hours=9))
        assert today_start_ms(datetime(2026, 10, 20, 8, 0, tzinfo=tokyo)) == today_start

    def test_exact_midnight(self, today_start):
        assert today_start_ms(datetime(2026, 10, 19, tzinfo=timezone.utc)) == today_start

    @pytest.mark.parametrize("value", [None, 1760000000000, "2026-10-19"])
    def test_rejects_non_datetime(self, value):
        with pytest.raises(TypeError):
            today_start_ms(value)


class TestCompute:
    def test_excludes_yesterday(self, now, today_start):
        sessions = [
            {"updated_at": today_start + 1000, "cost": 2.5, "tokens_in": 100, "tokens_out": 50},
            {"updated_at": today_start - 1000, "cost": 99.0, "tokens_in": 1, "tokens_out": 1},
        ]
        assert compute(sessions, now) == DailyAggregate(
            total_cost=2.5, session_count=1, tokens_in_total=100, tokens_out_total=50,
        )

    def test_boundary_is_inclusive(self, now, today_start):
        aggregate = compute([{"updated_at": today_start, "cost": 1.0}], now)
        assert aggregate.session_count == 1

    def test_future_dated_records_count(self, now, today_start):
        tomorrow = today_start + 2 * 24 * 3600 * 1000
        aggregate = compute([{"updated_at": tomorrow, "cost": 3.0}], now)
        assert aggregate.session_count == 1
        assert aggregate.total_cost == 3.0

    def test_missing_fields_contribute_zero(self, now, today_start):
        sessions = [
            {"updated_at": today_start + 1},
            {"updated_at": today_start + 2, "cost": None, "tokens_in": None, "tokens_out": None},
            {"updated_at": today_start + 3, "cost": 1.25, "tokens_in": 10, "tokens_out": 20},
        ]
        aggregate = compute(sessions, now)
        assert aggregate == DailyAggregate(
            total_cost=1.25, session_count=3, tokens_in_total=10, tokens_out_total=20,
        )

    def test_missing_timestamp_is_excluded(self, now):
        assert compute([{"cost": 5.0}], now) == DailyAggregate()

    def test_empty(self, now):
        assert compute([], now) == DailyAggregate()

    def test_accepts_session_records(self, now, today_start):
        sessions = [SessionRecord(updated_at=today_start + 5, cost=0.5, tokens_in=7, tokens_out=3)]
        assert compute(sessions, now).tokens_in_total == 7

    def test_order_independent(self, now, today_start):
        sessions = [
            {"updated_at": today_start + i, "cost": cost, "tokens_in": i * 10, "tokens_out": i}
            for i, cost in enumerate([0.1, 0.2, 0.3, 1e-9, 7.77], start=1)
        ]
        results = {compute(list(order), now) for order in itertools.permutations(sessions)}
        assert len(results) == 1

    def test_count_matches_filter(self, now, today_start):
        offsets = [-86_400_000, -1, 0, 1, 3_600_000]
        sessions = [{"updated_at": today_start + offset} for offset in offsets]
        assert compute(sessions, now).session_count == len(filter_today(sessions, now)) == 3

    def test_non_finite_values_contribute_zero(self, now, today_start):
        sessions = [
            {"updated_at": today_start + 1, "cost": float("inf"), "tokens_in": float("inf")},
            {"updated_at": today_start + 2, "cost": float("-inf"), "tokens_out": float("-inf")},
            {"updated_at": today_start + 3, "cost": float("nan"), "tokens_in": 4},
            {"updated_at": float("inf"), "cost": 9.0},
        ]
        assert compute(sessions, now) == DailyAggregate(
            total_cost=0.0, session_count=3, tokens_in_total=4, tokens_out_total=0,
        )

    def test_negative_values_contribute_zero(self, now, today_start):
        sessions = [
            {"updated_at": today_start + 1, "cost": -3.0, "tokens_in": -10},
            {"updated_at": today_start + 2, "cost": 2.0, "tokens_in": 5},
        ]
        aggregate = compute(sessions, now)
        assert aggregate.total_cost == 2.0
        assert aggregate.tokens_in_total == 5

    def test_directly_built_records_with_infinite_costs(self, now, today_start):
        sessions = [
            SessionRecord(updated_at=today_start + 1, cost=float("inf")),
            SessionRecord(updated_at=today_start + 2, cost=float("-inf")),
            SessionRecord(updated_at=today_start + 3, cost=1.5),
        ]
        assert compute(sessions, now).total_cost == 1.5

    def test_input_is_not_mutated(self, now, today_start):
        sessions = [{"updated_at": today_start + 1, "cost": 1.0}]
        compute(sessions, now)
        assert sessions == [{"updated_at": today_start + 1, "cost": 1.0}]


class TestBanner:
    def test_display_strings(self):
        banner = build_banner(DailyAggregate(
            total_cost=12.0, session_count=1, tokens_in_total=1_500_000, tokens_out_total=999,
        ))
        assert banner.cost_text == "$12.00"
        assert banner.band is CostBand.ALERT
        assert banner.sessions_text == "1 session"
        assert banner.tokens_in_text == "1.5M"
        assert banner.tokens_out_text == "999"

    def test_render(self, render_text):
        text = render_text(render_daily_cost(DailyAggregate(
            total_cost=2.5, session_count=3, tokens_in_total=1200, tokens_out_total=40,
        )))
        assert "Today's Spend" in text
        assert "$2.50" in text
        assert "3 sessions" in text
        assert "↓ 1.2K" in text
        assert "↑ 40" in text

    def test_render_empty_day(self, render_text):
        text = render_text(render_daily_cost(DailyAggregate()))
        assert "$0.00" in text
        assert "0 sessions" in text
