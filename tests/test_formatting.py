"""Unit tests for agent_dashboard.utils.formatting."""

import pytest

from agent_dashboard.models.bands import CostBand
from agent_dashboard.utils.formatting import cost_band, format_cost, format_tokens, pluralize


class TestFormatCost:
    def test_zero(self):
        assert format_cost(0) == "$0.00"

    def test_negative(self):
        assert format_cost(-3.5) == "$0.00"

    def test_sub_cent_uses_four_decimals(self):
        assert format_cost(0.005) == "$0.0050"
        assert format_cost(0.0099) == "$0.0099"

    def test_cent_boundary(self):
        assert format_cost(0.01) == "$0.01"

    def test_below_one_dollar(self):
        assert format_cost(0.256) == "$0.26"

    def test_dollar_boundary(self):
        assert format_cost(1.0) == "$1.00"

    def test_rounds_to_two_decimals(self):
        assert format_cost(1.236) == "$1.24"
        assert format_cost(12.0) == "$12.00"

    @pytest.mark.parametrize("value", [None, "12", [], float("nan"), True])
    def test_non_numeric(self, value):
        assert format_cost(value) == "$0.00"


class TestCostBand:
    def test_alert_from_ten(self):
        assert cost_band(10.0) is CostBand.ALERT
        assert cost_band(250) is CostBand.ALERT

    def test_warning_range(self):
        assert cost_band(5.0) is CostBand.WARNING
        assert cost_band(9.99) is CostBand.WARNING

    def test_nominal_below_five(self):
        assert cost_band(4.99) is CostBand.NOMINAL
        assert cost_band(0) is CostBand.NOMINAL

    def test_non_numeric_is_nominal(self):
        assert cost_band(None) is CostBand.NOMINAL


class TestFormatTokens:
    def test_small(self):
        assert format_tokens(0) == "0"
        assert format_tokens(999) == "999"

    def test_thousands(self):
        assert format_tokens(1000) == "1.0K"
        assert format_tokens(45_230) == "45.2K"

    def test_millions(self):
        assert format_tokens(1_000_000) == "1.0M"
        assert format_tokens(1_500_000) == "1.5M"

    def test_non_numeric(self):
        assert format_tokens(None) == "0"
        assert format_tokens("1200") == "0"


class TestPluralize:
    def test_one(self):
        assert pluralize(1, "session") == "1 session"

    def test_zero(self):
        assert pluralize(0, "session") == "0 sessions"

    def test_many(self):
        assert pluralize(5, "session") == "5 sessions"

    def test_naive_suffix(self):
        assert pluralize(2, "child") == "2 childs"
