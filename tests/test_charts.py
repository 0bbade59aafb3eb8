"""Unit tests for domain/charts.

Tests verify:
1. Hourly, weekly and symbol buckets (grouping and ordering)
2. Histogram bin counts and edge cases
3. Equity curve and win/loss distribution
4. ChartData assembly
"""

from datetime import date

import pytest

from trade_analytics.domain.charts import (
    build_histogram,
    equity_curve,
    generate_chart_data,
    hourly_performance,
    symbol_performance,
    weekly_performance,
    win_loss_distribution,
)
from trade_analytics.domain.models import ChartData


# =============================================================================
# Buckets
# =============================================================================

class TestHourlyPerformance:
    """Tests for hourly_performance."""

    def test_grouped_by_sell_hour(self, make_trade):
        trades = [
            make_trade(50, sell_time="14:00"),
            make_trade(10, sell_time="09:30"),
            make_trade(-30, sell_time="09:45:10"),
            make_trade(7, sell_time=None),
        ]
        buckets = hourly_performance(trades)

        assert [b.label for b in buckets] == ["0:00", "9:00", "14:00"]

        nine = buckets[1]
        assert nine.trades == 2
        assert nine.total_pnl == pytest.approx(-20.0)
        assert nine.avg_pnl == pytest.approx(-10.0)

    def test_trade_counts_cover_input(self, scenario_trades):
        buckets = hourly_performance(scenario_trades)
        assert sum(b.trades for b in buckets) == len(scenario_trades)

    def test_empty(self):
        assert hourly_performance([]) == []


class TestWeeklyPerformance:
    """Tests for weekly_performance."""

    def test_sunday_first(self, make_trade):
        trades = [
            make_trade(10, sell_date=date(2024, 1, 6)),   # Saturday
            make_trade(20, sell_date=date(2024, 1, 1)),   # Monday
            make_trade(30, sell_date=date(2024, 1, 7)),   # Sunday
            make_trade(-5, sell_date=date(2024, 1, 8)),   # Monday
        ]
        buckets = weekly_performance(trades)

        assert [b.label for b in buckets] == ["Sunday", "Monday", "Saturday"]
        monday = buckets[1]
        assert monday.trades == 2
        assert monday.total_pnl == pytest.approx(15.0)
        assert monday.avg_pnl == pytest.approx(7.5)

    def test_only_observed_days(self, scenario_trades):
        """Monday through Friday only."""
        labels = [b.label for b in weekly_performance(scenario_trades)]
        assert labels == ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]

    def test_empty(self):
        assert weekly_performance([]) == []


class TestSymbolPerformance:
    """Tests for symbol_performance."""

    def test_top_ten_of_fifteen(self, make_trade):
        """15 symbols with distinct totals keep the 10 best, descending."""
        trades = [make_trade(i * 10.0, symbol=f"S{i:02d}") for i in range(15)]
        ranked = symbol_performance(trades)

        assert len(ranked) == 10
        assert [s.symbol for s in ranked] == [f"S{i:02d}" for i in range(14, 4, -1)]
        assert ranked[0].total_pnl == pytest.approx(140.0)

    def test_aggregates_per_symbol(self, make_trade):
        trades = [
            make_trade(100, symbol="AAPL"),
            make_trade(-40, symbol="AAPL"),
            make_trade(30, symbol="MSFT"),
        ]
        ranked = symbol_performance(trades)

        assert [s.symbol for s in ranked] == ["AAPL", "MSFT"]
        assert ranked[0].trades == 2
        assert ranked[0].total_pnl == pytest.approx(60.0)
        assert ranked[0].avg_pnl == pytest.approx(30.0)

    def test_ties_by_symbol(self, make_trade):
        trades = [make_trade(10, symbol="ZZZ"), make_trade(10, symbol="AAA")]
        assert [s.symbol for s in symbol_performance(trades)] == ["AAA", "ZZZ"]

    def test_top_n(self, make_trade):
        trades = [make_trade(10, symbol=s) for s in ("A", "B", "C")]
        assert len(symbol_performance(trades, top_n=2)) == 2

    def test_negative_top_n(self, make_trade):
        with pytest.raises(ValueError, match="top_n"):
            symbol_performance([make_trade(10)], top_n=-1)

    def test_empty(self):
        assert symbol_performance([]) == []


# =============================================================================
# Histogram
# =============================================================================

class TestHistogram:
    """Tests for build_histogram."""

    def test_scenario_bins(self):
        """[100, -50, 200, -30, -20] over 10 bins of width 25."""
        histogram = build_histogram([100, -50, 200, -30, -20], bins=10)

        assert len(histogram) == 10
        assert [b.count for b in histogram] == [2, 1, 0, 0, 0, 0, 1, 0, 0, 1]
        assert histogram[0].range == "-50.00 to -25.00"
        assert histogram[0].min_value == pytest.approx(-50.0)
        assert histogram[-1].max_value == pytest.approx(200.0)

    def test_max_value_in_last_bin(self):
        histogram = build_histogram([0, 1, 2, 3], bins=2)
        assert [b.count for b in histogram] == [2, 2]

    def test_all_values_equal(self):
        """Identical values all land in the first bin."""
        histogram = build_histogram([5, 5, 5], bins=10)

        assert len(histogram) == 10
        assert histogram[0].count == 3
        assert sum(b.count for b in histogram) == 3
        assert histogram[0].range == "5.00 to 6.00"

    def test_single_bin(self):
        histogram = build_histogram([-3, 0, 7], bins=1)
        assert len(histogram) == 1
        assert histogram[0].count == 3

    def test_counts_sum_to_input(self):
        values = [1.5, -2.25, 8.0, 3.3, 3.3, -9.1, 0.0]
        assert sum(b.count for b in build_histogram(values, bins=4)) == len(values)

    def test_invalid_bins(self):
        with pytest.raises(ValueError, match="bins"):
            build_histogram([1, 2], bins=0)

    def test_empty(self):
        assert build_histogram([]) == []


# =============================================================================
# Equity and Distribution
# =============================================================================

class TestEquity:
    """Tests for equity_curve and win_loss_distribution."""

    def test_equity_curve(self, scenario_trades):
        points = equity_curve(scenario_trades)

        assert [p.value for p in points] == [100.0, 50.0, 250.0, 220.0, 200.0]
        assert [p.trade for p in points] == [100, -50, 200, -30, -20]
        assert points[0].date == "2024-01-01"

    def test_win_loss_distribution(self, scenario_trades, make_trade):
        dist = win_loss_distribution(scenario_trades + [make_trade(0)])

        assert [(d.name, d.value) for d in dist] == [
            ("Winning Trades", 2),
            ("Losing Trades", 3),
        ]

    def test_empty(self):
        assert equity_curve([]) == []
        assert win_loss_distribution([]) == []


# =============================================================================
# Assembly
# =============================================================================

class TestChartData:
    """Tests for generate_chart_data."""

    def test_all_series(self, scenario_trades):
        chart = generate_chart_data(scenario_trades, bins=5, top_symbols=3)

        assert len(chart.equity_curve) == 5
        assert len(chart.daily_pnl) == 5
        assert len(chart.win_loss_distribution) == 2
        assert len(chart.profit_loss_distribution) == 5
        assert len(chart.weekly_performance) == 5
        assert chart.symbol_performance[0].symbol == "AAPL"
        assert chart.equity_curve[-1].value == pytest.approx(
            sum(p.pnl for p in chart.daily_pnl)
        )

    def test_empty(self):
        assert generate_chart_data([]) == ChartData.empty()
