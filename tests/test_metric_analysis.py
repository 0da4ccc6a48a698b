"""
Tests for strategy_lens.metric_analysis module.
"""

import math

import pytest
from structlog.testing import capture_logs

from strategy_lens.analysis_models import RATING_ORDER, MetricType
from strategy_lens.metric_analysis import (
    analyze_kelly_percentage,
    analyze_max_drawdown,
    analyze_profit_factor,
    analyze_sharpe_ratio,
    analyze_trade_duration,
    analyze_win_rate,
    get_metric_analysis,
)
from strategy_lens.metric_bands import (
    DRAWDOWN_BANDS,
    DURATION_BANDS,
    KELLY_BANDS,
    PROFIT_FACTOR_BANDS,
    SHARPE_BANDS,
    WIN_RATE_BANDS,
)

CLASSIFIERS = [
    analyze_sharpe_ratio,
    analyze_win_rate,
    analyze_max_drawdown,
    analyze_profit_factor,
    analyze_trade_duration,
    analyze_kelly_percentage,
]

SAMPLE = [
    -1e9, -1000.0, -35.0, -1.0, -0.0001, 0.0, 0.0001, 0.2, 0.5, 1.0, 1.2, 1.5, 2.0,
    2.999999, 3.0, 5.0, 8.0, 10.0, 20.0, 24.0, 30.0, 40.0, 50.0, 60.0, 69.999, 70.0,
    100.0, 1e9, math.inf, -math.inf, math.nan,
]

# Lower number = calmer tone
COLOR_SEVERITY = {
    "text-emerald-400": 0,
    "text-green-400": 1,
    "text-blue-400": 2,
    "text-yellow-400": 2,
    "text-orange-400": 3,
    "text-red-400": 4,
}


class TestTotality:
    """Every classifier maps any float to exactly one band."""

    @pytest.mark.parametrize("classify", CLASSIFIERS)
    def test_dense_sample(self, classify):
        """No gaps, no exceptions, always a rating and text."""
        for value in SAMPLE:
            result = classify(value)
            assert result.rating in RATING_ORDER
            assert result.title
            assert result.description

    @pytest.mark.parametrize("classify", [
        analyze_sharpe_ratio,
        analyze_win_rate,
        analyze_max_drawdown,
        analyze_profit_factor,
        analyze_kelly_percentage,
    ])
    def test_nan_is_critical(self, classify):
        """NaN falls through to the catch-all band."""
        assert classify(math.nan).rating == "critical"

    def test_nan_duration_is_position_trading(self):
        """NaN duration lands in the last duration band."""
        result = analyze_trade_duration(math.nan)
        assert result.title.startswith("Position Trading")

    @pytest.mark.parametrize("bands", [
        SHARPE_BANDS, WIN_RATE_BANDS, DRAWDOWN_BANDS,
        PROFIT_FACTOR_BANDS, DURATION_BANDS, KELLY_BANDS,
    ])
    def test_tables_end_with_catch_all(self, bands):
        """Only the last band has no bound."""
        assert bands[-1].bound is None
        assert all(b.bound is not None for b in bands[:-1])

    @pytest.mark.parametrize("bands", [
        SHARPE_BANDS, WIN_RATE_BANDS, DRAWDOWN_BANDS,
        PROFIT_FACTOR_BANDS, DURATION_BANDS, KELLY_BANDS,
    ])
    def test_color_follows_rating(self, bands):
        """A better rating never carries a harsher color."""
        for a in bands:
            for b in bands:
                if RATING_ORDER[a.rating] > RATING_ORDER[b.rating]:
                    assert COLOR_SEVERITY[a.color] <= COLOR_SEVERITY[b.color]


class TestSharpeRatio:
    """Tests for analyze_sharpe_ratio."""

    def test_top_boundary(self):
        """3.0 belongs to the top band."""
        result = analyze_sharpe_ratio(3.0)
        assert result.rating == "excellent"
        assert "Mükemmel" in result.title

    def test_just_below_top(self):
        """2.999999 is still excellent but the second band."""
        result = analyze_sharpe_ratio(2.999999)
        assert result.rating == "excellent"
        assert "Çok İyi" in result.title

    @pytest.mark.parametrize("value,rating", [
        (2.0, "excellent"),
        (1.99, "good"),
        (1.5, "good"),
        (1.0, "average"),
        (0.5, "poor"),
        (0.49, "critical"),
        (-2.0, "critical"),
    ])
    def test_bands(self, value, rating):
        """Lower bounds are inclusive."""
        assert analyze_sharpe_ratio(value).rating == rating

    def test_description_has_value(self):
        """Value is shown with two decimals."""
        assert analyze_sharpe_ratio(1.234).description.startswith("1.23 Sharpe")

    def test_lists_filled(self):
        """Bands carry implications and recommendations."""
        result = analyze_sharpe_ratio(1.2)
        assert len(result.implications) == 4
        assert len(result.recommendations) == 4


class TestWinRate:
    """Tests for analyze_win_rate."""

    def test_seventy_is_excellent(self):
        """70 belongs to the top band."""
        assert analyze_win_rate(70).rating == "excellent"

    def test_just_below_seventy(self):
        """69.999 drops to good."""
        assert analyze_win_rate(69.999).rating == "good"

    @pytest.mark.parametrize("value,rating", [
        (60, "good"),
        (59.9, "average"),
        (50, "average"),
        (40, "poor"),
        (39.9, "critical"),
        (0, "critical"),
    ])
    def test_bands(self, value, rating):
        assert analyze_win_rate(value).rating == rating

    def test_description_percent(self):
        """Shown as %xx.x."""
        assert analyze_win_rate(65).description.startswith("%65.0 kazanma")

    def test_fraction_unit(self):
        """0.65 as a fraction equals 65 percent."""
        assert analyze_win_rate(0.65, unit="fraction") == analyze_win_rate(65)

    def test_fraction_boundary(self):
        """0.7 as a fraction still reaches the top band."""
        assert analyze_win_rate(0.7, unit="fraction").rating == "excellent"


class TestMaxDrawdown:
    """Tests for analyze_max_drawdown."""

    def test_sign_independent(self):
        """-15 and 15 give identical results."""
        assert analyze_max_drawdown(-15) == analyze_max_drawdown(15)

    @pytest.mark.parametrize("value,rating", [
        (0, "excellent"),
        (5, "excellent"),
        (-5, "excellent"),
        (5.01, "good"),
        (10, "good"),
        (20, "average"),
        (30, "poor"),
        (-30.01, "critical"),
        (99, "critical"),
    ])
    def test_bands(self, value, rating):
        """Upper bounds are inclusive."""
        assert analyze_max_drawdown(value).rating == rating

    def test_description_uses_absolute_value(self):
        """Negative input is shown without the sign."""
        assert analyze_max_drawdown(-12.34).description.startswith("%12.3 maksimum")


class TestProfitFactor:
    """Tests for analyze_profit_factor."""

    @pytest.mark.parametrize("value,rating", [
        (3.0, "excellent"),
        (2.99, "good"),
        (2.0, "good"),
        (1.5, "average"),
        (1.2, "poor"),
        (1.19, "critical"),
        (0.0, "critical"),
    ])
    def test_bands(self, value, rating):
        assert analyze_profit_factor(value).rating == rating

    def test_losing_system_title(self):
        """Below 1.2 the system is framed as losing."""
        assert "Zarar Eden Sistem" in analyze_profit_factor(0.9).title

    def test_value_interpolated_twice(self):
        """Top band mentions the dollar ratio."""
        assert "3.50$ kazanç" in analyze_profit_factor(3.5).description


class TestTradeDuration:
    """Tests for analyze_trade_duration."""

    def test_sweet_spot(self):
        """2-8h is the only excellent band."""
        assert analyze_trade_duration(5).rating == "excellent"

    def test_extremes_rate_lower(self):
        """Very short and very long trades rate below excellent."""
        top = RATING_ORDER["excellent"]
        assert RATING_ORDER[analyze_trade_duration(0.2).rating] < top
        assert RATING_ORDER[analyze_trade_duration(30).rating] < top

    def test_scalping_is_average(self):
        """Scalping band is average, not excellent."""
        result = analyze_trade_duration(0.2)
        assert result.rating == "average"
        assert result.color == "text-blue-400"

    @pytest.mark.parametrize("value,rating", [
        (0.49, "average"),
        (0.5, "good"),
        (1.99, "good"),
        (2, "excellent"),
        (7.99, "excellent"),
        (8, "good"),
        (23.9, "good"),
        (24, "average"),
    ])
    def test_bands(self, value, rating):
        """Upper bounds are strict."""
        assert analyze_trade_duration(value).rating == rating

    def test_minutes_in_scalping_text(self):
        """Scalping band talks in minutes."""
        assert analyze_trade_duration(0.25).description.startswith("Ortalama 15 dakika")

    def test_hours_in_swing_text(self):
        assert analyze_trade_duration(5).description.startswith("Ortalama 5.0 saat")

    def test_days_in_position_text(self):
        """Position band talks in days."""
        assert analyze_trade_duration(48).description.startswith("Ortalama 2.0 gün")

    def test_minutes_unit(self):
        """120 minutes hits the 2h boundary exactly."""
        assert analyze_trade_duration(120, unit="minutes") == analyze_trade_duration(2)

    def test_days_unit(self):
        assert analyze_trade_duration(2, unit="days") == analyze_trade_duration(48)


class TestKellyPercentage:
    """Tests for analyze_kelly_percentage."""

    @pytest.mark.parametrize("value,rating", [
        (25, "excellent"),
        (20, "excellent"),
        (10, "good"),
        (5, "average"),
        (4.99, "poor"),
        (0.01, "poor"),
        (0, "critical"),
        (-3, "critical"),
    ])
    def test_bands(self, value, rating):
        """Zero means no edge."""
        assert analyze_kelly_percentage(value).rating == rating

    def test_fraction_unit(self):
        assert analyze_kelly_percentage(0.15, unit="fraction").rating == "good"


class TestGetMetricAnalysis:
    """Tests for the generic dispatcher."""

    @pytest.mark.parametrize("key,classify,value", [
        ("sharpeRatio", analyze_sharpe_ratio, 1.7),
        ("winRate", analyze_win_rate, 55),
        ("maxDrawdown", analyze_max_drawdown, -18),
        ("profitFactor", analyze_profit_factor, 1.6),
        ("avgTradeDuration", analyze_trade_duration, 3),
        ("kellyPercent", analyze_kelly_percentage, 12),
    ])
    def test_dispatch_by_string(self, key, classify, value):
        """String keys route to the matching classifier."""
        assert get_metric_analysis(key, value) == classify(value)

    def test_dispatch_by_enum(self):
        """MetricType members work too."""
        assert get_metric_analysis(MetricType.WIN_RATE, 72) == analyze_win_rate(72)

    def test_unknown_metric(self):
        """Unknown keys get the neutral card."""
        result = get_metric_analysis("bogusMetric", 42)
        assert result.rating == "average"
        assert result.implications == ()
        assert result.recommendations == ()
        assert result.title == "Analiz Mevcut Değil"

    def test_unknown_metric_logged(self):
        """Unknown keys are logged as a warning."""
        with capture_logs() as logs:
            get_metric_analysis("bogusMetric", 42)
        assert logs[0]["event"] == "unknown_metric_type"
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["metric_type"] == "bogusMetric"

    def test_to_dict_shape(self):
        """JSON form has exactly the six fields."""
        data = get_metric_analysis("sharpeRatio", 2.5).to_dict()
        assert set(data) == {
            "rating", "color", "title", "description", "implications", "recommendations",
        }
        assert data["rating"] == "excellent"

    def test_results_are_hashable(self):
        """Results are immutable values: equal inputs hash alike."""
        first = analyze_sharpe_ratio(1.2)
        assert hash(first) == hash(analyze_sharpe_ratio(1.2))
        assert len({first, analyze_sharpe_ratio(1.2), analyze_sharpe_ratio(3.5)}) == 2

    def test_to_dict_lists(self):
        """JSON form carries lists, not tuples."""
        data = analyze_sharpe_ratio(1.2).to_dict()
        assert isinstance(data["implications"], list)
        assert data["implications"] == list(analyze_sharpe_ratio(1.2).implications)
