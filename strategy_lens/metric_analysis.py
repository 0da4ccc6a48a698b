"""
Metric Classifier.
Maps one backtest statistic to a rating band with explanation and advice.
Pure logic, no I/O. Every function is total: any float resolves to exactly one band.
"""

from typing import Callable, Dict, Union

from strategy_lens.analysis_models import MetricAnalysis, MetricType
from strategy_lens.config import ANALYSIS
from strategy_lens.logger import logger
from strategy_lens.metric_bands import (
    DRAWDOWN_BANDS,
    DURATION_BANDS,
    FALLBACK_DESCRIPTION,
    FALLBACK_TITLE,
    KELLY_BANDS,
    PROFIT_FACTOR_BANDS,
    SHARPE_BANDS,
    WIN_RATE_BANDS,
    select_band,
)
from strategy_lens.validators import UnitNormalizer


def analyze_sharpe_ratio(sharpe_ratio: float) -> MetricAnalysis:
    """
    Risk-adjusted return grading:
      >= 3.0  excellent (Mükemmel)
      >= 2.0  excellent (Çok İyi, hedge-fund grade)
      >= 1.5  good
      >= 1.0  average
      >= 0.5  poor
      else    critical
    """
    return select_band(SHARPE_BANDS, sharpe_ratio).render(value=sharpe_ratio)


def analyze_win_rate(win_rate: float, unit: str = ANALYSIS.rate_unit) -> MetricAnalysis:
    """
    Share of profitable trades (percent by default, `unit="fraction"` for 0-1):
      >= 70 excellent, >= 60 good, >= 50 average, >= 40 poor, else critical.
    """
    pct = UnitNormalizer.to_percent(win_rate, unit)
    return select_band(WIN_RATE_BANDS, pct).render(value=pct)


def analyze_max_drawdown(max_drawdown: float) -> MetricAnalysis:
    """
    Peak-to-trough decline. Sign is ignored (-15 and 15 are the same drawdown).
      <= 5 excellent, <= 10 good, <= 20 average, <= 30 poor, else critical.
    """
    dd = abs(max_drawdown)
    return select_band(DRAWDOWN_BANDS, dd).render(value=dd)


def analyze_profit_factor(profit_factor: float) -> MetricAnalysis:
    """
    Gross profit / gross loss:
      >= 3.0 excellent, >= 2.0 good, >= 1.5 average, >= 1.2 poor, else critical.
    """
    return select_band(PROFIT_FACTOR_BANDS, profit_factor).render(value=profit_factor)


def analyze_trade_duration(avg_duration: float, unit: str = ANALYSIS.duration_unit) -> MetricAnalysis:
    """
    Average holding time. Not a "higher is better" metric, the optimum sits in the middle:
      < 0.5h  average   (scalping)
      < 2h    good      (day trading)
      < 8h    excellent (intraday swing)
      < 24h   good      (short-term swing)
      else    average   (position trading)
    """
    hours = UnitNormalizer.to_hours(avg_duration, unit)
    band = select_band(DURATION_BANDS, hours)
    return band.render(value=hours, minutes=hours * 60, hours=hours, days=hours / 24)


def analyze_kelly_percentage(kelly_percent: float, unit: str = ANALYSIS.rate_unit) -> MetricAnalysis:
    """
    Kelly optimal bet fraction:
      >= 20 excellent, >= 10 good, >= 5 average, > 0 poor, <= 0 critical (no edge).
    """
    pct = UnitNormalizer.to_percent(kelly_percent, unit)
    return select_band(KELLY_BANDS, pct).render(value=pct)


ANALYZERS: Dict[MetricType, Callable[[float], MetricAnalysis]] = {
    MetricType.SHARPE_RATIO: analyze_sharpe_ratio,
    MetricType.WIN_RATE: analyze_win_rate,
    MetricType.MAX_DRAWDOWN: analyze_max_drawdown,
    MetricType.PROFIT_FACTOR: analyze_profit_factor,
    MetricType.AVG_TRADE_DURATION: analyze_trade_duration,
    MetricType.KELLY_PERCENT: analyze_kelly_percentage,
}


def unknown_metric_analysis() -> MetricAnalysis:
    """Neutral card for a metric without a classifier."""
    return MetricAnalysis(
        rating="average",
        color=ANALYSIS.fallback_color,
        title=FALLBACK_TITLE,
        description=FALLBACK_DESCRIPTION,
        implications=(),
        recommendations=(),
    )


def get_metric_analysis(metric_type: Union[MetricType, str], value: float) -> MetricAnalysis:
    """
    Generic entry point for dynamic callers.
    Unknown keys never raise; they get the neutral "no analysis" result.
    """
    metric = MetricType.parse(metric_type)
    if metric is None:
        logger.warning("unknown_metric_type", metric_type=str(metric_type))
        return unknown_metric_analysis()
    return ANALYZERS[metric](value)
