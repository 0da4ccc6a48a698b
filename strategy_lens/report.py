"""
Strategy Report.
Runs every metric card and the profile for one strategy, the way the detail page shows them.
"""

from typing import Dict, Union

from strategy_lens.analysis_models import (
    MetricAnalysis,
    MetricType,
    StrategyMetrics,
    StrategyReport,
)
from strategy_lens.config import ANALYSIS
from strategy_lens.logger import logger
from strategy_lens.metric_analysis import get_metric_analysis
from strategy_lens.profile import analyze_strategy_profile

_FIELDS = {
    MetricType.SHARPE_RATIO: "sharpe_ratio",
    MetricType.WIN_RATE: "win_rate",
    MetricType.MAX_DRAWDOWN: "max_drawdown",
    MetricType.PROFIT_FACTOR: "profit_factor",
    MetricType.AVG_TRADE_DURATION: "avg_trade_duration",
    MetricType.KELLY_PERCENT: "kelly_percent",
}


def build_strategy_report(metrics: Union[StrategyMetrics, dict]) -> StrategyReport:
    """
    Kelly is optional: its card is skipped when kelly_percent is None.
    Cards keep the fixed page order from ANALYSIS.report_order.
    """
    if not isinstance(metrics, StrategyMetrics):
        metrics = StrategyMetrics.from_mapping(metrics)

    analyses: Dict[MetricType, MetricAnalysis] = {}
    for key in ANALYSIS.report_order:
        metric = MetricType(key)
        value = getattr(metrics, _FIELDS[metric])
        if value is None:
            continue
        analyses[metric] = get_metric_analysis(metric, value)

    profile = analyze_strategy_profile(metrics)
    logger.info(
        "strategy_report_built",
        profile=profile.profile,
        trading_style=profile.trading_style,
        cards=len(analyses),
    )
    return StrategyReport(analyses=analyses, profile=profile)
