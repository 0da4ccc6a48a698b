"""
Data models for the analysis engine.
Plain dataclasses shared by the metric classifiers, the profile classifier and the report.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Literal, Optional, Tuple

from strategy_lens.validators import MissingMetricError

# Constants
Rating = Literal["excellent", "good", "average", "poor", "critical"]
TradingStyle = Literal["Scalping", "Day Trading", "Swing Trading", "Position Trading"]
ProfileName = Literal[
    "Elite Performer",
    "Solid Performer",
    "High RR Specialist",
    "High Frequency Grinder",
    "High Risk Gambler",
    "Developing Strategy",
]

# Worst -> best
RATING_ORDER: Dict[str, int] = {
    "critical": 0,
    "poor": 1,
    "average": 2,
    "good": 3,
    "excellent": 4,
}


class MetricType(str, Enum):
    """Metric keys as used by the UI layer."""
    SHARPE_RATIO = "sharpeRatio"
    WIN_RATE = "winRate"
    MAX_DRAWDOWN = "maxDrawdown"
    PROFIT_FACTOR = "profitFactor"
    AVG_TRADE_DURATION = "avgTradeDuration"
    KELLY_PERCENT = "kellyPercent"

    @classmethod
    def parse(cls, key) -> Optional["MetricType"]:
        """Return the member for `key`, or None when the key is unknown."""
        if isinstance(key, cls):
            return key
        try:
            return cls(key)
        except ValueError:
            return None


@dataclass(frozen=True)
class MetricAnalysis:
    """Verdict for a single metric value."""
    rating: Rating
    color: str          # presentation hint, e.g. "text-green-400"
    title: str
    description: str
    implications: Tuple[str, ...] = ()
    recommendations: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "rating": self.rating,
            "color": self.color,
            "title": self.title,
            "description": self.description,
            "implications": list(self.implications),
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True)
class StrategyMetrics:
    """Raw backtest statistics, already computed upstream."""
    win_rate: float             # percent 0-100
    profit_factor: float
    sharpe_ratio: float
    max_drawdown: float         # percent, either sign
    avg_trade_duration: float   # hours
    kelly_percent: Optional[float] = None

    @classmethod
    def from_mapping(cls, data: dict) -> "StrategyMetrics":
        """
        Build from camelCase (UI) or snake_case keys.
        The five core metrics are required; only kellyPercent may be missing.
        """
        def pick(camel: str, snake: str, required: bool = True):
            if camel in data:
                value = data[camel]
            else:
                value = data.get(snake)
            if value is None and required:
                raise MissingMetricError(f"Missing metric: {camel}")
            return value

        return cls(
            win_rate=pick("winRate", "win_rate"),
            profit_factor=pick("profitFactor", "profit_factor"),
            sharpe_ratio=pick("sharpeRatio", "sharpe_ratio"),
            max_drawdown=pick("maxDrawdown", "max_drawdown"),
            avg_trade_duration=pick("avgTradeDuration", "avg_trade_duration"),
            kelly_percent=pick("kellyPercent", "kelly_percent", required=False),
        )


@dataclass(frozen=True)
class StrategyProfile:
    """Archetype picked from several metrics at once."""
    profile: ProfileName
    strengths: Tuple[str, ...]
    weaknesses: Tuple[str, ...]
    overall_assessment: str
    trading_style: TradingStyle

    def to_dict(self) -> dict:
        return {
            "profile": self.profile,
            "strengths": list(self.strengths),
            "weaknesses": list(self.weaknesses),
            "overallAssessment": self.overall_assessment,
            "tradingStyle": self.trading_style,
        }


@dataclass
class StrategyReport:
    """Every per-metric analysis plus the profile for one strategy."""
    analyses: Dict[MetricType, MetricAnalysis]
    profile: StrategyProfile

    def to_dict(self) -> dict:
        return {
            "analyses": {m.value: a.to_dict() for m, a in self.analyses.items()},
            "profile": self.profile.to_dict(),
        }
