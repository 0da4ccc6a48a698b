"""
Profile Classifier.
Looks at several raw metrics at once and picks one strategy archetype.
The archetype cascade is first-match-wins; its order decides overlapping inputs.
"""

from typing import Dict, Tuple, Union

from strategy_lens.analysis_models import (
    ProfileName,
    StrategyMetrics,
    StrategyProfile,
    TradingStyle,
)

# name -> (strengths, weaknesses, overall assessment)
PROFILE_CONTENT: Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...], str]] = {
    "Elite Performer": (
        (
            "Mükemmel trade seçimi ve timing",
            "Üstün risk yönetimi",
            "Tutarlı ve güvenilir performans",
            "Kurumsal kalite strateji",
        ),
        (
            "Over-optimization riski",
            "Market değişimlerine hassasiyet",
            "Yüksek beklentiler baskısı",
        ),
        "Strateji elit seviyede performans gösteriyor. Nadir görülen bir başarı kombinasyonu. "
        "Bu performansı korumak ana odak olmalı.",
    ),
    "Solid Performer": (
        (
            "Dengeli risk-ödül yaklaşımı",
            "İyi win rate ve profit factor",
            "Kontrollü drawdown",
            "Sürdürülebilir strateji",
        ),
        (
            "Sharpe ratio iyileştirilebilir",
            "Volatilite kontrolü geliştirilebilir",
            "Edge güçlendirilebilir",
        ),
        "Güvenilir ve dengeli bir strateji. Profesyonel standartlarda performans. "
        "Minor iyileştirmelerle elite seviyeye çıkabilir.",
    ),
    "High RR Specialist": (
        (
            "Mükemmel risk/reward oranı",
            "Büyük kazançlar yakalama",
            "Trend following başarısı",
            "Let profits run mentalitesi",
        ),
        (
            "Düşük win rate psikolojik zorluk",
            "Ardışık kayıplar olası",
            "Yüksek volatilite",
            "Drawdown dönemleri uzun",
        ),
        "Klasik trend following profili. Düşük win rate yüksek RR stratejisi. "
        "Psikolojik dayanıklılık gerektirir.",
    ),
    "High Frequency Grinder": (
        (
            "Çok yüksek win rate",
            "Tutarlı küçük kazançlar",
            "Düşük drawdown",
            "Psikolojik rahatlık",
        ),
        (
            "Düşük profit factor",
            "Komisyon hassasiyeti yüksek",
            "Limited upside potential",
            "Bir büyük kayıp yıkıcı olabilir",
        ),
        "Tipik scalping/grid trading profili. Yüksek win rate ama düşük profit margin. "
        "Sıkı risk kontrolü kritik.",
    ),
    "High Risk Gambler": (
        (
            "Potansiyel yüksek getiri",
            "Agresif fırsat yakalama",
            "Büyük market move'ları yakalama",
        ),
        (
            "Aşırı yüksek risk",
            "Kontrolsüz drawdown",
            "Sermaye kaybı riski yüksek",
            "Sürdürülemez strateji",
        ),
        "Tehlikeli risk profili. Strateji kumar oynama seviyesinde risk alıyor. "
        "Acil risk yönetimi revizyonu gerekli.",
    ),
    "Developing Strategy": (
        (
            "Gelişim potansiyeli var",
            "Temel yapı mevcut",
            "Test ve optimizasyon aşamasında",
        ),
        (
            "Tutarsız performans",
            "Belirsiz edge",
            "Optimizasyon gerekli",
            "Risk yönetimi geliştirilmeli",
        ),
        "Strateji henüz olgunlaşmamış. Daha fazla test, optimizasyon ve iyileştirme gerekiyor. "
        "Potansiyel var ama çalışma lazım.",
    ),
}

# Strict upper bounds in hours; anything beyond the last is Position Trading.
# These are not the duration-rating bands of metric_analysis.
TRADING_STYLE_BANDS: Tuple[Tuple[float, TradingStyle], ...] = (
    (1, "Scalping"),
    (4, "Day Trading"),
    (24, "Swing Trading"),
)


def classify_trading_style(avg_trade_duration: float) -> TradingStyle:
    """<1h Scalping, <4h Day Trading, <24h Swing Trading, else Position Trading."""
    for upper, style in TRADING_STYLE_BANDS:
        if avg_trade_duration < upper:
            return style
    return "Position Trading"


def select_profile(m: StrategyMetrics) -> ProfileName:
    """Archetype cascade. First match wins; keep the branch order."""
    if m.win_rate > 65 and m.profit_factor > 2 and m.sharpe_ratio > 2:
        return "Elite Performer"
    elif m.win_rate > 55 and m.profit_factor > 1.5 and abs(m.max_drawdown) < 20:
        return "Solid Performer"
    elif m.win_rate < 45 and m.profit_factor > 2:
        return "High RR Specialist"
    elif m.win_rate > 70 and m.profit_factor < 1.5:
        return "High Frequency Grinder"
    elif abs(m.max_drawdown) > 30:
        return "High Risk Gambler"
    return "Developing Strategy"


def analyze_strategy_profile(metrics: Union[StrategyMetrics, dict]) -> StrategyProfile:
    """
    Combination analysis over win rate, profit factor, Sharpe, drawdown and duration.
    Trading style depends on duration alone; the archetype ignores duration.
    """
    if not isinstance(metrics, StrategyMetrics):
        metrics = StrategyMetrics.from_mapping(metrics)

    trading_style = classify_trading_style(metrics.avg_trade_duration)
    name = select_profile(metrics)
    strengths, weaknesses, assessment = PROFILE_CONTENT[name]

    return StrategyProfile(
        profile=name,
        strengths=strengths,
        weaknesses=weaknesses,
        overall_assessment=assessment,
        trading_style=trading_style,
    )
