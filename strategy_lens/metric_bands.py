"""
Threshold band tables for the metric classifiers.
Each table is ordered from the most favorable band down and ends with a catch-all band
(bound=None). Band text is content: descriptions are str.format templates fed with the
input value (`value`, and for durations `minutes` / `hours` / `days`).
"""

import operator
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from strategy_lens.analysis_models import MetricAnalysis, Rating


@dataclass(frozen=True)
class Band:
    """One threshold band: `op(value, bound)` selects it; bound=None matches anything."""
    bound: Optional[float]
    rating: Rating
    color: str
    title: str
    description: str
    implications: Tuple[str, ...]
    recommendations: Tuple[str, ...]
    op: Callable[[float, float], bool] = operator.ge

    def matches(self, value: float) -> bool:
        return self.bound is None or self.op(value, self.bound)

    def render(self, **values) -> MetricAnalysis:
        return MetricAnalysis(
            rating=self.rating,
            color=self.color,
            title=self.title,
            description=self.description.format(**values),
            implications=self.implications,
            recommendations=self.recommendations,
        )


def select_band(bands: Tuple[Band, ...], value: float) -> Band:
    """
    First band whose test passes, top-down.
    NaN fails every comparison and falls through to the catch-all band.
    """
    for band in bands:
        if band.matches(value):
            return band
    return bands[-1]


# --- SHARPE RATIO (lower bound inclusive) ---
SHARPE_BANDS: Tuple[Band, ...] = (
    Band(
        3.0, "excellent", "text-emerald-400",
        "Mükemmel Risk-Ayarlı Getiri",
        "{value:.2f} Sharpe oranı ile strateji, hedge fon standartlarının çok üzerinde performans "
        "gösteriyor. Bu seviye, profesyonel para yöneticileri arasında bile nadirdir.",
        (
            "Risk başına getiri oranı olağanüstü yüksek",
            "Tutarlı ve düşük volatilite ile yüksek getiri",
            "Kurumsal yatırımcılar için cazip seviye",
            "Piyasa koşullarından bağımsız güçlü performans",
        ),
        (
            "Mevcut risk yönetimi parametrelerini koruyun",
            "Pozisyon boyutlarını kademeli artırabilirsiniz",
            "Bu performansı korumak için sistem değişikliklerinden kaçının",
        ),
    ),
    Band(
        2.0, "excellent", "text-green-400",
        "Çok İyi Risk-Ayarlı Getiri",
        "{value:.2f} Sharpe oranı profesyonel standartlarda mükemmel bir performans gösteriyor. "
        "Çoğu başarılı hedge fon bu aralıkta çalışır.",
        (
            "Üstün risk yönetimi ve getiri dengesi",
            "Profesyonel trading standartlarında performans",
            "Düşük volatilite ile tutarlı kazançlar",
            "Scalability için uygun seviye",
        ),
        (
            "Risk parametrelerini optimize etmeye devam edin",
            "Drawdown dönemlerini minimize edecek iyileştirmeler yapın",
            "Leverage kullanımı için uygun seviye",
        ),
    ),
    Band(
        1.5, "good", "text-green-400",
        "İyi Risk-Ayarlı Getiri",
        "{value:.2f} Sharpe oranı, riskin iyi yönetildiğini ve getirilerin tutarlı olduğunu "
        "gösteriyor. Profesyonel trading için kabul edilebilir seviye.",
        (
            "Pozitif risk-getiri dengesi",
            "Orta-üst seviye performans",
            "Makul volatilite seviyesi",
            "İyileştirme potansiyeli mevcut",
        ),
        (
            "Win rate veya average win/loss oranını iyileştirin",
            "Volatiliteyi azaltacak filtreler ekleyin",
            "Entry/exit timing optimizasyonu yapın",
        ),
    ),
    Band(
        1.0, "average", "text-yellow-400",
        "Ortalama Risk-Ayarlı Getiri",
        "{value:.2f} Sharpe oranı minimum kabul edilebilir seviyede. Risk başına getiri tatmin "
        "edici değil ve iyileştirme gerekiyor.",
        (
            "Risk-getiri dengesi zayıf",
            "Yüksek volatilite problemi",
            "Tutarsız performans dönemleri",
            "Profesyonel standartların altında",
        ),
        (
            "Risk yönetimi kurallarını sıkılaştırın",
            "Stop loss seviyelerini optimize edin",
            "Daha seçici trade filtreleri uygulayın",
            "Position sizing stratejisini gözden geçirin",
        ),
    ),
    Band(
        0.5, "poor", "text-orange-400",
        "Zayıf Risk-Ayarlı Getiri",
        "{value:.2f} Sharpe oranı, alınan riske göre yetersiz getiri olduğunu gösteriyor. "
        "Strateji ciddi revizyona ihtiyaç duyuyor.",
        (
            "Risk-getiri dengesi bozuk",
            "Aşırı volatilite",
            "Güvenilmez performans",
            "Sermaye kaybı riski yüksek",
        ),
        (
            "Trading stratejisini baştan değerlendirin",
            "Risk limitlerini ciddi şekilde azaltın",
            "Backtest sonuçlarını yeniden analiz edin",
            "Paper trading ile test edin",
        ),
    ),
    Band(
        None, "critical", "text-red-400",
        "Kritik Risk-Getiri Dengesizliği",
        "{value:.2f} Sharpe oranı kabul edilemez seviyede. Strateji, alınan riske göre değer "
        "üretmiyor.",
        (
            "Aşırı yüksek risk, düşük getiri",
            "Sermaye kaybı neredeyse kesin",
            "Strateji temelden hatalı",
            "Acil müdahale gerekli",
        ),
        (
            "Trading'i derhal durdurun",
            "Stratejiyi komple yeniden tasarlayın",
            "Profesyonel danışmanlık alın",
            "Daha basit stratejilerle başlayın",
        ),
    ),
)


# --- WIN RATE (percent, lower bound inclusive) ---
WIN_RATE_BANDS: Tuple[Band, ...] = (
    Band(
        70, "excellent", "text-emerald-400",
        "Olağanüstü Yüksek Kazanma Oranı",
        "%{value:.1f} kazanma oranı son derece yüksek. Bu seviye genelde scalping veya yüksek "
        "frekanslı trading stratejilerinde görülür.",
        (
            "Çok güçlü trade seçimi",
            "Mükemmel piyasa timing'i",
            "Düşük risk toleransı",
            "Tutarlı küçük kazançlar",
        ),
        (
            "Average win/loss oranını kontrol edin",
            "Overtrading'den kaçının",
            "Profit target'ları optimize edin",
            "Risk/reward dengesini gözden geçirin",
        ),
    ),
    Band(
        60, "good", "text-green-400",
        "Yüksek Kazanma Oranı",
        "%{value:.1f} kazanma oranı profesyonel seviyede. Tutarlı karlılık için ideal aralıkta.",
        (
            "İyi trade filtreleme",
            "Etkili risk yönetimi",
            "Güvenilir sinyal kalitesi",
            "Sürdürülebilir performans",
        ),
        (
            "Mevcut stratejiyi koruyun",
            "RR oranını optimize edin",
            "Winning streak'leri maksimize edin",
            "Loss recovery stratejisi geliştirin",
        ),
    ),
    Band(
        50, "average", "text-yellow-400",
        "Ortalama Kazanma Oranı",
        "%{value:.1f} kazanma oranı tipik seviyede. Karlılık için RR oranı kritik önemde.",
        (
            "Standart performans",
            "RR oranına bağımlı karlılık",
            "Orta seviye trade kalitesi",
            "İyileştirme potansiyeli var",
        ),
        (
            "Trade filtrelerini güçlendirin",
            "Entry sinyallerini optimize edin",
            "False signal'leri azaltın",
            "Win size > loss size sağlayın",
        ),
    ),
    Band(
        40, "poor", "text-orange-400",
        "Düşük Kazanma Oranı",
        "%{value:.1f} kazanma oranı düşük. Yüksek RR oranı olmadan karlılık zor.",
        (
            "Zayıf trade seçimi",
            "Yüksek false signal oranı",
            "Psikolojik baskı fazla",
            "Sermaye riski yüksek",
        ),
        (
            "Trade kriterlerini sıkılaştırın",
            "Confirmation filter'ları ekleyin",
            "Daha likit piyasalarda işlem yapın",
            "Stop loss disiplinine odaklanın",
        ),
    ),
    Band(
        None, "critical", "text-red-400",
        "Kritik Düşük Kazanma Oranı",
        "%{value:.1f} kazanma oranı kabul edilemez. Strateji temel revizyon gerektiriyor.",
        (
            "Strateji çalışmıyor",
            "Sürekli sermaye kaybı",
            "Trade logic hatalı",
            "Acil müdahale şart",
        ),
        (
            "Trading'i durdurun",
            "Stratejiyi baştan analiz edin",
            "Paper trade ile test edin",
            "Eğitim ve mentorluk alın",
        ),
    ),
)


# --- MAX DRAWDOWN (absolute percent, upper bound inclusive) ---
DRAWDOWN_BANDS: Tuple[Band, ...] = (
    Band(
        5, "excellent", "text-emerald-400",
        "Minimal Drawdown - Üstün Risk Kontrolü",
        "%{value:.1f} maksimum drawdown mükemmel risk yönetimini gösteriyor. Bu seviye kurumsal "
        "standartlarda.",
        (
            "Olağanüstü sermaye koruması",
            "Çok düşük volatilite",
            "Psikolojik açıdan rahat",
            "Compound growth için ideal",
        ),
        (
            "Bu seviyeyi korumaya odaklanın",
            "Pozisyon boyutunu kademeli artırabilirsiniz",
            "Risk parametrelerini değiştirmeyin",
        ),
        op=operator.le,
    ),
    Band(
        10, "good", "text-green-400",
        "Düşük Drawdown - İyi Risk Yönetimi",
        "%{value:.1f} maksimum drawdown profesyonel trading için ideal seviyede. Risk iyi kontrol "
        "altında.",
        (
            "Sağlıklı risk yönetimi",
            "Makul volatilite",
            "Hızlı toparlanma potansiyeli",
            "Yatırımcı dostu seviye",
        ),
        (
            "Drawdown sürelerini minimize edin",
            "Recovery stratejilerini güçlendirin",
            "Correlation risklerini kontrol edin",
        ),
        op=operator.le,
    ),
    Band(
        20, "average", "text-yellow-400",
        "Orta Seviye Drawdown - Kabul Edilebilir Risk",
        "%{value:.1f} maksimum drawdown normal sınırlarda ancak iyileştirme gerekli.",
        (
            "Standart risk seviyesi",
            "Orta düzey volatilite",
            "Psikolojik zorluk başlıyor",
            "Recovery süresi uzayabilir",
        ),
        (
            "Position sizing'i optimize edin",
            "Stop loss seviyelerini gözden geçirin",
            "Volatilite filtresi ekleyin",
            "Risk per trade'i azaltın",
        ),
        op=operator.le,
    ),
    Band(
        30, "poor", "text-orange-400",
        "Yüksek Drawdown - Riskli Seviye",
        "%{value:.1f} maksimum drawdown yüksek risk gösteriyor. Ciddi iyileştirmeler gerekli.",
        (
            "Aşırı risk alınıyor",
            "Sermaye kaybı riski yüksek",
            "Psikolojik baskı fazla",
            "Recovery zor ve uzun",
        ),
        (
            "Risk yönetimini baştan tasarlayın",
            "Maksimum pozisyon limitlerini azaltın",
            "Agresif trade'lerden kaçının",
            "Portfolio çeşitlendirmesi yapın",
        ),
        op=operator.le,
    ),
    Band(
        None, "critical", "text-red-400",
        "Kritik Drawdown - Tehlikeli Seviye",
        "%{value:.1f} maksimum drawdown kabul edilemez. Strateji sürdürülemez risk içeriyor.",
        (
            "Yıkıcı sermaye kaybı",
            "Strateji kontrolden çıkmış",
            "Recovery neredeyse imkansız",
            "Blow-up riski çok yüksek",
        ),
        (
            "Trading'i derhal durdurun",
            "Risk yönetimini komple değiştirin",
            "Çok daha küçük pozisyonlarla başlayın",
            "Profesyonel risk yönetimi eğitimi alın",
        ),
    ),
)


# --- PROFIT FACTOR (lower bound inclusive) ---
PROFIT_FACTOR_BANDS: Tuple[Band, ...] = (
    Band(
        3.0, "excellent", "text-emerald-400",
        "Olağanüstü Profit Factor",
        "{value:.2f} profit factor, her 1$ kayıp için {value:.2f}$ kazanç sağlandığını "
        "gösteriyor. Bu nadir görülen bir performans.",
        (
            "Mükemmel kar/zarar oranı",
            "Çok güçlü edge",
            "Sürdürülebilir karlılık",
            "Minimum sermaye riski",
        ),
        (
            "Bu performansı korumaya odaklanın",
            "Over-optimization'dan kaçının",
            "Position size'ı kademeli artırın",
        ),
    ),
    Band(
        2.0, "good", "text-green-400",
        "Çok İyi Profit Factor",
        "{value:.2f} profit factor güçlü bir trading edge'i gösteriyor. Profesyonel seviyede "
        "performans.",
        (
            "Sağlıklı kar/zarar dengesi",
            "İyi risk kontrolü",
            "Tutarlı performans",
            "Güvenilir sistem",
        ),
        (
            "Loss trade'leri minimize edin",
            "Winner'ları daha uzun tutun",
            "Partial profit taking düşünün",
        ),
    ),
    Band(
        1.5, "average", "text-yellow-400",
        "Yeterli Profit Factor",
        "{value:.2f} profit factor pozitif ancak iyileştirme alanı var. Komisyonlar sonrası "
        "karlılığı kontrol edin.",
        (
            "Makul karlılık",
            "Orta düzey performans",
            "İyileştirme potansiyeli",
            "Komisyon hassasiyeti",
        ),
        (
            "Average win/loss oranını artırın",
            "Cut losses quick, let profits run",
            "Trade kalitesine odaklanın",
        ),
    ),
    Band(
        1.2, "poor", "text-orange-400",
        "Düşük Profit Factor",
        "{value:.2f} profit factor minimum seviyede. Komisyonlar dahil edildiğinde karlılık "
        "sorgulanabilir.",
        (
            "Zayıf kar marjı",
            "Yüksek risk",
            "Komisyon hassasiyeti",
            "Güvenilmez karlılık",
        ),
        (
            "Stop loss disiplini geliştirin",
            "Take profit seviyelerini optimize edin",
            "Daha seçici trade yapın",
            "Spread/komisyon maliyetlerini azaltın",
        ),
    ),
    Band(
        None, "critical", "text-red-400",
        "Negatif Edge - Zarar Eden Sistem",
        "{value:.2f} profit factor sistemin zarar ettiğini gösteriyor. Trading edge yok.",
        (
            "Sistem para kaybediyor",
            "Trading edge yok",
            "Strateji çalışmıyor",
            "Sermaye erozyonu",
        ),
        (
            "Trading'i durdurun",
            "Stratejiyi tamamen değiştirin",
            "Eğitim ve analiz yapın",
            "Demo hesapta test edin",
        ),
    ),
)


# --- AVERAGE TRADE DURATION (hours, strict upper bound) ---
# Not monotonic: the 2-8h band is the optimum, both extremes rate lower.
DURATION_BANDS: Tuple[Band, ...] = (
    Band(
        0.5, "average", "text-blue-400",
        "Scalping - Çok Kısa Süreli İşlemler",
        "Ortalama {minutes:.0f} dakika işlem süresi tipik scalping stratejisi. Yüksek frekans, "
        "düşük spread gerektirir.",
        (
            "Yüksek işlem maliyeti",
            "Hızlı karar verme gerekli",
            "Spread/komisyon kritik",
            "Yoğun takip gerektirir",
        ),
        (
            "ECN broker kullanın",
            "Spread maliyetlerini minimize edin",
            "Otomatik trading düşünün",
            "Slippage kontrolü yapın",
        ),
        op=operator.lt,
    ),
    Band(
        2, "good", "text-green-400",
        "Day Trading - Gün İçi İşlemler",
        "Ortalama {hours:.1f} saat işlem süresi optimal day trading aralığında. İyi momentum "
        "yakalama.",
        (
            "Dengeli risk/ödül",
            "Makul işlem maliyeti",
            "İyi fırsat yakalama",
            "Aktif izleme gerekli",
        ),
        (
            "Volatilite saatlerine odaklanın",
            "News trading filtresi ekleyin",
            "Partial close stratejisi uygulayın",
        ),
        op=operator.lt,
    ),
    Band(
        8, "excellent", "text-emerald-400",
        "Intraday Swing - Optimal Süre",
        "Ortalama {hours:.1f} saat işlem süresi mükemmel denge sağlıyor. Trend ve momentum "
        "optimal kullanımı.",
        (
            "İdeal risk/ödül dengesi",
            "Düşük işlem maliyeti",
            "Güçlü trend yakalama",
            "Esnek yönetim imkanı",
        ),
        (
            "Trailing stop kullanın",
            "Trend strength indicator ekleyin",
            "Multi-timeframe analiz yapın",
        ),
        op=operator.lt,
    ),
    Band(
        24, "good", "text-green-400",
        "Short-term Swing - Günlük İşlemler",
        "Ortalama {hours:.1f} saat işlem süresi kısa vadeli swing trading. Overnight risk var.",
        (
            "Overnight risk exposure",
            "Swap maliyetleri",
            "Büyük trendleri yakalama",
            "Gap riski mevcut",
        ),
        (
            "Swap-free hesap düşünün",
            "Gap protection stratejisi",
            "Fundamental filtre ekleyin",
            "Position sizing'e dikkat",
        ),
        op=operator.lt,
    ),
    Band(
        None, "average", "text-yellow-400",
        "Position Trading - Uzun Vadeli",
        "Ortalama {days:.1f} gün işlem süresi position trading. Büyük trendlere odaklanma.",
        (
            "Yüksek swap maliyeti",
            "Büyük fiyat hareketleri",
            "Fundamental etki fazla",
            "Düşük işlem sıklığı",
        ),
        (
            "Swap-free hesap kullanın",
            "Fundamental analiz ekleyin",
            "Wider stop loss kullanın",
            "Long-term trend following",
        ),
    ),
)


# --- KELLY PERCENTAGE (percent; poor band is strictly positive) ---
KELLY_BANDS: Tuple[Band, ...] = (
    Band(
        20, "excellent", "text-emerald-400",
        "Çok Yüksek Kelly - Güçlü Edge",
        "%{value:.1f} Kelly değeri çok güçlü bir trading edge gösteriyor. Sistem %25'te "
        "sınırlandırılmış.",
        (
            "Olağanüstü güçlü edge",
            "Yüksek compound potential",
            "Agresif sizing uygun",
            "Hızlı sermaye büyümesi",
        ),
        (
            "Kelly'nin yarısını kullanın (güvenlik için)",
            "Volatilite bazlı ayarlama yapın",
            "Drawdown limitlerini koruyun",
        ),
    ),
    Band(
        10, "good", "text-green-400",
        "İyi Kelly Değeri - Solid Edge",
        "%{value:.1f} Kelly değeri sağlıklı bir trading edge'i gösteriyor. Optimal büyüme "
        "potansiyeli.",
        (
            "Güvenilir trading edge",
            "İyi büyüme potansiyeli",
            "Dengeli risk/ödül",
            "Sürdürülebilir sizing",
        ),
        (
            "Kelly'nin %50-75'ini kullanın",
            "Market koşullarına göre ayarlayın",
            "Regular rebalancing yapın",
        ),
    ),
    Band(
        5, "average", "text-yellow-400",
        "Orta Kelly - Modest Edge",
        "%{value:.1f} Kelly değeri mütevazı bir edge gösteriyor. Conservative sizing öneriliyor.",
        (
            "Sınırlı edge",
            "Yavaş büyüme",
            "Conservative approach gerekli",
            "Risk kontrolü önemli",
        ),
        (
            "Maksimum %2-3 risk alın",
            "Fixed fractional sizing",
            "Edge'i güçlendirmeye odaklanın",
        ),
    ),
    Band(
        0, "poor", "text-orange-400",
        "Düşük Kelly - Zayıf Edge",
        "%{value:.1f} Kelly değeri çok zayıf edge. Minimum position sizing gerekli.",
        (
            "Minimal edge",
            "Yüksek uncertainty",
            "Komisyon hassasiyeti",
            "Dikkatli sizing gerekli",
        ),
        (
            "Maksimum %1 risk",
            "Stratejiyi iyileştirin",
            "Paper trade yapın",
            "Edge'i artırmaya odaklanın",
        ),
        op=operator.gt,
    ),
    Band(
        None, "critical", "text-red-400",
        "Negatif Kelly - Edge Yok",
        "%{value:.1f} Kelly değeri negatif expectancy gösteriyor. Sistem para kaybediyor.",
        (
            "Trading edge yok",
            "Negatif expectancy",
            "Para kaybı garantili",
            "Sizing irrelevant",
        ),
        (
            "Trading yapmayın",
            "Stratejiyi baştan tasarlayın",
            "Eğitim alın",
            "Demo hesapta çalışın",
        ),
    ),
)


# --- UNKNOWN METRIC ---
FALLBACK_TITLE = "Analiz Mevcut Değil"
FALLBACK_DESCRIPTION = "Bu metrik için detaylı analiz henüz eklenmemiş."
