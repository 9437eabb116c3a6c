from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from lpstats.domain.entities.market_snapshot import MarketSnapshot
from lpstats.domain.entities.market_stats import MarketStats, SkippedPair
from lpstats.domain.entities.pair import Pair


@dataclass(frozen=True)
class PairSeriesInput:
    pair: Pair
    series: list[MarketSnapshot]


@dataclass(frozen=True)
class GetMarketStatsInput:
    pairs: list[PairSeriesInput]
    period: str = "daily"
    reference_price_usd: Decimal | None = None


@dataclass(frozen=True)
class GetMarketStatsOutput:
    stats: list[MarketStats]
    skipped: list[SkippedPair]
    period: str
    reference_price_usd: Decimal
