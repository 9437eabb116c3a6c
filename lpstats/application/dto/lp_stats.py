from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from lpstats.domain.entities.market_snapshot import MarketSnapshot
from lpstats.domain.entities.pair import Pair


@dataclass(frozen=True)
class GetLPStatsInput:
    current: MarketSnapshot
    series: list[MarketSnapshot]
    contributed_usd: Decimal
    period: str = "daily"
    entry_timestamp: int | None = None
    pair: Pair | None = None


@dataclass(frozen=True)
class GetLPStatsOutput:
    total_fees: Decimal
    impermanent_loss: Decimal
    total_return: Decimal
    running_volume: list[Decimal]
    running_fees: list[Decimal]
    running_impermanent_loss: list[Decimal]
    running_return: list[Decimal]
    days: list[str]
    period: str
    entry_timestamp: int | None
    is_empty: bool
