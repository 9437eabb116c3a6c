from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from lpstats.domain.entities.pair import Token


class SkipReason(str, Enum):
    INSUFFICIENT_DATA = "insufficient_data"
    INVALID_SNAPSHOT = "invalid_snapshot"
    INVALID_SERIES = "invalid_series"


@dataclass(frozen=True)
class MarketStats:
    pair_id: str
    token0: Token
    token1: Token
    market: str
    impermanent_loss: Decimal
    il_gross: Decimal
    volume: Decimal
    fees: Decimal
    liquidity: Decimal
    returns_usd: Decimal
    pct_return: Decimal
    returns_eth: Decimal


@dataclass(frozen=True)
class SkippedPair:
    pair_id: str
    market: str
    reason: SkipReason
    detail: str


@dataclass(frozen=True)
class MarketStatsOutcome:
    """Result for one pair: either computed stats or the reason it was left out."""

    stats: MarketStats | None = None
    skipped: SkippedPair | None = None

    @property
    def is_skipped(self) -> bool:
        return self.skipped is not None


@dataclass(frozen=True)
class MarketStatsBatch:
    stats: tuple[MarketStats, ...] = ()
    skipped: tuple[SkippedPair, ...] = ()
