from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from lpstats.api.schemas.market_data import MarketSnapshotRequest, PairRequest


class PairSeriesRequest(BaseModel):
    pair: PairRequest
    series: list[MarketSnapshotRequest] = Field(default_factory=list)


class MarketStatsRequest(BaseModel):
    pairs: list[PairSeriesRequest] = Field(default_factory=list)
    period: str = Field("daily", description="Series granularity: daily or hourly.")
    eth_price_usd: Decimal | None = Field(None, description="Reference asset price in USD.")


class MarketStatsItemResponse(BaseModel):
    pair_id: str
    token0_symbol: str
    token1_symbol: str
    market: str
    impermanent_loss: Decimal
    il_gross: Decimal
    volume: Decimal
    fees: Decimal
    liquidity: Decimal
    returns_usd: Decimal
    pct_return: Decimal
    returns_eth: Decimal


class SkippedPairResponse(BaseModel):
    pair_id: str
    market: str
    reason: str
    detail: str


class MarketStatsResponse(BaseModel):
    stats: list[MarketStatsItemResponse]
    skipped: list[SkippedPairResponse]
    period: str
    reference_price_usd: Decimal
