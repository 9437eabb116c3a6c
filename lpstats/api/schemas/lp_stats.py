from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from lpstats.api.schemas.market_data import MarketSnapshotRequest, PairRequest


class LPStatsRequest(BaseModel):
    pair: PairRequest | None = Field(None, description="Pair metadata, used to clamp the entry date.")
    current: MarketSnapshotRequest = Field(..., description="Live pool state.")
    series: list[MarketSnapshotRequest] = Field(default_factory=list, description="Snapshots from the entry date.")
    contributed_usd: Decimal = Field(..., description="USD value contributed at entry.")
    period: str = Field("daily", description="Series granularity: daily or hourly.")
    entry_timestamp: int | None = Field(None, description="Position entry time (unix seconds).")


class LPStatsResponse(BaseModel):
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
