from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class TokenRequest(BaseModel):
    symbol: str = Field(..., description="Token symbol.")
    decimals: int = Field(18, ge=0, description="Token decimal precision.")
    id: str | None = Field(None, description="Token address.")
    name: str | None = Field(None, description="Token name.")


class PairRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Pair address.")
    token0: TokenRequest
    token1: TokenRequest
    reserve_usd: Decimal = Field(..., alias="reserveUSD", description="Current pool liquidity in USD.")
    volume_usd: Decimal | None = Field(None, alias="volumeUSD", description="Lifetime volume in USD.")
    created_at_timestamp: int | None = Field(
        None,
        alias="createdAtTimestamp",
        description="Pair creation time (unix seconds).",
    )


class MarketSnapshotRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: int = Field(..., description="Period start (unix seconds).")
    reserve0: Decimal = Field(..., description="Token0 reserve at snapshot time.")
    reserve1: Decimal = Field(..., description="Token1 reserve at snapshot time.")
    reserve_usd: Decimal = Field(..., alias="reserveUSD", description="Pool liquidity in USD.")
    daily_volume_usd: Decimal = Field(Decimal("0"), alias="dailyVolumeUSD")
    hourly_volume_usd: Decimal = Field(Decimal("0"), alias="hourlyVolumeUSD")
