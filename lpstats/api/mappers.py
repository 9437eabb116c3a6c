from __future__ import annotations

from lpstats.api.schemas.market_data import MarketSnapshotRequest, PairRequest, TokenRequest
from lpstats.domain.entities.market_snapshot import MarketSnapshot
from lpstats.domain.entities.pair import Pair, Token


def map_token_request(req: TokenRequest) -> Token:
    return Token(symbol=req.symbol, decimals=req.decimals, id=req.id, name=req.name)


def map_pair_request(req: PairRequest) -> Pair:
    return Pair(
        id=req.id,
        token0=map_token_request(req.token0),
        token1=map_token_request(req.token1),
        reserve_usd=req.reserve_usd,
        volume_usd=req.volume_usd,
        created_at_timestamp=req.created_at_timestamp,
    )


def map_snapshot_request(req: MarketSnapshotRequest) -> MarketSnapshot:
    return MarketSnapshot(
        date=req.date,
        reserve0=req.reserve0,
        reserve1=req.reserve1,
        reserve_usd=req.reserve_usd,
        daily_volume_usd=req.daily_volume_usd,
        hourly_volume_usd=req.hourly_volume_usd,
    )
