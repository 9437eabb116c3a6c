from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from lpstats.api.deps import get_market_stats_use_case
from lpstats.api.mappers import map_pair_request, map_snapshot_request
from lpstats.api.schemas.market_stats import (
    MarketStatsItemResponse,
    MarketStatsRequest,
    MarketStatsResponse,
    SkippedPairResponse,
)
from lpstats.application.dto.market_stats import GetMarketStatsInput, PairSeriesInput
from lpstats.application.use_cases.get_market_stats import GetMarketStatsUseCase
from lpstats.domain.exceptions import (
    InvalidPeriodError,
    InvalidReferencePriceError,
    InvalidSeriesError,
    ReferencePriceUnavailableError,
)

router = APIRouter()


@router.post("/v1/market-stats", response_model=MarketStatsResponse)
def get_market_stats(
    req: MarketStatsRequest,
    use_case: GetMarketStatsUseCase = Depends(get_market_stats_use_case),
):
    try:
        output = use_case.execute(
            GetMarketStatsInput(
                pairs=[
                    PairSeriesInput(
                        pair=map_pair_request(item.pair),
                        series=[map_snapshot_request(row) for row in item.series],
                    )
                    for item in req.pairs
                ],
                period=req.period,
                reference_price_usd=req.eth_price_usd,
            )
        )
    except ReferencePriceUnavailableError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    except (InvalidPeriodError, InvalidReferencePriceError, InvalidSeriesError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return MarketStatsResponse(
        stats=[
            MarketStatsItemResponse(
                pair_id=row.pair_id,
                token0_symbol=row.token0.symbol,
                token1_symbol=row.token1.symbol,
                market=row.market,
                impermanent_loss=row.impermanent_loss,
                il_gross=row.il_gross,
                volume=row.volume,
                fees=row.fees,
                liquidity=row.liquidity,
                returns_usd=row.returns_usd,
                pct_return=row.pct_return,
                returns_eth=row.returns_eth,
            )
            for row in output.stats
        ],
        skipped=[
            SkippedPairResponse(
                pair_id=row.pair_id,
                market=row.market,
                reason=row.reason.value,
                detail=row.detail,
            )
            for row in output.skipped
        ],
        period=output.period,
        reference_price_usd=output.reference_price_usd,
    )
