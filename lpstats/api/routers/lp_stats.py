from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from lpstats.api.deps import get_lp_stats_use_case
from lpstats.api.mappers import map_pair_request, map_snapshot_request
from lpstats.api.schemas.lp_stats import LPStatsRequest, LPStatsResponse
from lpstats.application.dto.lp_stats import GetLPStatsInput
from lpstats.application.use_cases.get_lp_stats import GetLPStatsUseCase
from lpstats.domain.exceptions import (
    InvalidPeriodError,
    InvalidSeriesError,
    InvalidSnapshotError,
    LPStatsInputError,
)

router = APIRouter()


@router.post("/v1/lp-stats", response_model=LPStatsResponse)
def get_lp_stats(
    req: LPStatsRequest,
    use_case: GetLPStatsUseCase = Depends(get_lp_stats_use_case),
):
    try:
        output = use_case.execute(
            GetLPStatsInput(
                current=map_snapshot_request(req.current),
                series=[map_snapshot_request(row) for row in req.series],
                contributed_usd=req.contributed_usd,
                period=req.period,
                entry_timestamp=req.entry_timestamp,
                pair=map_pair_request(req.pair) if req.pair is not None else None,
            )
        )
    except (InvalidPeriodError, InvalidSeriesError, InvalidSnapshotError, LPStatsInputError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return LPStatsResponse(
        total_fees=output.total_fees,
        impermanent_loss=output.impermanent_loss,
        total_return=output.total_return,
        running_volume=output.running_volume,
        running_fees=output.running_fees,
        running_impermanent_loss=output.running_impermanent_loss,
        running_return=output.running_return,
        days=output.days,
        period=output.period,
        entry_timestamp=output.entry_timestamp,
        is_empty=output.is_empty,
    )
