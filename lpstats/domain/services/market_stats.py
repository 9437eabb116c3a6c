from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
import logging

from lpstats.domain.entities.market_snapshot import PERIOD_DAILY, MarketSnapshot
from lpstats.domain.entities.market_stats import (
    MarketStats,
    MarketStatsBatch,
    MarketStatsOutcome,
    SkippedPair,
    SkipReason,
)
from lpstats.domain.entities.pair import Pair
from lpstats.domain.exceptions import InvalidReferencePriceError, InvalidSeriesError
from lpstats.domain.services.impermanent_loss import impermanent_loss_fraction
from lpstats.domain.services.lp_stats import FEE_RATIO
from lpstats.domain.services.periods import normalize_period
from lpstats.domain.services.series import series_order_error


logger = logging.getLogger(__name__)


def _invalid_snapshot_detail(pair: Pair, first: MarketSnapshot, last: MarketSnapshot) -> str | None:
    if pair.reserve_usd <= 0:
        return f"pair reserve_usd must be positive (reserve_usd={pair.reserve_usd})."
    for label, snapshot in (("first", first), ("last", last)):
        if snapshot.reserve0 <= 0 or snapshot.reserve1 <= 0:
            return (
                f"{label} snapshot reserves must be positive (date={snapshot.date}, "
                f"reserve0={snapshot.reserve0}, reserve1={snapshot.reserve1})."
            )
    return None


def _skip(pair: Pair, reason: SkipReason, detail: str) -> MarketStatsOutcome:
    return MarketStatsOutcome(
        skipped=SkippedPair(pair_id=pair.id, market=pair.market, reason=reason, detail=detail)
    )


def evaluate_pair(
    pair: Pair,
    series: Sequence[MarketSnapshot],
    reference_price_usd: Decimal,
    *,
    period: str = PERIOD_DAILY,
    fee_ratio: Decimal = FEE_RATIO,
) -> MarketStatsOutcome:
    period = normalize_period(period)
    if len(series) < 2:
        return _skip(
            pair,
            SkipReason.INSUFFICIENT_DATA,
            f"at least 2 snapshots are required, got {len(series)}.",
        )

    detail = series_order_error(series)
    if detail is not None:
        return _skip(pair, SkipReason.INVALID_SERIES, detail)

    first, last = series[0], series[-1]
    detail = _invalid_snapshot_detail(pair, first, last)
    if detail is not None:
        return _skip(pair, SkipReason.INVALID_SNAPSHOT, detail)

    impermanent_loss = impermanent_loss_fraction(first, last)
    volume = sum((row.volume_for(period) for row in series), Decimal("0"))
    fees = volume * fee_ratio
    # Loss is scaled by the fees earned before it; both terms stay in USD.
    il_gross = impermanent_loss * fees
    returns_usd = fees + il_gross

    return MarketStatsOutcome(
        stats=MarketStats(
            pair_id=pair.id,
            token0=pair.token0,
            token1=pair.token1,
            market=pair.market,
            impermanent_loss=impermanent_loss,
            il_gross=il_gross,
            volume=volume,
            fees=fees,
            liquidity=pair.reserve_usd,
            returns_usd=returns_usd,
            pct_return=returns_usd / pair.reserve_usd,
            returns_eth=returns_usd / reference_price_usd,
        )
    )


def calculate_market_stats(
    pairs: Sequence[Pair],
    series_per_pair: Sequence[Sequence[MarketSnapshot]],
    reference_price_usd: Decimal,
    *,
    period: str = PERIOD_DAILY,
    fee_ratio: Decimal = FEE_RATIO,
) -> MarketStatsBatch:
    if len(pairs) != len(series_per_pair):
        raise InvalidSeriesError(
            f"pairs and series must have the same length (got {len(pairs)} and {len(series_per_pair)})."
        )
    if reference_price_usd <= 0:
        raise InvalidReferencePriceError("reference price must be positive.")
    period = normalize_period(period)

    stats: list[MarketStats] = []
    skipped: list[SkippedPair] = []
    for pair, series in zip(pairs, series_per_pair):
        outcome = evaluate_pair(
            pair,
            series,
            reference_price_usd,
            period=period,
            fee_ratio=fee_ratio,
        )
        if outcome.skipped is not None:
            logger.warning(
                "market_stats: skipped_pair pair=%s market=%s reason=%s detail=%s",
                outcome.skipped.pair_id,
                outcome.skipped.market,
                outcome.skipped.reason.value,
                outcome.skipped.detail,
            )
            skipped.append(outcome.skipped)
            continue
        stats.append(outcome.stats)
    return MarketStatsBatch(stats=tuple(stats), skipped=tuple(skipped))
