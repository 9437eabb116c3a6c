from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from lpstats.domain.entities.lp_stats import LPStats
from lpstats.domain.entities.market_snapshot import PERIOD_DAILY, MarketSnapshot
from lpstats.domain.exceptions import InvalidSnapshotError
from lpstats.domain.services.impermanent_loss import impermanent_loss_usd
from lpstats.domain.services.periods import LabelFormatter, label_formatter_for, normalize_period
from lpstats.domain.services.series import ensure_strictly_increasing


# Uniswap V2 swap fee paid to liquidity providers.
FEE_RATIO = Decimal("0.003")


def pool_share(contributed_usd: Decimal, snapshot: MarketSnapshot) -> Decimal:
    if snapshot.reserve_usd <= 0:
        raise InvalidSnapshotError(
            f"reserve_usd must be positive (date={snapshot.date}, reserve_usd={snapshot.reserve_usd})."
        )
    return contributed_usd / snapshot.reserve_usd


def calculate_lp_stats(
    current: MarketSnapshot,
    series: Sequence[MarketSnapshot],
    contributed_usd: Decimal,
    *,
    period: str = PERIOD_DAILY,
    fee_ratio: Decimal = FEE_RATIO,
    label_formatter: LabelFormatter | None = None,
) -> LPStats:
    """Fold a position's snapshot series into cumulative fee, loss and return series.

    ``series[0]`` is the entry snapshot and only contributes the zero baseline.
    Every later period earns ``volume * contributed_usd / reserve_usd * fee_ratio``
    and the day-over-day impermanent loss of ``contributed_usd``. The position size
    stays fixed at ``contributed_usd``; fees are not reinvested.

    The total impermanent loss compares the entry snapshot with ``current``, so it
    can differ from the last running value when ``current`` is newer than the series.
    """
    if not series:
        return LPStats.empty()

    period = normalize_period(period)
    ensure_strictly_increasing(series)
    format_label = label_formatter or label_formatter_for(period)

    zero = Decimal("0")
    running_volume = [zero]
    running_fees = [zero]
    running_impermanent_loss = [zero]
    running_return = [zero]
    days = [format_label(series[0].date)]

    for previous, snapshot in zip(series, series[1:]):
        volume = snapshot.volume_for(period)
        period_fees = volume * pool_share(contributed_usd, snapshot) * fee_ratio
        period_impermanent_loss = impermanent_loss_usd(previous, snapshot, contributed_usd)
        period_return = period_fees + period_impermanent_loss

        running_volume.append(running_volume[-1] + volume)
        running_fees.append(running_fees[-1] + period_fees)
        running_impermanent_loss.append(running_impermanent_loss[-1] + period_impermanent_loss)
        running_return.append(running_return[-1] + period_return)
        days.append(format_label(snapshot.date))

    total_fees = running_fees[-1]
    impermanent_loss = impermanent_loss_usd(series[0], current, contributed_usd)

    return LPStats(
        total_fees=total_fees,
        impermanent_loss=impermanent_loss,
        total_return=total_fees + impermanent_loss,
        running_volume=tuple(running_volume),
        running_fees=tuple(running_fees),
        running_impermanent_loss=tuple(running_impermanent_loss),
        running_return=tuple(running_return),
        days=tuple(days),
    )
