from __future__ import annotations

from decimal import Decimal

from lpstats.domain.entities.market_snapshot import MarketSnapshot
from lpstats.domain.exceptions import InvalidSnapshotError


def exchange_rate(snapshot: MarketSnapshot) -> Decimal:
    if snapshot.reserve0 <= 0 or snapshot.reserve1 <= 0:
        raise InvalidSnapshotError(
            f"reserve0 and reserve1 must be positive (date={snapshot.date}, "
            f"reserve0={snapshot.reserve0}, reserve1={snapshot.reserve1})."
        )
    return snapshot.reserve0 / snapshot.reserve1


def impermanent_loss_fraction(start: MarketSnapshot, end: MarketSnapshot) -> Decimal:
    """Loss of an x*y=k position against holding, between two reserve snapshots.

    Returns 2*sqrt(r)/(r+1) - 1 where r is the change of the reserve0/reserve1
    exchange rate from ``start`` to ``end``. The value is zero when the rate did
    not move and negative otherwise. Fees and LP supply changes are not part of it.
    """
    price_ratio = exchange_rate(end) / exchange_rate(start)
    return Decimal("2") * price_ratio.sqrt() / (price_ratio + Decimal("1")) - Decimal("1")


def impermanent_loss_usd(
    start: MarketSnapshot,
    end: MarketSnapshot,
    liquidity_usd: Decimal,
) -> Decimal:
    return impermanent_loss_fraction(start, end) * liquidity_usd
