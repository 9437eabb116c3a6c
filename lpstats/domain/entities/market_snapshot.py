from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from lpstats.domain.exceptions import InvalidPeriodError


PERIOD_DAILY = "daily"
PERIOD_HOURLY = "hourly"
PERIODS = (PERIOD_DAILY, PERIOD_HOURLY)


@dataclass(frozen=True)
class MarketSnapshot:
    date: int
    reserve0: Decimal
    reserve1: Decimal
    reserve_usd: Decimal
    daily_volume_usd: Decimal = Decimal("0")
    hourly_volume_usd: Decimal = Decimal("0")

    def volume_for(self, period: str) -> Decimal:
        if period == PERIOD_DAILY:
            return self.daily_volume_usd
        if period == PERIOD_HOURLY:
            return self.hourly_volume_usd
        raise InvalidPeriodError(f"period must be one of: {', '.join(PERIODS)}.")
