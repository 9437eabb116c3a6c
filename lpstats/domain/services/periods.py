from __future__ import annotations

from datetime import datetime, timezone
from functools import partial
from typing import Callable

from lpstats.domain.entities.market_snapshot import PERIOD_DAILY, PERIOD_HOURLY, PERIODS
from lpstats.domain.exceptions import InvalidPeriodError


LabelFormatter = Callable[[int], str]

# Fixed names so labels do not depend on the process locale.
MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def normalize_period(period: str) -> str:
    value = (period or "").strip().lower()
    if value not in PERIODS:
        raise InvalidPeriodError(f"period must be one of: {', '.join(PERIODS)}.")
    return value


def format_period_label(timestamp: int, period: str = PERIOD_DAILY) -> str:
    period = normalize_period(period)
    moment = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    label = f"{MONTH_LABELS[moment.month - 1]} {moment.day}"
    if period == PERIOD_HOURLY:
        return f"{label} {moment.hour:02d}:00"
    return label


def label_formatter_for(period: str) -> LabelFormatter:
    return partial(format_period_label, period=normalize_period(period))
