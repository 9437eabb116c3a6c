from __future__ import annotations

from collections.abc import Sequence

from lpstats.domain.entities.market_snapshot import MarketSnapshot
from lpstats.domain.exceptions import InvalidSeriesError


def series_order_error(series: Sequence[MarketSnapshot]) -> str | None:
    for previous, current in zip(series, series[1:]):
        if current.date <= previous.date:
            return f"snapshot dates must be strictly increasing (got {previous.date} then {current.date})."
    return None


def ensure_strictly_increasing(series: Sequence[MarketSnapshot]) -> None:
    detail = series_order_error(series)
    if detail is not None:
        raise InvalidSeriesError(detail)


def order_by_date(series: Sequence[MarketSnapshot]) -> list[MarketSnapshot]:
    return sorted(series, key=lambda row: row.date)


def sort_series(series: Sequence[MarketSnapshot]) -> list[MarketSnapshot]:
    ordered = order_by_date(series)
    ensure_strictly_increasing(ordered)
    return ordered


def trim_to_entry(series: Sequence[MarketSnapshot], entry_timestamp: int | None) -> list[MarketSnapshot]:
    """Keep the records of an ordered series from the period containing ``entry_timestamp``."""
    if entry_timestamp is None:
        return list(series)
    start = 0
    for index, row in enumerate(series):
        if row.date <= entry_timestamp:
            start = index
        else:
            break
    return list(series[start:])
