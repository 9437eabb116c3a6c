from __future__ import annotations

from decimal import Decimal, localcontext
import logging
from typing import Callable

from lpstats.application.dto.lp_stats import GetLPStatsInput, GetLPStatsOutput
from lpstats.domain.exceptions import LPStatsInputError
from lpstats.domain.services.lp_stats import FEE_RATIO, calculate_lp_stats
from lpstats.domain.services.periods import LabelFormatter, label_formatter_for, normalize_period
from lpstats.domain.services.series import sort_series, trim_to_entry


logger = logging.getLogger(__name__)


class GetLPStatsUseCase:
    def __init__(
        self,
        *,
        label_formatter_factory: Callable[[str], LabelFormatter] = label_formatter_for,
        decimal_precision: int = 50,
        fee_ratio: Decimal = FEE_RATIO,
    ):
        self._label_formatter_factory = label_formatter_factory
        self._decimal_precision = decimal_precision
        self._fee_ratio = fee_ratio

    def execute(self, command: GetLPStatsInput) -> GetLPStatsOutput:
        period = normalize_period(command.period)
        if command.contributed_usd <= 0:
            raise LPStatsInputError("contributed_usd must be positive.")
        if command.entry_timestamp is not None and command.entry_timestamp < 0:
            raise LPStatsInputError("entry_timestamp must be >= 0.")

        entry_timestamp = command.entry_timestamp
        created_at = command.pair.created_at_timestamp if command.pair is not None else None
        if entry_timestamp is not None and created_at is not None and entry_timestamp < created_at:
            entry_timestamp = created_at

        series = trim_to_entry(sort_series(command.series), entry_timestamp)
        logger.debug(
            "get_lp_stats: computing points=%s period=%s entry_timestamp=%s",
            len(series),
            period,
            entry_timestamp,
        )

        with localcontext() as ctx:
            ctx.prec = self._decimal_precision
            stats = calculate_lp_stats(
                command.current,
                series,
                command.contributed_usd,
                period=period,
                fee_ratio=self._fee_ratio,
                label_formatter=self._label_formatter_factory(period),
            )

        return GetLPStatsOutput(
            total_fees=stats.total_fees,
            impermanent_loss=stats.impermanent_loss,
            total_return=stats.total_return,
            running_volume=list(stats.running_volume),
            running_fees=list(stats.running_fees),
            running_impermanent_loss=list(stats.running_impermanent_loss),
            running_return=list(stats.running_return),
            days=list(stats.days),
            period=period,
            entry_timestamp=entry_timestamp,
            is_empty=stats.is_empty,
        )
