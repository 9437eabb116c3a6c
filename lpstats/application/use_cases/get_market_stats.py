from __future__ import annotations

from decimal import Decimal, localcontext
import logging

from lpstats.application.dto.market_stats import GetMarketStatsInput, GetMarketStatsOutput
from lpstats.application.ports.reference_price_port import ReferencePricePort
from lpstats.domain.exceptions import InvalidReferencePriceError
from lpstats.domain.services.lp_stats import FEE_RATIO
from lpstats.domain.services.market_stats import calculate_market_stats
from lpstats.domain.services.periods import normalize_period
from lpstats.domain.services.series import order_by_date


logger = logging.getLogger(__name__)


class GetMarketStatsUseCase:
    def __init__(
        self,
        *,
        reference_price_port: ReferencePricePort,
        decimal_precision: int = 50,
        fee_ratio: Decimal = FEE_RATIO,
    ):
        self._reference_price_port = reference_price_port
        self._decimal_precision = decimal_precision
        self._fee_ratio = fee_ratio

    def execute(self, command: GetMarketStatsInput) -> GetMarketStatsOutput:
        period = normalize_period(command.period)
        reference_price_usd = command.reference_price_usd
        if reference_price_usd is None:
            reference_price_usd = self._reference_price_port.get_reference_price_usd()
        if reference_price_usd <= 0:
            raise InvalidReferencePriceError("reference price must be positive.")

        pairs = [item.pair for item in command.pairs]
        # Per-pair ordering problems are reported by the aggregator as skipped pairs.
        series_per_pair = [order_by_date(item.series) for item in command.pairs]

        with localcontext() as ctx:
            ctx.prec = self._decimal_precision
            batch = calculate_market_stats(
                pairs,
                series_per_pair,
                reference_price_usd,
                period=period,
                fee_ratio=self._fee_ratio,
            )

        logger.debug(
            "get_market_stats: computed pairs=%s stats=%s skipped=%s period=%s",
            len(pairs),
            len(batch.stats),
            len(batch.skipped),
            period,
        )
        return GetMarketStatsOutput(
            stats=list(batch.stats),
            skipped=list(batch.skipped),
            period=period,
            reference_price_usd=reference_price_usd,
        )
