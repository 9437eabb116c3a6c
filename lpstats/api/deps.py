from __future__ import annotations

from lpstats.application.use_cases.get_lp_stats import GetLPStatsUseCase
from lpstats.application.use_cases.get_market_stats import GetMarketStatsUseCase
from lpstats.domain.services.periods import label_formatter_for
from lpstats.infrastructure.clients.reference_price import ConfiguredReferencePriceProvider
from lpstats.shared.config import get_settings


def get_lp_stats_use_case() -> GetLPStatsUseCase:
    settings = get_settings()
    return GetLPStatsUseCase(
        label_formatter_factory=label_formatter_for,
        decimal_precision=settings.decimal_precision,
        fee_ratio=settings.fee_ratio,
    )


def get_market_stats_use_case() -> GetMarketStatsUseCase:
    settings = get_settings()
    return GetMarketStatsUseCase(
        reference_price_port=ConfiguredReferencePriceProvider(settings.reference_price_usd),
        decimal_precision=settings.decimal_precision,
        fee_ratio=settings.fee_ratio,
    )
