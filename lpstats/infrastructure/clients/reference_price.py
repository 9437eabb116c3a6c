from __future__ import annotations

from decimal import Decimal

from lpstats.application.ports.reference_price_port import ReferencePricePort
from lpstats.domain.exceptions import ReferencePriceUnavailableError


class ConfiguredReferencePriceProvider(ReferencePricePort):
    def __init__(self, price_usd: Decimal | None):
        self._price_usd = price_usd

    def get_reference_price_usd(self) -> Decimal:
        if self._price_usd is None:
            raise ReferencePriceUnavailableError(
                "Reference price unavailable. Provide eth_price_usd or set REFERENCE_PRICE_USD."
            )
        return self._price_usd
