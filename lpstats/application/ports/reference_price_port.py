from __future__ import annotations

from decimal import Decimal
from typing import Protocol


class ReferencePricePort(Protocol):
    def get_reference_price_usd(self) -> Decimal:
        ...
