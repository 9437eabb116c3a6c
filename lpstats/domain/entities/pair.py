from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Token:
    symbol: str
    decimals: int
    id: str | None = None
    name: str | None = None


@dataclass(frozen=True)
class Pair:
    id: str
    token0: Token
    token1: Token
    reserve_usd: Decimal
    volume_usd: Decimal | None = None
    created_at_timestamp: int | None = None

    @property
    def market(self) -> str:
        return f"{self.token0.symbol}/{self.token1.symbol}"
