from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class LPStats:
    total_fees: Decimal
    impermanent_loss: Decimal
    total_return: Decimal
    running_volume: tuple[Decimal, ...] = ()
    running_fees: tuple[Decimal, ...] = ()
    running_impermanent_loss: tuple[Decimal, ...] = ()
    running_return: tuple[Decimal, ...] = ()
    days: tuple[str, ...] = ()

    @classmethod
    def empty(cls) -> "LPStats":
        return cls(
            total_fees=Decimal("0"),
            impermanent_loss=Decimal("0"),
            total_return=Decimal("0"),
        )

    @property
    def is_empty(self) -> bool:
        return not self.days
