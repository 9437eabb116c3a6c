from __future__ import annotations

from decimal import Decimal
import unittest

from lpstats.domain.entities.market_snapshot import MarketSnapshot
from lpstats.domain.exceptions import InvalidSnapshotError
from lpstats.domain.services.impermanent_loss import (
    impermanent_loss_fraction,
    impermanent_loss_usd,
)


def _snapshot(reserve0: str, reserve1: str, *, date: int = 0) -> MarketSnapshot:
    return MarketSnapshot(
        date=date,
        reserve0=Decimal(reserve0),
        reserve1=Decimal(reserve1),
        reserve_usd=Decimal("20000"),
    )


def _swapped(snapshot: MarketSnapshot) -> MarketSnapshot:
    return MarketSnapshot(
        date=snapshot.date,
        reserve0=snapshot.reserve1,
        reserve1=snapshot.reserve0,
        reserve_usd=snapshot.reserve_usd,
    )


class ImpermanentLossTests(unittest.TestCase):
    def test_equal_exchange_rate_is_exactly_zero(self):
        start = _snapshot("1000", "10")
        end = _snapshot("2500", "25")
        self.assertEqual(impermanent_loss_fraction(start, end), Decimal("0"))

    def test_equal_rate_with_non_terminating_division_is_zero(self):
        start = _snapshot("10", "3")
        end = _snapshot("20", "6")
        self.assertEqual(impermanent_loss_fraction(start, end), Decimal("0"))

    def test_price_doubling_matches_closed_form(self):
        start = _snapshot("1000", "10")
        end = _snapshot("2000", "10")
        expected = Decimal("2") * Decimal("2").sqrt() / Decimal("3") - Decimal("1")
        self.assertEqual(impermanent_loss_fraction(start, end), expected)
        self.assertAlmostEqual(float(impermanent_loss_fraction(start, end)), -0.0571909584, places=9)

    def test_loss_is_never_positive(self):
        start = _snapshot("1000", "10")
        for reserve0, reserve1 in (("1", "10"), ("999", "10"), ("1001", "10"), ("50000", "3"), ("7", "7000")):
            with self.subTest(reserve0=reserve0, reserve1=reserve1):
                self.assertLessEqual(impermanent_loss_fraction(start, _snapshot(reserve0, reserve1)), 0)

    def test_symmetric_when_token_roles_are_swapped(self):
        start = _snapshot("1000", "10")
        end = _snapshot("1100", "9.09")
        direct = impermanent_loss_fraction(start, end)
        swapped = impermanent_loss_fraction(_swapped(start), _swapped(end))
        self.assertLess(abs(direct - swapped), Decimal("1e-20"))

    def test_usd_loss_scales_fraction(self):
        start = _snapshot("1000", "10")
        end = _snapshot("4000", "10")
        # price ratio 4 -> 2*2/5 - 1 = -0.2
        self.assertEqual(impermanent_loss_fraction(start, end), Decimal("-0.2"))
        self.assertEqual(impermanent_loss_usd(start, end, Decimal("2000")), Decimal("-400"))

    def test_zero_reserve_raises(self):
        with self.assertRaises(InvalidSnapshotError):
            impermanent_loss_fraction(_snapshot("1000", "0"), _snapshot("1000", "10"))
        with self.assertRaises(InvalidSnapshotError):
            impermanent_loss_fraction(_snapshot("1000", "10"), _snapshot("0", "10"))

    def test_negative_reserve_raises(self):
        with self.assertRaises(InvalidSnapshotError):
            impermanent_loss_fraction(_snapshot("1000", "10"), _snapshot("1000", "-1"))


if __name__ == "__main__":
    unittest.main()
