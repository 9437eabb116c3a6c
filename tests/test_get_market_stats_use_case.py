from __future__ import annotations

from decimal import Decimal
import unittest

from lpstats.application.dto.market_stats import GetMarketStatsInput, PairSeriesInput
from lpstats.application.use_cases.get_market_stats import GetMarketStatsUseCase
from lpstats.domain.entities.market_snapshot import MarketSnapshot
from lpstats.domain.entities.market_stats import SkipReason
from lpstats.domain.entities.pair import Pair, Token
from lpstats.domain.exceptions import InvalidReferencePriceError, ReferencePriceUnavailableError
from lpstats.infrastructure.clients.reference_price import ConfiguredReferencePriceProvider


DAY0 = 1704067200
DAY = 86400


class FakeReferencePricePort:
    def __init__(self, price: Decimal):
        self.price = price
        self.calls = 0

    def get_reference_price_usd(self) -> Decimal:
        self.calls += 1
        return self.price


def _pair(pair_id: str) -> Pair:
    return Pair(
        id=pair_id,
        token0=Token(symbol="WETH", decimals=18),
        token1=Token(symbol="USDT", decimals=6),
        reserve_usd=Decimal("50000"),
    )


def _snapshot(date: int, volume: str) -> MarketSnapshot:
    return MarketSnapshot(
        date=date,
        reserve0=Decimal("10"),
        reserve1=Decimal("20000"),
        reserve_usd=Decimal("50000"),
        daily_volume_usd=Decimal(volume),
    )


class GetMarketStatsUseCaseTests(unittest.TestCase):
    def _command(self, **overrides) -> GetMarketStatsInput:
        payload = {
            "pairs": [
                PairSeriesInput(
                    pair=_pair("0x1"),
                    series=[_snapshot(DAY0 + DAY, "200"), _snapshot(DAY0, "100")],
                ),
                PairSeriesInput(pair=_pair("0x2"), series=[_snapshot(DAY0, "100")]),
            ],
            "period": "daily",
            "reference_price_usd": None,
        }
        payload.update(overrides)
        return GetMarketStatsInput(**payload)

    def test_uses_port_price_when_not_provided(self):
        port = FakeReferencePricePort(Decimal("3000"))
        result = GetMarketStatsUseCase(reference_price_port=port).execute(self._command())

        self.assertEqual(port.calls, 1)
        self.assertEqual(result.reference_price_usd, Decimal("3000"))
        self.assertEqual([row.pair_id for row in result.stats], ["0x1"])
        self.assertEqual(result.stats[0].volume, Decimal("300"))
        self.assertEqual(result.stats[0].returns_eth, Decimal("0.0003"))
        self.assertEqual(result.skipped[0].reason, SkipReason.INSUFFICIENT_DATA)

    def test_command_price_takes_precedence(self):
        port = FakeReferencePricePort(Decimal("3000"))
        result = GetMarketStatsUseCase(reference_price_port=port).execute(
            self._command(reference_price_usd=Decimal("1500"))
        )

        self.assertEqual(port.calls, 0)
        self.assertEqual(result.stats[0].returns_eth, Decimal("0.0006"))

    def test_malformed_pair_series_does_not_abort_batch(self):
        port = FakeReferencePricePort(Decimal("3000"))
        command = self._command(
            pairs=[
                PairSeriesInput(pair=_pair("good"), series=[_snapshot(DAY0 + DAY, "50"), _snapshot(DAY0, "50")]),
                PairSeriesInput(pair=_pair("dup"), series=[_snapshot(DAY0, "10"), _snapshot(DAY0, "20")]),
                PairSeriesInput(pair=_pair("other"), series=[_snapshot(DAY0, "5"), _snapshot(DAY0 + DAY, "5")]),
            ]
        )

        result = GetMarketStatsUseCase(reference_price_port=port).execute(command)

        self.assertEqual([row.pair_id for row in result.stats], ["good", "other"])
        self.assertEqual(result.stats[0].volume, Decimal("100"))
        self.assertEqual([row.pair_id for row in result.skipped], ["dup"])
        self.assertEqual(result.skipped[0].reason, SkipReason.INVALID_SERIES)

    def test_non_positive_price_raises(self):
        port = FakeReferencePricePort(Decimal("0"))
        with self.assertRaises(InvalidReferencePriceError):
            GetMarketStatsUseCase(reference_price_port=port).execute(self._command())

    def test_unconfigured_provider_raises(self):
        use_case = GetMarketStatsUseCase(reference_price_port=ConfiguredReferencePriceProvider(None))
        with self.assertRaises(ReferencePriceUnavailableError):
            use_case.execute(self._command())

    def test_configured_provider_returns_price(self):
        provider = ConfiguredReferencePriceProvider(Decimal("2500"))
        self.assertEqual(provider.get_reference_price_usd(), Decimal("2500"))


if __name__ == "__main__":
    unittest.main()
