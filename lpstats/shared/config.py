from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _decimal_or_none(name: str) -> Decimal | None:
    value = (_env(name) or "").strip()
    if not value:
        return None
    return Decimal(value)


def _csv(name: str, default: str) -> list[str]:
    value = _env(name, default) or ""
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    fee_ratio: Decimal
    decimal_precision: int
    reference_price_usd: Decimal | None
    cors_origins: list[str]
    log_level: str


def get_settings() -> Settings:
    return Settings(
        fee_ratio=Decimal(_env("FEE_RATIO", "0.003")),
        decimal_precision=int(_env("DECIMAL_PRECISION", "50")),
        reference_price_usd=_decimal_or_none("REFERENCE_PRICE_USD"),
        cors_origins=_csv("CORS_ORIGINS", "*"),
        log_level=(_env("LOG_LEVEL", "INFO") or "INFO").upper(),
    )
