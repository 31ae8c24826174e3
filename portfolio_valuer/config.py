"""Central configuration for the portfolio valuer package."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Context

HOME_CURRENCY = "USD"
STALE_RATE_DAYS = 3


@dataclass(slots=True, frozen=True)
class Settings:
    home_currency: str
    stale_rate_days: int
    decimal_context: Context
    date_format: str
    sample_valuation_date: date


SETTINGS = Settings(
    home_currency=HOME_CURRENCY,
    stale_rate_days=STALE_RATE_DAYS,
    decimal_context=Context(prec=28),
    date_format="%Y-%m-%d",
    sample_valuation_date=date(2023, 5, 15),
)
