"""In-memory repositories serving the bundled demonstration portfolio."""
from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Sequence

from portfolio_valuer.config import SETTINGS
from portfolio_valuer.domain.models import Asset, FxRate
from portfolio_valuer.domain.repositories import AssetRepository, FxRateRepository

SAMPLE_ASSETS = [
    ("Tokyo Office", "JPY", Decimal("150000000")),
    ("Berlin Bonds", "EUR", Decimal("500000")),
    ("London Stock", "GBP", Decimal("250000")),
    ("NYC Treasury", "USD", Decimal("1000000")),
]

SAMPLE_FX_RATES = [
    (date(2023, 5, 10), "JPY", Decimal("0.0075")),
    (date(2023, 5, 12), "JPY", Decimal("0.0073")),
    (date(2023, 5, 11), "EUR", Decimal("1.12")),
    (date(2023, 5, 10), "EUR", Decimal("1.15")),
    (date(2023, 5, 14), "GBP", Decimal("1.25")),
    (date(2023, 4, 1), "CAD", Decimal("0.75")),
]


class SampleAssetRepository(AssetRepository):
    def __init__(self, valuation_date: date | None = None) -> None:
        self._valuation_date = valuation_date or SETTINGS.sample_valuation_date

    def list_assets(self) -> Sequence[Asset]:
        return [
            Asset(name=name, currency=currency, amount=amount, valuation_date=self._valuation_date)
            for name, currency, amount in SAMPLE_ASSETS
        ]


class SampleFxRateRepository(FxRateRepository):
    def list_fx_rates(self) -> Sequence[FxRate]:
        return [FxRate(date=day, currency=currency, rate=rate) for day, currency, rate in SAMPLE_FX_RATES]
