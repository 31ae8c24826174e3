"""CSV/Excel-backed repositories for assets and FX observations."""
from __future__ import annotations

from datetime import date
from io import BytesIO
from pathlib import Path
from typing import Sequence

from portfolio_valuer.domain.models import Asset, FxRate
from portfolio_valuer.domain.repositories import AssetRepository, FxRateRepository
from portfolio_valuer.infrastructure.parsing.tables import table_to_assets, table_to_fx_rates
from portfolio_valuer.infrastructure.parsing.utils import ensure_bytes


class FileAssetRepository(AssetRepository):
    def __init__(self, source: BytesIO | Path | str | bytes, valuation_date: date | None = None) -> None:
        self._source = ensure_bytes(source)
        self._valuation_date = valuation_date

    def list_assets(self) -> Sequence[Asset]:
        return table_to_assets(BytesIO(self._source), default_valuation_date=self._valuation_date)


class FileFxRateRepository(FxRateRepository):
    def __init__(self, source: BytesIO | Path | str | bytes) -> None:
        self._source = ensure_bytes(source)

    def list_fx_rates(self) -> Sequence[FxRate]:
        return table_to_fx_rates(BytesIO(self._source))
