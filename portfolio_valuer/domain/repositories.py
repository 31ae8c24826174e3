"""Repository interfaces anchoring the domain layer."""
from __future__ import annotations

from typing import Protocol, Sequence

from .models import Asset, FxRate


class AssetRepository(Protocol):
    """Provides the holdings to be valued."""

    def list_assets(self) -> Sequence[Asset]:
        ...


class FxRateRepository(Protocol):
    """Provides dated FX observations quoted against the home currency."""

    def list_fx_rates(self) -> Sequence[FxRate]:
        ...
