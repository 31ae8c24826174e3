"""Domain-level results for portfolio valuation."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, Sequence

from .models import EvaluatedAsset

MISSING_RATE = "missing_rate"
STALE_RATE = "stale_rate"


@dataclass(frozen=True)
class ValuationWarning:
    """A non-fatal anomaly met while valuing one asset."""

    issue_type: str
    currency: str
    message: str
    rate_date: date | None = None
    asset_name: str | None = None


@dataclass(frozen=True)
class ValuationSummary:
    total_assets: int
    valued_assets: int
    missing_rates: int
    stale_rates: int
    generated_at: datetime


@dataclass(frozen=True)
class ValuationReport:
    valuation_date: date
    home_currency: str
    items: Sequence[EvaluatedAsset]
    total: Decimal
    summary: ValuationSummary
    warnings: Sequence[ValuationWarning] = field(default_factory=tuple)

    def has_issues(self) -> bool:
        return any([self.summary.missing_rates, self.summary.stale_rates])

    def iter_warnings(self, issue_type: str | None = None) -> Iterable[ValuationWarning]:
        for warning in self.warnings:
            if issue_type is None or warning.issue_type == issue_type:
                yield warning
