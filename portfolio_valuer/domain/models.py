"""Domain models for the FX valuation pipeline.

These dataclasses capture the canonical shape of assets, FX observations and
the per-asset results produced by the valuation engine. All of them are
immutable; construction normalizes currency codes to upper case and dates to
day granularity so that later comparisons never have to.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from .errors import InvalidArgumentError


def to_day(value: date | datetime | None) -> date:
    """Strip any time-of-day component from ``value``."""
    if value is None:
        raise InvalidArgumentError("Date cannot be null")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise InvalidArgumentError(f"Unsupported date value: {value!r}")


def normalize_currency(value: str | None) -> str:
    code = "" if value is None else str(value).strip().upper()
    if not code:
        raise InvalidArgumentError("Currency code cannot be empty")
    return code


def to_decimal(value: object) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if value is None or isinstance(value, bool):
        raise InvalidArgumentError(f"Not a decimal quantity: {value!r}")
    try:
        return Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise InvalidArgumentError(f"Not a decimal quantity: {value!r}") from exc


@dataclass(frozen=True)
class Asset:
    """A holding denominated in a single currency, valued as of one date."""

    name: str
    currency: str
    amount: Decimal
    valuation_date: date

    def __post_init__(self) -> None:
        object.__setattr__(self, "currency", normalize_currency(self.currency))
        object.__setattr__(self, "amount", to_decimal(self.amount))
        object.__setattr__(self, "valuation_date", to_day(self.valuation_date))


@dataclass(frozen=True)
class FxRate:
    """Home-currency value of one unit of ``currency`` observed on ``date``."""

    date: date
    currency: str
    rate: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "date", to_day(self.date))
        object.__setattr__(self, "currency", normalize_currency(self.currency))
        object.__setattr__(self, "rate", to_decimal(self.rate))


@dataclass(frozen=True)
class EvaluatedAsset:
    """An asset paired with its value in the home currency."""

    asset: Asset
    home_value: Decimal
    rate: Decimal
    rate_date: date
    stale: bool = False

    @property
    def name(self) -> str:
        return self.asset.name

    @property
    def currency(self) -> str:
        return self.asset.currency
