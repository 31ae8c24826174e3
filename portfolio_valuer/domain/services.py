"""Domain services implementing the FX valuation rules."""
from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from decimal import Context, Decimal, localcontext
from typing import Callable, Iterable, Sequence

from portfolio_valuer.config import SETTINGS

from .errors import InvalidArgumentError
from .models import Asset, EvaluatedAsset, FxRate, to_day
from .results import (
    MISSING_RATE,
    STALE_RATE,
    ValuationReport,
    ValuationSummary,
    ValuationWarning,
)

logger = logging.getLogger(__name__)

WarningSink = Callable[[ValuationWarning], None]


def log_warning(warning: ValuationWarning) -> None:
    logger.warning(warning.message)


class PortfolioEvaluator:
    """Converts multi-currency assets into a single home currency.

    For every foreign-currency asset the most recent FX observation dated on or
    before the valuation date is used. Assets without such an observation are
    left out of the result; assets valued with an observation older than
    ``stale_rate_days`` are kept but reported through the warning sink.
    """

    def __init__(
        self,
        home_currency: str | None = None,
        stale_rate_days: int | None = None,
        warning_sink: WarningSink | None = None,
        decimal_context: Context | None = None,
    ) -> None:
        if home_currency is None:
            home_currency = SETTINGS.home_currency
        if stale_rate_days is None:
            stale_rate_days = SETTINGS.stale_rate_days
        if stale_rate_days < 0:
            raise InvalidArgumentError(f"Stale rate threshold must be non-negative, got {stale_rate_days}")
        self._home_currency = home_currency.strip().upper()
        self._stale_rate_days = stale_rate_days
        self._warning_sink = warning_sink or log_warning
        self._context = decimal_context or SETTINGS.decimal_context

    @property
    def home_currency(self) -> str:
        return self._home_currency

    @property
    def stale_rate_days(self) -> int:
        return self._stale_rate_days

    def select_latest_rates(
        self, fx_rates: Iterable[FxRate] | None, valuation_date: date | datetime
    ) -> dict[str, FxRate]:
        if fx_rates is None:
            raise InvalidArgumentError("FX rates cannot be null")
        valuation_date = to_day(valuation_date)

        latest: dict[str, FxRate] = {}
        for rate in fx_rates:
            if rate.date > valuation_date:
                continue
            current = latest.get(rate.currency)
            # first observation wins on equal dates
            if current is None or rate.date > current.date:
                latest[rate.currency] = rate
        return latest

    def evaluate(
        self,
        assets: Iterable[Asset] | None,
        fx_rates: Iterable[FxRate] | None,
        valuation_date: date | datetime,
        warning_sink: WarningSink | None = None,
    ) -> list[EvaluatedAsset]:
        if assets is None or fx_rates is None:
            raise InvalidArgumentError("Assets and FX rates cannot be null")
        valuation_date = to_day(valuation_date)
        emit = warning_sink or self._warning_sink

        latest_rates = self.select_latest_rates(fx_rates, valuation_date)
        evaluated: list[EvaluatedAsset] = []

        for asset in assets:
            if asset.currency == self._home_currency:
                evaluated.append(
                    EvaluatedAsset(
                        asset=asset,
                        home_value=asset.amount,
                        rate=Decimal("1"),
                        rate_date=valuation_date,
                    )
                )
                continue

            rate = latest_rates.get(asset.currency)
            if rate is None:
                emit(
                    ValuationWarning(
                        issue_type=MISSING_RATE,
                        currency=asset.currency,
                        message=f"No FX rate available for {asset.currency}",
                        asset_name=asset.name,
                    )
                )
                continue

            stale = self._is_stale(rate, valuation_date)
            if stale:
                emit(
                    ValuationWarning(
                        issue_type=STALE_RATE,
                        currency=asset.currency,
                        message=(
                            f"Stale FX rate for {asset.currency} "
                            f"(as of {rate.date.isoformat()}, needed for {valuation_date.isoformat()})"
                        ),
                        rate_date=rate.date,
                        asset_name=asset.name,
                    )
                )

            with localcontext(self._context):
                home_value = asset.amount * rate.rate
            evaluated.append(
                EvaluatedAsset(
                    asset=asset,
                    home_value=home_value,
                    rate=rate.rate,
                    rate_date=rate.date,
                    stale=stale,
                )
            )

        return sorted(evaluated, key=lambda item: item.home_value, reverse=True)

    def calculate_total_value(self, evaluated_assets: Iterable[EvaluatedAsset]) -> Decimal:
        with localcontext(self._context):
            return sum((item.home_value for item in evaluated_assets), Decimal("0"))

    def appraise(
        self,
        assets: Sequence[Asset] | None,
        fx_rates: Sequence[FxRate] | None,
        valuation_date: date | datetime,
    ) -> ValuationReport:
        """Evaluate, total and summarize a portfolio in one pass."""
        if assets is None or fx_rates is None:
            raise InvalidArgumentError("Assets and FX rates cannot be null")
        assets = list(assets)
        warnings: list[ValuationWarning] = []

        def collect(warning: ValuationWarning) -> None:
            warnings.append(warning)
            self._warning_sink(warning)

        items = self.evaluate(assets, fx_rates, valuation_date, warning_sink=collect)
        summary = ValuationSummary(
            total_assets=len(assets),
            valued_assets=len(items),
            missing_rates=self._count(warnings, MISSING_RATE),
            stale_rates=self._count(warnings, STALE_RATE),
            generated_at=datetime.now(timezone.utc),
        )
        return ValuationReport(
            valuation_date=to_day(valuation_date),
            home_currency=self._home_currency,
            items=tuple(items),
            total=self.calculate_total_value(items),
            summary=summary,
            warnings=tuple(warnings),
        )

    def _is_stale(self, rate: FxRate, valuation_date: date) -> bool:
        return (valuation_date - rate.date).days > self._stale_rate_days

    @staticmethod
    def _count(warnings: Sequence[ValuationWarning], issue_type: str) -> int:
        return len([w for w in warnings if w.issue_type == issue_type])
