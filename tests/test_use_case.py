from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Sequence

from portfolio_valuer.application.use_cases import ValuationContext, ValuePortfolioUseCase
from portfolio_valuer.domain.models import Asset, FxRate
from portfolio_valuer.domain.results import STALE_RATE
from portfolio_valuer.domain.services import PortfolioEvaluator
from portfolio_valuer.infrastructure.repositories.sample_repositories import (
    SampleAssetRepository,
    SampleFxRateRepository,
)


@dataclass
class StaticAssets:
    assets: Sequence[Asset]

    def list_assets(self) -> Sequence[Asset]:
        return self.assets


@dataclass
class StaticRates:
    rates: Sequence[FxRate]

    def list_fx_rates(self) -> Sequence[FxRate]:
        return self.rates


def make_use_case(asset_repository, fx_rate_repository, warnings: list) -> ValuePortfolioUseCase:
    context = ValuationContext(
        asset_repository=asset_repository,
        fx_rate_repository=fx_rate_repository,
        evaluator=PortfolioEvaluator(warning_sink=warnings.append),
    )
    return ValuePortfolioUseCase(context)


def test_sample_portfolio_end_to_end():
    warnings: list = []
    use_case = make_use_case(SampleAssetRepository(), SampleFxRateRepository(), warnings)

    report = use_case.execute(date(2023, 5, 15))

    assert [item.asset.name for item in report.items] == [
        "Tokyo Office",
        "NYC Treasury",
        "Berlin Bonds",
        "London Stock",
    ]
    values = {item.asset.name: item.home_value for item in report.items}
    assert values["Tokyo Office"] == Decimal("1095000")
    assert values["NYC Treasury"] == Decimal("1000000")
    assert values["Berlin Bonds"] == Decimal("560000")
    assert values["London Stock"] == Decimal("312500")
    assert report.total == Decimal("2967500")

    rate_dates = {item.asset.name: item.rate_date for item in report.items}
    assert rate_dates["Tokyo Office"] == date(2023, 5, 12)
    assert rate_dates["Berlin Bonds"] == date(2023, 5, 11)
    assert rate_dates["London Stock"] == date(2023, 5, 14)
    assert rate_dates["NYC Treasury"] == date(2023, 5, 15)

    assert [w.issue_type for w in warnings] == [STALE_RATE]
    assert warnings[0].currency == "EUR"
    assert [item.asset.name for item in report.items if item.stale] == ["Berlin Bonds"]


def test_sample_portfolio_before_any_gbp_rate():
    warnings: list = []
    use_case = make_use_case(SampleAssetRepository(date(2023, 5, 13)), SampleFxRateRepository(), warnings)

    report = use_case.execute(date(2023, 5, 13))

    assert "London Stock" not in {item.asset.name for item in report.items}
    assert report.summary.missing_rates == 1
    assert report.summary.stale_rates == 0
    assert report.total == Decimal("1095000") + Decimal("1000000") + Decimal("560000")


def test_use_case_with_static_repositories():
    warnings: list = []
    assets = StaticAssets([Asset("Cash", "usd", Decimal("5"), date(2024, 1, 2))])
    rates = StaticRates([])

    report = make_use_case(assets, rates, warnings).execute(date(2024, 1, 2))

    assert report.total == Decimal("5")
    assert not report.has_issues()
    assert warnings == []
