from dataclasses import FrozenInstanceError
from datetime import date, datetime
from decimal import Decimal

import pytest

from portfolio_valuer.domain.errors import InvalidArgumentError
from portfolio_valuer.domain.models import Asset, EvaluatedAsset, FxRate


def test_asset_normalizes_currency_date_and_amount():
    asset = Asset(name="Bund", currency=" eur ", amount="500000.50", valuation_date=datetime(2023, 5, 15, 13, 45))

    assert asset.currency == "EUR"
    assert asset.amount == Decimal("500000.50")
    assert asset.valuation_date == date(2023, 5, 15)
    assert not isinstance(asset.valuation_date, datetime)


def test_fx_rate_normalizes_fields():
    rate = FxRate(date=datetime(2023, 5, 12, 8, 0), currency="jpy", rate=0.0073)

    assert rate.currency == "JPY"
    assert rate.rate == Decimal("0.0073")
    assert rate.date == date(2023, 5, 12)


def test_blank_currency_is_rejected():
    with pytest.raises(InvalidArgumentError):
        FxRate(date=date(2023, 5, 12), currency="  ", rate=Decimal("1"))


def test_missing_date_is_rejected():
    with pytest.raises(InvalidArgumentError):
        Asset(name="Bund", currency="EUR", amount=Decimal("1"), valuation_date=None)


def test_non_numeric_amount_is_rejected():
    with pytest.raises(InvalidArgumentError):
        Asset(name="Bund", currency="EUR", amount="lots", valuation_date=date(2023, 5, 15))


def test_models_are_immutable():
    rate = FxRate(date=date(2023, 5, 12), currency="JPY", rate=Decimal("0.0073"))
    with pytest.raises(FrozenInstanceError):
        rate.rate = Decimal("1")


def test_evaluated_asset_exposes_asset_name_and_currency():
    asset = Asset(name="Bund", currency="eur", amount=Decimal("10"), valuation_date=date(2023, 5, 15))
    item = EvaluatedAsset(asset=asset, home_value=Decimal("11.2"), rate=Decimal("1.12"), rate_date=date(2023, 5, 15))

    assert item.name == "Bund"
    assert item.currency == "EUR"
    assert not item.stale
