from datetime import date
from decimal import Decimal

from portfolio_valuer.domain.models import Asset
from portfolio_valuer.domain.services import PortfolioEvaluator
from portfolio_valuer.infrastructure.repositories.sample_repositories import (
    SampleAssetRepository,
    SampleFxRateRepository,
)
from portfolio_valuer.presentation.valuation_report import (
    format_amount,
    render_csv,
    render_text,
    report_to_rows,
)


def make_sample_report():
    evaluator = PortfolioEvaluator(warning_sink=lambda warning: None)
    return evaluator.appraise(
        SampleAssetRepository().list_assets(),
        SampleFxRateRepository().list_fx_rates(),
        date(2023, 5, 15),
    )


def test_format_amount():
    assert format_amount(Decimal("1095000.0000")) == "1,095,000.00"
    assert format_amount(Decimal("0")) == "0.00"


def test_render_text_matches_console_layout():
    lines = render_text(make_sample_report()).splitlines()

    assert lines[1] == "Asset Valuation Report"
    assert lines[2] == "As of 2023-05-15 in USD"
    assert lines[3] == "Name".ljust(25) + "Currency".ljust(10) + "Amount".ljust(15) + "Value in USD".ljust(15) + "Rate Date"
    assert lines[4] == (
        "Tokyo Office".ljust(25)
        + "JPY".ljust(10)
        + "150,000,000.00".ljust(15)
        + "1,095,000.00".ljust(15)
        + "2023-05-12"
    )
    assert lines[5].startswith("NYC Treasury")
    assert lines[5].endswith("2023-05-15")
    assert lines[-1] == "Total Portfolio Value: 2,967,500.00 USD"


def test_rows_carry_rate_and_staleness():
    rows = report_to_rows(make_sample_report())

    berlin = next(row for row in rows if row["name"] == "Berlin Bonds")
    assert berlin["rate"] == "1.12"
    assert berlin["rate_date"] == "2023-05-11"
    assert berlin["stale"] == "yes"
    assert set(berlin) == {"name", "currency", "amount", "value_usd", "rate", "rate_date", "stale"}


def test_render_csv():
    payload = render_csv(make_sample_report()).decode("utf-8").splitlines()

    assert payload[0] == "name,currency,amount,value_usd,rate,rate_date,stale"
    assert payload[1].startswith("Tokyo Office,JPY,150000000,")
    assert len(payload) == 5


def test_render_csv_of_empty_report():
    evaluator = PortfolioEvaluator(warning_sink=lambda warning: None)
    report = evaluator.appraise([Asset("Loonie", "CAD", Decimal("1"), date(2023, 5, 15))], [], date(2023, 5, 15))

    assert render_csv(report) == b""
    assert render_text(report).splitlines()[-1] == "Total Portfolio Value: 0.00 USD"
