"""Text and CSV renderers for valuation reports."""
from __future__ import annotations

import csv
import io
from decimal import Decimal

from portfolio_valuer.domain.results import ValuationReport


def format_amount(value: Decimal) -> str:
    return f"{value:,.2f}"


def report_to_rows(report: ValuationReport) -> list[dict[str, str]]:
    rows: list[dict[str, str]] = []
    for item in report.items:
        rows.append(
            {
                "name": item.name,
                "currency": item.currency,
                "amount": str(item.asset.amount),
                f"value_{report.home_currency.lower()}": str(item.home_value),
                "rate": str(item.rate),
                "rate_date": item.rate_date.isoformat(),
                "stale": "yes" if item.stale else "no",
            }
        )
    return rows


def render_text(report: ValuationReport) -> str:
    home = report.home_currency
    lines = [
        "",
        "Asset Valuation Report",
        f"As of {report.valuation_date.isoformat()} in {home}",
        "Name".ljust(25) + "Currency".ljust(10) + "Amount".ljust(15) + f"Value in {home}".ljust(15) + "Rate Date",
    ]
    for item in report.items:
        lines.append(
            item.name.ljust(25)
            + item.currency.ljust(10)
            + format_amount(item.asset.amount).ljust(15)
            + format_amount(item.home_value).ljust(15)
            + item.rate_date.isoformat()
        )
    lines.append(f"Total Portfolio Value: {format_amount(report.total)} {home}")
    return "\n".join(lines)


def render_csv(report: ValuationReport) -> bytes:
    rows = report_to_rows(report)
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=list(rows[0].keys()) if rows else [])
    if rows:
        writer.writeheader()
        writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")
