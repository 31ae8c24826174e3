"""CSV / Excel parsers producing canonical assets and FX observations."""
from __future__ import annotations

import logging
from datetime import date
from io import BytesIO
from pathlib import Path
from typing import Sequence

import pandas as pd

from portfolio_valuer.domain.models import Asset, FxRate
from portfolio_valuer.infrastructure.parsing.utils import (
    ensure_bytes,
    find_column,
    is_excel,
    parse_currency,
    parse_date,
    parse_decimal,
    parse_text,
)

logger = logging.getLogger(__name__)

NAME_COLUMNS = ["Name", "Asset", "Asset Name"]
CURRENCY_COLUMNS = ["Currency", "Ccy", "Currency Code"]
AMOUNT_COLUMNS = ["Amount", "Quantity", "Market Value"]
VALUATION_DATE_COLUMNS = ["Valuation Date", "Valuation_Date", "As Of"]
RATE_DATE_COLUMNS = ["Date", "Rate Date", "Value Date"]
RATE_COLUMNS = ["Rate", "FX Rate", "Fx_Rate"]


def read_table(source: BytesIO | Path | str | bytes) -> pd.DataFrame:
    raw = ensure_bytes(source)
    if is_excel(raw):
        return pd.read_excel(BytesIO(raw), engine="openpyxl", dtype=str)
    return pd.read_csv(BytesIO(raw), dtype=str, keep_default_na=False, skipinitialspace=True)


def _require(df: pd.DataFrame, candidates: Sequence[str], what: str) -> str:
    column = find_column(df, candidates)
    if column is None:
        raise ValueError(f"Missing {what} column; expected one of {', '.join(candidates)}")
    return column


def table_to_assets(
    source: BytesIO | Path | str | bytes,
    default_valuation_date: date | None = None,
) -> Sequence[Asset]:
    df = read_table(source)
    name_col = _require(df, NAME_COLUMNS, "asset name")
    currency_col = _require(df, CURRENCY_COLUMNS, "currency")
    amount_col = _require(df, AMOUNT_COLUMNS, "amount")
    date_col = find_column(df, VALUATION_DATE_COLUMNS)
    fallback_date = default_valuation_date or date.today()

    assets: list[Asset] = []
    for idx, row in df.iterrows():
        name = parse_text(row.get(name_col))
        currency = parse_currency(row.get(currency_col))
        amount = parse_decimal(row.get(amount_col))
        valuation_date = parse_date(row.get(date_col)) if date_col else None
        if not currency or amount is None:
            logger.warning("Skipping asset row=%s: currency=%r amount=%r", idx, currency, row.get(amount_col))
            continue
        assets.append(
            Asset(
                name=name or f"row={idx}",
                currency=currency,
                amount=amount,
                valuation_date=valuation_date or fallback_date,
            )
        )
    return assets


def table_to_fx_rates(source: BytesIO | Path | str | bytes) -> Sequence[FxRate]:
    df = read_table(source)
    date_col = _require(df, RATE_DATE_COLUMNS, "rate date")
    currency_col = _require(df, CURRENCY_COLUMNS, "currency")
    rate_col = _require(df, RATE_COLUMNS, "rate")

    rates: list[FxRate] = []
    for idx, row in df.iterrows():
        rate_date = parse_date(row.get(date_col))
        currency = parse_currency(row.get(currency_col))
        rate = parse_decimal(row.get(rate_col))
        if rate_date is None or not currency or rate is None:
            logger.warning("Skipping FX row=%s: date=%r currency=%r rate=%r", idx, row.get(date_col), currency, row.get(rate_col))
            continue
        rates.append(FxRate(date=rate_date, currency=currency, rate=rate))
    return rates
