"""Streamlit front-end for the portfolio valuation pipeline."""
from __future__ import annotations

from datetime import date
from io import BytesIO
from typing import Sequence

import pandas as pd
import streamlit as st

from portfolio_valuer import (
    FileAssetRepository,
    FileFxRateRepository,
    PortfolioEvaluator,
    SampleAssetRepository,
    SampleFxRateRepository,
    ValuationContext,
    ValuationError,
    ValuePortfolioUseCase,
)
from portfolio_valuer.config import SETTINGS
from portfolio_valuer.domain.models import FxRate
from portfolio_valuer.domain.results import ValuationReport
from portfolio_valuer.presentation.valuation_report import format_amount, render_csv, report_to_rows


st.set_page_config(page_title="Portfolio Valuer", layout="wide")
st.title("FX Portfolio Valuation")


def fx_rates_to_dataframe(rates: Sequence[FxRate]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"date": r.date, "currency": r.currency, "rate": r.rate} for r in rates],
        columns=["date", "currency", "rate"],
    )


def run_valuation(
    assets_bytes: bytes | None,
    rates_bytes: bytes | None,
    valuation_date: date,
    home_currency: str,
    stale_days: int,
) -> tuple[ValuationReport, Sequence[FxRate]]:
    asset_repo = (
        FileAssetRepository(BytesIO(assets_bytes), valuation_date=valuation_date)
        if assets_bytes
        else SampleAssetRepository(valuation_date)
    )
    fx_repo = FileFxRateRepository(BytesIO(rates_bytes)) if rates_bytes else SampleFxRateRepository()
    context = ValuationContext(
        asset_repository=asset_repo,
        fx_rate_repository=fx_repo,
        evaluator=PortfolioEvaluator(home_currency=home_currency, stale_rate_days=stale_days),
    )
    return ValuePortfolioUseCase(context).execute(valuation_date), fx_repo.list_fx_rates()


col1, col2 = st.columns(2)
with col1:
    assets_file = st.file_uploader("Upload assets file (blank for sample)", type=["csv", "xlsx"])
with col2:
    rates_file = st.file_uploader("Upload FX rates file (blank for sample)", type=["csv", "xlsx"])

col3, col4, col5 = st.columns(3)
with col3:
    valuation_date = st.date_input("Valuation date", value=SETTINGS.sample_valuation_date)
with col4:
    home_currency = st.text_input("Home currency", value=SETTINGS.home_currency)
with col5:
    stale_days = st.number_input("Stale after (days)", min_value=0, value=SETTINGS.stale_rate_days, step=1)

if st.button("Run Valuation"):
    try:
        with st.spinner("Valuing..."):
            report, fx_rates = run_valuation(
                assets_file.read() if assets_file else None,
                rates_file.read() if rates_file else None,
                valuation_date,
                home_currency,
                int(stale_days),
            )
    except (ValuationError, ValueError) as exc:
        st.error(f"Error: {exc}")
    else:
        st.session_state["report"] = report
        st.session_state["fx_rates"] = fx_rates

report: ValuationReport | None = st.session_state.get("report")
if report is not None:
    st.subheader(f"As of {report.valuation_date.isoformat()} in {report.home_currency}")
    summary = report.summary
    st.metric("Total portfolio value", f"{format_amount(report.total)} {report.home_currency}")
    st.metric("Assets valued", f"{summary.valued_assets} / {summary.total_assets}")
    st.metric("Missing rates", summary.missing_rates)
    st.metric("Stale rates", summary.stale_rates)

    for warning in report.iter_warnings():
        st.warning(warning.message)

    tabs = st.tabs(["Valuation", "FX rates"])
    with tabs[0]:
        st.dataframe(pd.DataFrame(report_to_rows(report)))
        st.download_button(
            "Download valuation CSV",
            data=render_csv(report),
            file_name=f"valuation_{report.valuation_date.isoformat()}.csv",
            mime="text/csv",
        )
    with tabs[1]:
        st.dataframe(fx_rates_to_dataframe(st.session_state.get("fx_rates", ())))
