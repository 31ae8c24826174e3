"""Command-line entrypoint for portfolio valuation."""
from __future__ import annotations

import argparse
import logging
import sys
from datetime import date, datetime
from typing import Callable

from portfolio_valuer.application.use_cases import ValuationContext, ValuePortfolioUseCase
from portfolio_valuer.config import SETTINGS
from portfolio_valuer.domain.errors import ValuationError
from portfolio_valuer.domain.services import PortfolioEvaluator
from portfolio_valuer.infrastructure.repositories.file_repositories import (
    FileAssetRepository,
    FileFxRateRepository,
)
from portfolio_valuer.infrastructure.repositories.sample_repositories import (
    SampleAssetRepository,
    SampleFxRateRepository,
)
from portfolio_valuer.presentation.valuation_report import render_csv, render_text

logger = logging.getLogger(__name__)

PROMPT = "Enter valuation date (yyyy-MM-dd) or blank for today: "
RETRY_PROMPT = "Invalid date format. Please enter a valid date (yyyy-MM-dd) or leave blank for today: "
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(log_level: str = "WARNING") -> None:
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def parse_valuation_date(text: str) -> date:
    return datetime.strptime(text.strip(), SETTINGS.date_format).date()


def prompt_valuation_date(
    read: Callable[[str], str] = input,
    today: Callable[[], date] = date.today,
) -> date:
    """Ask for a valuation date until a valid one (or a blank line) is given."""
    prompt = PROMPT
    while True:
        try:
            raw = read(prompt)
        except EOFError:
            return today()
        if not raw.strip():
            return today()
        try:
            return parse_valuation_date(raw)
        except ValueError:
            prompt = RETRY_PROMPT


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Value a multi-currency portfolio in a single home currency")
    parser.add_argument("--assets", type=str, help="Path to assets CSV/XLSX file (default: bundled sample)")
    parser.add_argument("--fx-rates", type=str, help="Path to FX rates CSV/XLSX file (default: bundled sample)")
    parser.add_argument("--valuation-date", type=str, help="Valuation date (YYYY-MM-DD); prompts when omitted")
    parser.add_argument("--home-currency", type=str, default=SETTINGS.home_currency, help="Reporting currency")
    parser.add_argument(
        "--stale-days",
        type=int,
        default=SETTINGS.stale_rate_days,
        help="Warn when the selected FX rate is older than this many days",
    )
    parser.add_argument("--format", choices=["text", "csv"], default="text", help="Report output format")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Diagnostic log level",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging(args.log_level)

    if args.valuation_date:
        try:
            valuation_date = parse_valuation_date(args.valuation_date)
        except ValueError:
            print(f"Error: invalid valuation date {args.valuation_date!r}, expected YYYY-MM-DD")
            return 0
    else:
        valuation_date = prompt_valuation_date()

    try:
        asset_repo = (
            FileAssetRepository(args.assets, valuation_date=valuation_date)
            if args.assets
            else SampleAssetRepository(valuation_date)
        )
        fx_repo = FileFxRateRepository(args.fx_rates) if args.fx_rates else SampleFxRateRepository()
        context = ValuationContext(
            asset_repository=asset_repo,
            fx_rate_repository=fx_repo,
            evaluator=PortfolioEvaluator(home_currency=args.home_currency, stale_rate_days=args.stale_days),
        )
        report = ValuePortfolioUseCase(context).execute(valuation_date)
    except (ValuationError, ValueError, OSError) as exc:
        logger.debug("Valuation failed", exc_info=True)
        print(f"Error: {exc}")
        return 0

    if args.format == "csv":
        sys.stdout.write(render_csv(report).decode("utf-8"))
    else:
        print(render_text(report))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
