"""Application services orchestrating the valuation workflow."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from portfolio_valuer.domain.repositories import AssetRepository, FxRateRepository
from portfolio_valuer.domain.results import ValuationReport
from portfolio_valuer.domain.services import PortfolioEvaluator

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ValuationContext:
    asset_repository: AssetRepository
    fx_rate_repository: FxRateRepository
    evaluator: PortfolioEvaluator


class ValuePortfolioUseCase:
    def __init__(self, context: ValuationContext) -> None:
        self._context = context

    def execute(self, valuation_date: date) -> ValuationReport:
        assets = self._context.asset_repository.list_assets()
        fx_rates = self._context.fx_rate_repository.list_fx_rates()
        logger.debug("Valuing %d assets against %d FX observations", len(assets), len(fx_rates))
        return self._context.evaluator.appraise(assets, fx_rates, valuation_date)
