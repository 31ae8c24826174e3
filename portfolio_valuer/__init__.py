"""Multi-currency portfolio valuation toolkit."""
from portfolio_valuer.application.use_cases import ValuationContext, ValuePortfolioUseCase
from portfolio_valuer.domain.errors import InvalidArgumentError, ValuationError
from portfolio_valuer.domain.models import Asset, EvaluatedAsset, FxRate
from portfolio_valuer.domain.services import PortfolioEvaluator
from portfolio_valuer.infrastructure.repositories.file_repositories import (
    FileAssetRepository,
    FileFxRateRepository,
)
from portfolio_valuer.infrastructure.repositories.sample_repositories import (
    SampleAssetRepository,
    SampleFxRateRepository,
)

__all__ = [
    "Asset",
    "EvaluatedAsset",
    "FxRate",
    "InvalidArgumentError",
    "ValuationError",
    "PortfolioEvaluator",
    "ValuePortfolioUseCase",
    "ValuationContext",
    "FileAssetRepository",
    "FileFxRateRepository",
    "SampleAssetRepository",
    "SampleFxRateRepository",
]
