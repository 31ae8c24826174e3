"""Errors raised by the valuation domain."""
from __future__ import annotations


class ValuationError(Exception):
    """Base class for portfolio valuation failures."""


class InvalidArgumentError(ValuationError, ValueError):
    """Raised when the engine is handed missing or malformed input."""
