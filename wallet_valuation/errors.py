"""Error taxonomy. None of these escape the core as a crash."""
from __future__ import annotations


class ValuationError(Exception):
    """Base class for recoverable valuation errors."""


class InputError(ValuationError):
    """Balance input or conversion amount is malformed."""


class MissingPriceError(ValuationError):
    """No usable price is cached for a currency."""

    def __init__(self, currency: str) -> None:
        super().__init__(f"No price available for currency: {currency}")
        self.currency = currency


class SourceUnavailableError(ValuationError):
    """The remote price source could not be reached or returned garbage."""
