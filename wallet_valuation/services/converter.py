"""Token-to-token amount conversion through USD prices."""
from __future__ import annotations

import logging
import math
from typing import Mapping

from ..errors import InputError, MissingPriceError
from .price_cache import PriceCache

logger = logging.getLogger(__name__)

CONVERSION_DECIMALS = 6


def parse_amount(amount: str) -> float:
    """Parse a user-entered amount; it must be a finite positive number.

    Digit-group underscores (``"1_000"``) are not accepted.
    """
    if isinstance(amount, str) and "_" in amount:
        raise InputError(f"Amount is not a number: {amount!r}")
    try:
        value = float(amount)
    except (TypeError, ValueError) as e:
        raise InputError(f"Amount is not a number: {amount!r}") from e
    if not math.isfinite(value) or value <= 0:
        raise InputError(f"Amount must be a finite positive number: {amount!r}")
    return value


def _price_of(prices: Mapping[str, float], currency: str) -> float:
    price = prices.get(currency)
    # Zero or negative prices cannot be divided through.
    if price is None or not price > 0:
        raise MissingPriceError(currency)
    return price


def convert_with_prices(
    prices: Mapping[str, float], from_token: str, to_token: str, amount: str
) -> str:
    """Convert ``amount`` of ``from_token`` into ``to_token`` using ``prices``.

    Returns ``""`` when the amount is not a positive number and the original
    ``amount`` when either price is unknown.
    """
    try:
        value = parse_amount(amount)
    except InputError as e:
        logger.debug("No conversion: %s", e)
        return ""

    if from_token == to_token:
        return amount

    try:
        from_price = _price_of(prices, from_token)
        to_price = _price_of(prices, to_token)
    except MissingPriceError as e:
        logger.debug("Passing amount through unconverted: %s", e)
        return amount

    return f"{value * from_price / to_price:.{CONVERSION_DECIMALS}f}"


class CurrencyConverter:
    """Convert amounts between tokens using prices from a ``PriceCache``."""

    def __init__(self, cache: PriceCache) -> None:
        self._cache = cache

    async def convert(self, from_token: str, to_token: str, amount: str) -> str:
        try:
            parse_amount(amount)
        except InputError:
            return ""
        if from_token == to_token:
            return amount

        prices = await self._cache.get_prices()
        return convert_with_prices(prices, from_token, to_token, amount)


class LatestConversion:
    """Keep only the result of the most recent conversion request.

    Call :meth:`update` whenever the amount or either token changes. A request
    that finishes after a newer one was issued is discarded: it returns
    ``None`` and leaves :attr:`result` untouched.
    """

    def __init__(self, converter: CurrencyConverter) -> None:
        self._converter = converter
        self._generation = 0
        self.result = ""

    async def update(self, from_token: str, to_token: str, amount: str) -> str | None:
        self._generation += 1
        generation = self._generation

        converted = await self._converter.convert(from_token, to_token, amount)

        if generation != self._generation:
            logger.debug("Discarding stale conversion for %s %s->%s", amount, from_token, to_token)
            return None
        self.result = converted
        return converted
