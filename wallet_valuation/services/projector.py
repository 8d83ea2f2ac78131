"""Turn ranked balances into display rows."""
from __future__ import annotations

import logging
import math
from typing import Iterable, Mapping

from ..errors import MissingPriceError
from ..models import DisplayRow, RankedBalance

logger = logging.getLogger(__name__)

DISPLAY_DECIMALS = 2


def format_amount(amount: float) -> str:
    return f"{amount:.{DISPLAY_DECIMALS}f}"


def usd_value(currency: str, amount: float, prices: Mapping[str, float]) -> float:
    """Return ``price * amount``; raises MissingPriceError with no usable price."""
    price = prices.get(currency)
    if isinstance(price, bool) or not isinstance(price, (int, float)) or not math.isfinite(price):
        raise MissingPriceError(currency)
    return price * amount


def project(balance: RankedBalance, prices: Mapping[str, float]) -> DisplayRow:
    """Build the display row for one balance. A missing price values it at 0."""
    try:
        value = usd_value(balance.currency, balance.amount, prices)
    except MissingPriceError as e:
        logger.warning("%s", e)
        value = 0.0

    return DisplayRow(
        currency=balance.currency,
        amount=balance.amount,
        blockchain=balance.blockchain,
        priority=balance.priority,
        formatted_amount=format_amount(balance.amount),
        usd_value=value,
    )


def project_rows(
    balances: Iterable[RankedBalance], prices: Mapping[str, float]
) -> dict[str, DisplayRow]:
    """Project every balance, keyed by currency in ranked order.

    Currencies are expected to be unique; a duplicate replaces the earlier
    row's value but keeps its position.
    """
    rows: dict[str, DisplayRow] = {}
    for balance in balances:
        rows[balance.currency] = project(balance, prices)
    return rows
