"""Filter and sort raw wallet balances by blockchain priority."""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from ..errors import InputError
from ..models import RankedBalance, WalletBalance
from .priority import MIN_VALID_PRIORITY, priority_of

logger = logging.getLogger(__name__)

MIN_VALID_AMOUNT = 0


def _coerce_balance(raw: Any) -> WalletBalance:
    """Build a WalletBalance from a model instance or a decoded JSON object."""
    if isinstance(raw, WalletBalance):
        currency, amount, blockchain = raw.currency, raw.amount, raw.blockchain
    elif isinstance(raw, Mapping):
        currency = raw.get("currency")
        amount = raw.get("amount")
        blockchain = raw.get("blockchain")
    else:
        raise InputError(f"Balance entry is not an object: {raw!r}")

    if not isinstance(currency, str) or not isinstance(blockchain, str):
        raise InputError(f"Balance entry missing currency/blockchain: {raw!r}")
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise InputError(f"Balance entry has non-numeric amount: {raw!r}")

    if isinstance(raw, WalletBalance):
        return raw
    return WalletBalance(currency=currency, amount=amount, blockchain=blockchain)


def _validate_input(balances: Any) -> Sequence[Any]:
    if isinstance(balances, (str, bytes, Mapping)) or not isinstance(balances, Sequence):
        raise InputError(f"Invalid balances input: expected a list, got {type(balances).__name__}")
    return balances


def rank(balances: Any) -> list[RankedBalance]:
    """Return the displayable balances, highest priority and amount first.

    A balance is displayable when its blockchain priority is above
    ``MIN_VALID_PRIORITY`` and its amount is positive. Ties on both keys keep
    their input order. Malformed input is logged and yields an empty list;
    individual malformed entries are skipped.
    """
    try:
        entries = _validate_input(balances)
    except InputError as e:
        logger.error("%s", e)
        return []

    ranked: list[RankedBalance] = []
    for raw in entries:
        try:
            balance = _coerce_balance(raw)
        except InputError as e:
            logger.warning("Skipping balance: %s", e)
            continue

        priority = priority_of(balance.blockchain)
        if priority <= MIN_VALID_PRIORITY or not balance.amount > MIN_VALID_AMOUNT:
            continue

        ranked.append(
            RankedBalance(
                currency=balance.currency,
                amount=balance.amount,
                blockchain=balance.blockchain,
                priority=priority,
            )
        )

    # sorted() is stable, and stays stable with reverse=True.
    return sorted(ranked, key=lambda b: (b.priority, b.amount), reverse=True)
