"""Blockchain priority lookup."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

DEFAULT_PRIORITY = -99
# Balances must rank strictly above this to be displayed.
MIN_VALID_PRIORITY = -99

BLOCKCHAIN_PRIORITIES: Mapping[str, int] = MappingProxyType(
    {
        "Osmosis": 100,
        "Ethereum": 50,
        "Arbitrum": 30,
        "Zilliqa": 20,
        "Neo": 20,
    }
)


def priority_of(blockchain: str) -> int:
    """Return the display priority for a blockchain, or ``DEFAULT_PRIORITY``."""
    return BLOCKCHAIN_PRIORITIES.get(blockchain, DEFAULT_PRIORITY)
