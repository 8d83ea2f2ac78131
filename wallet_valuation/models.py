"""Data models — all frozen (immutable)."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WalletBalance:
    """A single token balance as reported by the balance source."""

    currency: str
    amount: float
    blockchain: str


@dataclass(frozen=True)
class TokenPrice:
    """One record from the price source."""

    currency: str
    price: float
    date: str = ""


@dataclass(frozen=True)
class RankedBalance:
    """A valid balance together with its blockchain priority."""

    currency: str
    amount: float
    blockchain: str
    priority: int


@dataclass(frozen=True)
class DisplayRow:
    """Display-ready balance row, keyed by ``currency``."""

    currency: str
    amount: float
    blockchain: str
    priority: int
    formatted_amount: str
    usd_value: float
