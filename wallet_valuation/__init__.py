"""Rank wallet token balances and convert amounts using live market prices."""

__version__ = "0.1.0"
