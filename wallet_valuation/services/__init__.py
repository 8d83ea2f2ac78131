"""Service modules"""
from .board import WalletBoard
from .converter import CurrencyConverter, LatestConversion
from .price_cache import PriceCache
from .priority import priority_of
from .projector import project, project_rows
from .ranker import rank

__all__ = [
    "CurrencyConverter",
    "LatestConversion",
    "PriceCache",
    "WalletBoard",
    "priority_of",
    "project",
    "project_rows",
    "rank",
]
