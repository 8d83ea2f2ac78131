"""Protocol interfaces for wallet valuation."""
from .balance_source import BalanceSource
from .price_source import PriceSource

__all__ = ["BalanceSource", "PriceSource"]
