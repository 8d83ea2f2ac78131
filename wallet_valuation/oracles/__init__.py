"""Price source implementations."""
from .price_feed import PriceFeedSource

__all__ = ["PriceFeedSource"]
