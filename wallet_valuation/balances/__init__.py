"""Balance source implementations."""
from .json_source import JsonFileBalanceSource

__all__ = ["JsonFileBalanceSource"]
