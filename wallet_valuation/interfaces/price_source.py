"""Price source protocol — remote price feed abstraction."""
from typing import Protocol

from ..models import TokenPrice


class PriceSource(Protocol):
    """Abstract interface for fetching the full list of token prices.

    Implementations raise ``SourceUnavailableError`` on failure.
    """

    async def fetch_records(self) -> list[TokenPrice]: ...
