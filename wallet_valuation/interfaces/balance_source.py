"""Balance source protocol — raw wallet balances, possibly malformed."""
from typing import Any, Protocol


class BalanceSource(Protocol):
    """Abstract interface for reading a holder's raw balances."""

    async def fetch_balances(self) -> Any: ...
