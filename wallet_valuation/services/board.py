"""Wallet board orchestration — balances, prices, display rows, quotes."""
from __future__ import annotations

import logging
from typing import Mapping

from ..balances import JsonFileBalanceSource
from ..config import AppConfig
from ..interfaces.balance_source import BalanceSource
from ..interfaces.price_source import PriceSource
from ..models import DisplayRow
from ..oracles import PriceFeedSource
from .converter import CurrencyConverter
from .price_cache import PriceCache
from .projector import project_rows
from .ranker import rank

logger = logging.getLogger(__name__)


class WalletBoard:
    """Wires the price cache, ranker, projector and converter together."""

    def __init__(
        self,
        config: AppConfig,
        price_source: PriceSource | None = None,
        balance_source: BalanceSource | None = None,
    ) -> None:
        self._config = config

        source = price_source or PriceFeedSource(config.price_source)
        self.cache = PriceCache(
            source,
            ttl_seconds=config.price_cache.ttl_seconds,
            fetch_timeout=config.price_source.timeout_seconds,
        )
        self.converter = CurrencyConverter(self.cache)

        if balance_source is None and config.balances.path:
            balance_source = JsonFileBalanceSource(config.balances.path)
        self._balance_source = balance_source

    # ------------------------------------------------------------------
    # Core workflows
    # ------------------------------------------------------------------

    async def prices(self) -> Mapping[str, float]:
        return await self.cache.get_prices()

    async def rows(self, balance_source: BalanceSource | None = None) -> list[DisplayRow]:
        """Rank the holder's balances and value them in USD."""
        source = balance_source or self._balance_source
        if source is None:
            raise ValueError("No balance source configured")

        ranked = rank(await source.fetch_balances())
        if not ranked:
            return []

        prices = await self.cache.get_prices()
        rows = project_rows(ranked, prices)
        logger.info("Projected %d balance rows", len(rows))
        return list(rows.values())

    async def quote(self, amount: str, from_token: str, to_token: str) -> str:
        return await self.converter.convert(from_token, to_token, amount)

    # ------------------------------------------------------------------
    # Formatting helpers
    # ------------------------------------------------------------------

    @staticmethod
    def format_rows(rows: list[DisplayRow]) -> str:
        if not rows:
            return "No balances to display."

        lines = [f"{'Currency':<10} {'Chain':<10} {'Amount':>16} {'USD':>16}"]
        for row in rows:
            lines.append(
                f"{row.currency:<10} {row.blockchain:<10} "
                f"{row.formatted_amount:>16} {row.usd_value:>16,.2f}"
            )
        return "\n".join(lines)

    @staticmethod
    def format_prices(prices: Mapping[str, float]) -> str:
        if not prices:
            return "No prices available."
        return "\n".join(f"{currency:<10} ${price:,.4f}" for currency, price in sorted(prices.items()))
