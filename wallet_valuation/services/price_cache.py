"""Memoized, single-flight price lookup.

The cache holds at most one mapping at a time. It is replaced wholesale by
each successful fetch and is valid for ``ttl_seconds`` after it was fetched.
Concurrent callers that miss the cache share a single outstanding fetch. A
failed fetch resolves to an empty mapping which is not memoized, so the next
call retries.
"""
from __future__ import annotations

import asyncio
import logging
import time
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

from ..interfaces.price_source import PriceSource
from ..models import TokenPrice

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 5 * 60

_EMPTY: Mapping[str, float] = MappingProxyType({})


def build_price_map(records: Iterable[TokenPrice]) -> dict[str, float]:
    """Collapse price records to one price per currency, keeping the highest."""
    prices: dict[str, float] = {}
    for record in records:
        current = prices.get(record.currency)
        if current is None or record.price > current:
            prices[record.currency] = record.price
    return prices


class PriceCache:
    """Shared price mapping fed by a ``PriceSource``."""

    def __init__(
        self,
        source: PriceSource,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        fetch_timeout: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._source = source
        self._ttl = ttl_seconds
        self._fetch_timeout = fetch_timeout or None
        self._clock = clock

        self._prices_by_currency: Mapping[str, float] | None = None
        self._fetched_at: float | None = None
        self._pending_fetch: asyncio.Future[Mapping[str, float]] | None = None

    @property
    def fetched_at(self) -> float | None:
        return self._fetched_at

    @property
    def is_fresh(self) -> bool:
        if self._prices_by_currency is None or self._fetched_at is None:
            return False
        return self._clock() - self._fetched_at <= self._ttl

    def invalidate(self) -> None:
        """Drop the cached mapping; an in-flight fetch is left alone."""
        self._prices_by_currency = None
        self._fetched_at = None

    async def get_prices(self) -> Mapping[str, float]:
        """Return the current price mapping, fetching it if stale or absent."""
        if self.is_fresh:
            logger.debug("Price cache hit")
            return self._prices_by_currency  # type: ignore[return-value]

        if self._pending_fetch is None:
            self._pending_fetch = asyncio.ensure_future(self._fetch())
        else:
            logger.debug("Joining in-flight price fetch")

        # A waiter being cancelled must not cancel the fetch other waiters share.
        return await asyncio.shield(self._pending_fetch)

    async def _fetch(self) -> Mapping[str, float]:
        logger.debug("Fetching prices from source")
        try:
            if self._fetch_timeout is not None:
                records = await asyncio.wait_for(
                    self._source.fetch_records(), self._fetch_timeout
                )
            else:
                records = await self._source.fetch_records()
            prices = MappingProxyType(build_price_map(records))
        except Exception as e:
            logger.error("Error fetching prices: %s", e)
            return _EMPTY
        finally:
            self._pending_fetch = None

        self._prices_by_currency = prices
        self._fetched_at = self._clock()
        logger.info("Cached prices for %d currencies", len(prices))
        return prices
