"""HTTP price feed returning a JSON array of ``{currency, date, price}``."""
from __future__ import annotations

import logging
import math
import ssl
from typing import Any

import aiohttp
import certifi

from ..config import PriceSourceConfig
from ..errors import SourceUnavailableError
from ..models import TokenPrice

logger = logging.getLogger(__name__)


def parse_records(data: Any) -> list[TokenPrice]:
    """Turn a decoded JSON payload into price records.

    Records with no currency or a non-numeric price are skipped.
    """
    if not isinstance(data, list):
        raise SourceUnavailableError(
            f"Expected a JSON array of prices, got {type(data).__name__}"
        )

    records: list[TokenPrice] = []
    for item in data:
        if not isinstance(item, dict):
            logger.warning("Skipping malformed price record: %r", item)
            continue

        currency = item.get("currency")
        price = item.get("price")
        if (
            not isinstance(currency, str)
            or not currency
            or isinstance(price, bool)
            or not isinstance(price, (int, float))
            or not math.isfinite(price)
        ):
            logger.warning("Skipping malformed price record: %r", item)
            continue

        records.append(
            TokenPrice(currency=currency, price=float(price), date=str(item.get("date", "")))
        )

    return records


class PriceFeedSource:
    """Fetch token prices from a JSON price feed."""

    def __init__(self, config: PriceSourceConfig) -> None:
        self.url = config.url
        self.timeout = config.timeout_seconds

    async def fetch_records(self) -> list[TokenPrice]:
        """Fetch every price record the feed currently publishes."""
        ssl_context = ssl.create_default_context(cafile=certifi.where())
        connector = aiohttp.TCPConnector(ssl=ssl_context)
        timeout = aiohttp.ClientTimeout(total=self.timeout or None)

        try:
            async with aiohttp.ClientSession(connector=connector) as session:
                async with session.get(self.url, timeout=timeout) as response:
                    if response.status != 200:
                        raise SourceUnavailableError(
                            f"Price feed returned HTTP {response.status}"
                        )
                    data = await response.json(content_type=None)
        except SourceUnavailableError:
            raise
        except Exception as e:
            raise SourceUnavailableError(f"Error fetching prices from {self.url}: {e}") from e

        records = parse_records(data)
        logger.info("Fetched %d price records from %s", len(records), self.url)
        return records
