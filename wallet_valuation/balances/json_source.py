"""Balance source backed by a JSON file."""
from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class JsonFileBalanceSource:
    """Read raw wallet balances from a JSON file.

    The payload is returned as decoded; validating its shape is the
    ranker's job. A missing or undecodable file yields ``None``.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _read(self) -> Any:
        with open(self.path) as f:
            return json.load(f)

    async def fetch_balances(self) -> Any:
        try:
            # File reads block; keep them off the event loop.
            return await asyncio.to_thread(self._read)
        except (OSError, ValueError) as e:
            logger.error("Could not read balances from %s: %s", self.path, e)
            return None
