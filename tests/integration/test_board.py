"""Integration tests for WalletBoard — full flow with in-memory sources."""
from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from tests.fakes import FakePriceSource
from wallet_valuation.balances import JsonFileBalanceSource
from wallet_valuation.config import AppConfig
from wallet_valuation.errors import SourceUnavailableError
from wallet_valuation.services.board import WalletBoard


@pytest.fixture()
def balance_source(sample_balances: list[dict]) -> AsyncMock:
    source = AsyncMock()
    source.fetch_balances.return_value = sample_balances
    return source


@pytest.fixture()
def board(
    sample_app_config: AppConfig,
    price_source: FakePriceSource,
    balance_source: AsyncMock,
) -> WalletBoard:
    return WalletBoard(
        sample_app_config, price_source=price_source, balance_source=balance_source
    )


class TestRows:
    @pytest.mark.asyncio
    async def test_ranked_rows_with_usd_values(self, board: WalletBoard) -> None:
        rows = await board.rows()

        assert [r.currency for r in rows] == ["ATOM", "USDC", "ETH", "ZIL"]
        by_currency = {r.currency: r for r in rows}
        assert by_currency["ATOM"].usd_value == pytest.approx(903.75)
        assert by_currency["ATOM"].formatted_amount == "120.50"
        assert by_currency["ETH"].usd_value == 4000.0
        # No ZIL price in the feed.
        assert by_currency["ZIL"].usd_value == 0

    @pytest.mark.asyncio
    async def test_price_feed_down_still_renders(
        self, board: WalletBoard, price_source: FakePriceSource
    ) -> None:
        price_source.error = SourceUnavailableError("feed down")
        rows = await board.rows()
        assert len(rows) == 4
        assert all(r.usd_value == 0 for r in rows)

    @pytest.mark.asyncio
    async def test_garbage_balances_render_nothing(
        self, board: WalletBoard, balance_source: AsyncMock, price_source: FakePriceSource
    ) -> None:
        balance_source.fetch_balances.return_value = "garbage"
        assert await board.rows() == []
        assert price_source.calls == 0

    @pytest.mark.asyncio
    async def test_reads_balances_file(
        self,
        sample_app_config: AppConfig,
        price_source: FakePriceSource,
        tmp_path: Path,
    ) -> None:
        path = tmp_path / "balances.json"
        path.write_text(
            json.dumps([{"currency": "ETH", "amount": 0.5, "blockchain": "Arbitrum"}])
        )
        board = WalletBoard(sample_app_config, price_source=price_source)
        rows = await board.rows(JsonFileBalanceSource(path))
        assert [(r.currency, r.priority, r.usd_value) for r in rows] == [("ETH", 30, 1000.0)]

    @pytest.mark.asyncio
    async def test_no_balance_source_raises(
        self, sample_app_config: AppConfig, price_source: FakePriceSource
    ) -> None:
        board = WalletBoard(sample_app_config, price_source=price_source)
        with pytest.raises(ValueError, match="No balance source"):
            await board.rows()


class TestQuoteAndPrices:
    @pytest.mark.asyncio
    async def test_rows_and_quotes_share_one_fetch(
        self, board: WalletBoard, price_source: FakePriceSource
    ) -> None:
        await board.rows()
        assert await board.quote("1", "ETH", "USDC") == "2000.000000"
        assert await board.quote("2", "ATOM", "ATOM") == "2"
        prices = await board.prices()
        assert prices["BTC"] == 31000.0
        assert price_source.calls == 1


class TestFormatting:
    def test_format_rows_empty(self) -> None:
        assert WalletBoard.format_rows([]) == "No balances to display."

    @pytest.mark.asyncio
    async def test_format_rows(self, board: WalletBoard) -> None:
        text = WalletBoard.format_rows(await board.rows())
        lines = text.splitlines()
        assert lines[0].split() == ["Currency", "Chain", "Amount", "USD"]
        assert lines[1].split() == ["ATOM", "Osmosis", "120.50", "903.75"]

    def test_format_prices(self) -> None:
        text = WalletBoard.format_prices({"USDC": 1.0, "ETH": 1645.9})
        assert text.splitlines() == ["ETH        $1,645.9000", "USDC       $1.0000"]
        assert WalletBoard.format_prices({}) == "No prices available."
