"""Shared test fixtures and sample data."""
from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from tests.fakes import FakeClock, FakePriceSource
from wallet_valuation.config import (
    AppConfig,
    BalancesConfig,
    PriceCacheConfig,
    PriceSourceConfig,
)
from wallet_valuation.models import TokenPrice, WalletBalance


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_app_config() -> AppConfig:
    return AppConfig(
        price_source=PriceSourceConfig(url="https://prices.example.com/prices.json"),
        price_cache=PriceCacheConfig(ttl_seconds=300.0),
        balances=BalancesConfig(path=""),
    )


SAMPLE_YAML = textwrap.dedent("""\
    price_source:
      url: "https://prices.example.com/prices.json"
      timeout_seconds: 5
    price_cache:
      ttl_seconds: 120
    balances:
      path: "balances.json"
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file


# ---------------------------------------------------------------------------
# Price / balance fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_records() -> list[TokenPrice]:
    return [
        TokenPrice(currency="ETH", price=2000.0, date="2023-08-29T07:10:52.000Z"),
        TokenPrice(currency="USDC", price=1.0, date="2023-08-29T07:10:40.000Z"),
        TokenPrice(currency="BTC", price=30000.0, date="2023-08-29T07:10:40.000Z"),
        TokenPrice(currency="BTC", price=31000.0, date="2023-08-29T07:10:50.000Z"),
        TokenPrice(currency="ATOM", price=7.5, date="2023-08-29T07:10:50.000Z"),
    ]


@pytest.fixture()
def price_source(sample_records: list[TokenPrice]) -> FakePriceSource:
    return FakePriceSource(sample_records)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def sample_prices() -> dict[str, float]:
    return {"ETH": 2000.0, "USDC": 1.0, "BTC": 31000.0, "ATOM": 7.5}


@pytest.fixture()
def sample_balances() -> list[dict]:
    return [
        {"currency": "ATOM", "amount": 120.5, "blockchain": "Osmosis"},
        {"currency": "ETH", "amount": 2.0, "blockchain": "Ethereum"},
        {"currency": "USDC", "amount": 500.0, "blockchain": "Ethereum"},
        {"currency": "ZIL", "amount": 1000.0, "blockchain": "Zilliqa"},
        {"currency": "NEO", "amount": 0, "blockchain": "Neo"},
        {"currency": "FOO", "amount": 10.0, "blockchain": "UnknownChain"},
    ]


@pytest.fixture()
def wallet_balance() -> WalletBalance:
    return WalletBalance(currency="BTC", amount=5.0, blockchain="Ethereum")
