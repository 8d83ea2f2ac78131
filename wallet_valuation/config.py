"""Configuration loader — reads config.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PriceSourceConfig:
    url: str = "https://interview.switcheo.com/prices.json"
    # 0 disables the deadline on the remote call.
    timeout_seconds: float = 0.0


@dataclass(frozen=True)
class PriceCacheConfig:
    ttl_seconds: float = 300.0


@dataclass(frozen=True)
class BalancesConfig:
    path: str = ""


@dataclass(frozen=True)
class AppConfig:
    price_source: PriceSourceConfig = field(default_factory=PriceSourceConfig)
    price_cache: PriceCacheConfig = field(default_factory=PriceCacheConfig)
    balances: BalancesConfig = field(default_factory=BalancesConfig)


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def _build_price_source(raw: dict[str, Any]) -> PriceSourceConfig:
    return PriceSourceConfig(
        url=raw.get("url", PriceSourceConfig.url),
        timeout_seconds=float(raw.get("timeout_seconds") or 0.0),
    )


def _build_price_cache(raw: dict[str, Any]) -> PriceCacheConfig:
    return PriceCacheConfig(
        ttl_seconds=float(raw.get("ttl_seconds", PriceCacheConfig.ttl_seconds)),
    )


def _build_balances(raw: dict[str, Any]) -> BalancesConfig:
    return BalancesConfig(path=str(raw.get("path") or ""))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration from YAML + .env.

    Args:
        config_path: Path to config.yaml. Defaults to ``config.yaml`` in the
            project root (two levels up from this file).
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(__file__).resolve().parent.parent / "config.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    cfg = AppConfig(
        price_source=_build_price_source(raw.get("price_source") or {}),
        price_cache=_build_price_cache(raw.get("price_cache") or {}),
        balances=_build_balances(raw.get("balances") or {}),
    )

    _validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def _validate(cfg: AppConfig) -> None:
    """Raise on invalid configuration."""
    if not cfg.price_source.url:
        raise ValueError("price_source.url must not be empty")
    if cfg.price_source.timeout_seconds < 0:
        raise ValueError("price_source.timeout_seconds must not be negative")
    if cfg.price_cache.ttl_seconds <= 0:
        raise ValueError("price_cache.ttl_seconds must be positive")
