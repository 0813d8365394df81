"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


def _load_env_file(path: str = ".env") -> None:
    """Populate os.environ from the provided .env file if it exists."""

    env_path = Path(path)
    if not env_path.exists():
        return

    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


@dataclass(frozen=True, slots=True)
class Settings:
    """Centralised project settings based on OS environment variables."""

    environment: str = "dev"
    log_level: str = "INFO"

    catalog_base_url: str = "https://fakestoreapi.com"
    catalog_timeout: float = 10.0

    telegram_bot_token: str = ""

    checkout_tax_rate: float = 0.08
    checkout_shipping_fee: float = 5.99


def _build_settings() -> Settings:
    _load_env_file()

    return Settings(
        environment=os.getenv("ENVIRONMENT", "dev"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        catalog_base_url=os.getenv("CATALOG_BASE_URL", "https://fakestoreapi.com"),
        catalog_timeout=float(os.getenv("CATALOG_TIMEOUT", "10")),
        telegram_bot_token=os.getenv("TELEGRAM_BOT_TOKEN", ""),
        checkout_tax_rate=float(os.getenv("CHECKOUT_TAX_RATE", "0.08")),
        checkout_shipping_fee=float(os.getenv("CHECKOUT_SHIPPING_FEE", "5.99")),
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance to avoid re-reading configuration."""

    return _build_settings()
