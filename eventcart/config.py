"""
Centralized configuration with environment variable overrides.

Storage keys, id prefixes, checkout endpoints and display defaults are
configurable here. Nothing is hardcoded in the cart or tool logic.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

STORAGE_BACKENDS = ("memory", "file", "null")


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


def _safe_float(env_var: str, default: str) -> float:
    """Parse a float from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return float(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid float for {env_var}: {raw!r}"
        ) from None


@dataclass(frozen=True)
class CartConfig:
    """Cart behaviour defaults."""

    storage_key: str = os.getenv("CART_STORAGE_KEY", "eventCart")
    external_id_prefix: str = os.getenv("EXTERNAL_VENUE_PREFIX", "external-")
    default_time_slot: str = os.getenv("DEFAULT_TIME_SLOT", "Full day")
    placeholder_image_url: str = os.getenv(
        "EXTERNAL_VENUE_IMAGE",
        "https://via.placeholder.com/300x200?text=External+Venue",
    )
    currency_symbol: str = os.getenv("CURRENCY_SYMBOL", "$")


@dataclass(frozen=True)
class StorageConfig:
    """Where the cart is persisted between sessions."""

    backend: str = os.getenv("CART_STORAGE_BACKEND", "null")
    file_path: str = os.getenv("CART_STORAGE_PATH", "./data/local_storage.json")


@dataclass(frozen=True)
class CheckoutConfig:
    """Payment-session endpoint settings."""

    endpoint_url: str = os.getenv(
        "CHECKOUT_ENDPOINT_URL", "http://localhost:3000/api/v1/checkout_sessions"
    )
    timeout_sec: float = _safe_float("CHECKOUT_TIMEOUT", "10.0")
    max_items: int = _safe_int("CHECKOUT_MAX_ITEMS", "100")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    cart: CartConfig = field(default_factory=CartConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    checkout: CheckoutConfig = field(default_factory=CheckoutConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    app_name: str = os.getenv("APP_NAME", "eventcart")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if not config.cart.storage_key.strip():
        raise ValueError("CART_STORAGE_KEY must not be empty")
    if not config.cart.external_id_prefix.strip():
        raise ValueError("EXTERNAL_VENUE_PREFIX must not be empty")
    if config.storage.backend not in STORAGE_BACKENDS:
        raise ValueError(
            f"CART_STORAGE_BACKEND must be one of {STORAGE_BACKENDS}, "
            f"got {config.storage.backend!r}"
        )
    if not config.checkout.endpoint_url.startswith(("http://", "https://")):
        raise ValueError(
            f"CHECKOUT_ENDPOINT_URL must be an http(s) URL, got {config.checkout.endpoint_url!r}"
        )
    if config.checkout.timeout_sec <= 0:
        raise ValueError(
            f"CHECKOUT_TIMEOUT must be > 0, got {config.checkout.timeout_sec}"
        )
    if config.checkout.max_items < 1:
        raise ValueError(
            f"CHECKOUT_MAX_ITEMS must be >= 1, got {config.checkout.max_items}"
        )


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.info("Configuration loaded for '%s'", config.app_name)
    return config


# Singleton instance
settings = load_config()
