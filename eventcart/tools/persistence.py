"""
Durable storage for the cart, modelled on browser local storage.

A storage backend is a flat string key/value store. The cart is written
as one JSON document under a single key on every change and read back
once when a store is created. Only ``CartStore`` calls ``load_cart`` and
``save_cart``.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Protocol

from pydantic import ValidationError

from eventcart.config import settings
from eventcart.schemas.cart_schema import Cart

logger = logging.getLogger(__name__)


class CartStorage(Protocol):
    """Key/value string storage."""

    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStorage:
    """Process-local storage. Nothing survives a restart."""

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._items)


class NullStorage:
    """Storage for contexts with nowhere to persist: reads miss, writes vanish."""

    def get_item(self, key: str) -> Optional[str]:
        return None

    def set_item(self, key: str, value: str) -> None:
        pass

    def remove_item(self, key: str) -> None:
        pass


class JsonFileStorage:
    """All keys kept in one JSON object on disk, replaced atomically on write."""

    def __init__(self, path: str) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError):
            logger.warning("Storage file %s is unreadable, treating as empty", self._path)
            return {}
        if not isinstance(data, dict):
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, data: dict[str, str]) -> None:
        temp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            temp_path.replace(self._path)
        except OSError:
            if temp_path.is_file():
                temp_path.unlink(missing_ok=True)
            raise

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove_item(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)


def create_storage(backend: Optional[str] = None, path: Optional[str] = None) -> CartStorage:
    """Build the storage backend named in configuration."""
    backend = backend or settings.storage.backend
    if backend == "memory":
        return MemoryStorage()
    if backend == "null":
        return NullStorage()
    if backend == "file":
        return JsonFileStorage(path or settings.storage.file_path)
    raise ValueError(f"Unknown storage backend: {backend}")


def load_cart(storage: CartStorage, key: Optional[str] = None) -> Optional[Cart]:
    """
    Read and validate the stored cart.

    A value that fails to parse or does not match the cart schema is
    removed from storage and ``None`` is returned. Never raises.
    """
    key = key or settings.cart.storage_key
    raw = storage.get_item(key)
    if raw is None:
        return None

    try:
        cart = Cart.model_validate_json(raw)
    except ValidationError as e:
        logger.warning(
            "Discarding invalid stored cart under '%s' (%d errors)", key, e.error_count()
        )
        storage.remove_item(key)
        return None

    logger.debug("Hydrated cart for venue '%s'", cart.venue.id)
    return cart


def save_cart(storage: CartStorage, cart: Optional[Cart], key: Optional[str] = None) -> None:
    """
    Write the cart through to storage; ``None`` removes the key.

    A failed write is logged and dropped: the in-memory cart stays
    authoritative for the rest of the session. Never raises.
    """
    key = key or settings.cart.storage_key
    try:
        if cart is None:
            storage.remove_item(key)
        else:
            storage.set_item(key, json.dumps(cart.to_storage_dict(), ensure_ascii=False))
    except OSError as e:
        logger.warning("Could not persist cart under '%s': %s", key, e)
