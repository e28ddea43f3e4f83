# app/repositories/cart_store.py
import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Iterable

from pydantic import TypeAdapter
from sqlalchemy.engine import Engine
from sqlmodel import Session

from app.core.config import Settings
from app.core.constants import CART_STORAGE_KEY
from app.models.cart_storage import CartStorageEntry
from app.schemas.cart import CartLineItem

logger = logging.getLogger(__name__)

_items_adapter = TypeAdapter(list[CartLineItem])


class CartStore(ABC):
    """
    Best-effort persistence for the cart lines.

    Works like browser local storage: a single string value under a fixed
    key. Subclasses only provide the raw key/value primitives; load() and
    save() never raise, failures are logged and the cart carries on.
    """

    def __init__(self, key: str = CART_STORAGE_KEY):
        self.key = key

    # ---- backend primitives ----

    @abstractmethod
    def _read_raw(self, key: str) -> str | None:
        """Return the stored value, or None if the key is missing."""

    @abstractmethod
    def _write_raw(self, key: str, value: str) -> None:
        """Store `value` under `key`, replacing the previous value."""

    # ---- public operations ----

    def load(self) -> list[CartLineItem]:
        """
        Return the stored cart lines, or [] if nothing usable is stored.
        """
        try:
            raw = self._read_raw(self.key)
            if raw is None:
                logger.debug("No saved cart under %r", self.key)
                return []
            items = _items_adapter.validate_python(json.loads(raw))
        except Exception:
            logger.exception("Error loading cart from storage (key=%r)", self.key)
            return []
        return _drop_invalid_lines(items)

    def save(self, items: Iterable[CartLineItem]) -> None:
        """
        Write the cart lines. On failure the previously stored value is kept.
        """
        try:
            payload = json.dumps(
                [
                    item.model_dump(by_alias=True, exclude_none=True)
                    for item in items
                ]
            )
            self._write_raw(self.key, payload)
        except Exception:
            logger.exception("Error saving cart to storage (key=%r)", self.key)


def _drop_invalid_lines(items: list[CartLineItem]) -> list[CartLineItem]:
    """
    Keep the stored cart consistent with what the cart itself can produce:
    positive quantities, one line per product (first one wins).
    """
    seen: set[int] = set()
    valid: list[CartLineItem] = []
    for item in items:
        if item.quantity <= 0 or item.product_id in seen:
            logger.warning(
                "Dropping stored cart line for product %s (quantity=%s)",
                item.product_id,
                item.quantity,
            )
            continue
        seen.add(item.product_id)
        valid.append(item)
    return valid


class InMemoryCartStore(CartStore):
    """
    Dict-backed store. Pass `data` to share storage between stores,
    like two tabs of the same browser profile.
    """

    def __init__(self, key: str = CART_STORAGE_KEY, data: dict[str, str] | None = None):
        super().__init__(key)
        self.data = data if data is not None else {}

    def _read_raw(self, key: str) -> str | None:
        return self.data.get(key)

    def _write_raw(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileCartStore(CartStore):
    """
    Stores each key as `<directory>/<key>.json`.

    The new value is written to a temporary file and moved over the old
    one, so a failed write leaves the previous cart on disk.
    """

    def __init__(self, directory: str, key: str = CART_STORAGE_KEY):
        super().__init__(key)
        self.directory = directory

    def path_for(self, key: str) -> str:
        return os.path.join(self.directory, f"{key}.json")

    def _read_raw(self, key: str) -> str | None:
        path = self.path_for(key)
        if not os.path.exists(path):
            return None
        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    def _write_raw(self, key: str, value: str) -> None:
        os.makedirs(self.directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_path, self.path_for(key))
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise


class DatabaseCartStore(CartStore):
    """
    Stores the cart in the `cart_storage` table (see CartStorageEntry).
    """

    def __init__(self, engine: Engine, key: str = CART_STORAGE_KEY):
        super().__init__(key)
        self.engine = engine

    def _read_raw(self, key: str) -> str | None:
        with Session(self.engine) as session:
            entry = session.get(CartStorageEntry, key)
            return entry.value if entry else None

    def _write_raw(self, key: str, value: str) -> None:
        with Session(self.engine) as session:
            entry = session.get(CartStorageEntry, key)
            if entry:
                entry.value = value
                entry.updated_at = datetime.now(timezone.utc)
            else:
                entry = CartStorageEntry(key=key, value=value)
            session.add(entry)
            session.commit()


def build_cart_store(settings: Settings) -> CartStore:
    """
    Pick the store backend configured by CART_STORE_BACKEND.
    """
    backend = settings.CART_STORE_BACKEND
    key = settings.CART_STORAGE_KEY

    if backend == "memory":
        return InMemoryCartStore(key=key)
    if backend == "database":
        from app.database import engine

        return DatabaseCartStore(engine, key=key)
    return JsonFileCartStore(settings.CART_STORE_DIR, key=key)
