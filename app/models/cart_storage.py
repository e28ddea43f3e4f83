# app/models/cart_storage.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class CartStorageEntry(SQLModel, table=True):
    """
    Key/value row backing the database cart store.

    Mirrors browser local storage: one row per key, the value is the
    JSON-encoded cart exactly as the other backends store it.
    """

    __tablename__ = "cart_storage"

    key: str = Field(
        primary_key=True,
        max_length=100,
    )

    value: str = Field(
        description="JSON array of cart line items",
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
