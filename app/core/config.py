# app/core/config.py
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.constants import (
    CART_STORAGE_KEY,
    FREE_SHIPPING_THRESHOLD,
    SHIPPING_FEE,
)


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Everything has a default, so the storefront runs without a .env file.

    Cart storage:
      - CART_STORE_BACKEND: "file" (default), "database" or "memory"
      - CART_STORE_DIR: directory used by the file backend
      - DATABASE_URL: used by the database backend
    """

    PROJECT_NAME: str = "Octocat Supply Storefront"
    API_V1_STR: str = "/api/v1"

    CORS_ORIGINS: list[str] = [
        "http://localhost:5137",
        "http://127.0.0.1:5137",
        "http://localhost:3000",
    ]

    # Cart persistence
    CART_STORAGE_KEY: str = CART_STORAGE_KEY
    CART_STORE_BACKEND: Literal["file", "database", "memory"] = "file"
    CART_STORE_DIR: str = ".cart"
    DATABASE_URL: str = "sqlite:///./octocat_cart.db"

    # Pricing
    FREE_SHIPPING_THRESHOLD: float = FREE_SHIPPING_THRESHOLD
    SHIPPING_FEE: float = SHIPPING_FEE

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
