# app/main.py
from contextlib import asynccontextmanager
import logging

from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI

from app.core.cart_context import CartProvider
from app.core.config import get_settings
from app.database import create_db_and_tables
from app.repositories.cart_store import CartStore, DatabaseCartStore, build_cart_store

# Import models so SQLModel metadata is populated before create_all()
from app.models import cart_storage as _cart_storage_models  # noqa: F401

# Routers
from app.routers.products import router as products_router
from app.routers.cart import router as cart_router

settings = get_settings()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("uvicorn")


def create_app(cart_store: CartStore | None = None) -> FastAPI:
    """
    Build the storefront API.

    `cart_store` overrides the backend picked from CART_STORE_BACKEND.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler = cart session scope.

        Startup:
          - Create the cart storage table (database backend only).
          - Open the CartProvider, loading the saved cart.

        Shutdown:
          - Close the CartProvider; the cart is already saved.
        """
        store = cart_store if cart_store is not None else build_cart_store(settings)
        if isinstance(store, DatabaseCartStore):
            logger.info("🔄 Startup: Preparing cart storage table...")
            create_db_and_tables(store.engine)

        provider = CartProvider(
            store,
            free_shipping_threshold=settings.FREE_SHIPPING_THRESHOLD,
            shipping_fee=settings.SHIPPING_FEE,
        )
        with provider:
            app.state.cart_provider = provider
            logger.info("✅ Startup: cart ready (%s)", type(store).__name__)
            try:
                yield
            finally:
                app.state.cart_provider = None

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="0.1.0",
        lifespan=lifespan,
    )

    # --- CORS configuration ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Versioned API prefix, e.g. /api/v1
    app.include_router(products_router, prefix=settings.API_V1_STR)
    app.include_router(cart_router, prefix=settings.API_V1_STR)

    @app.get("/")
    def root():
        """Health check endpoint."""
        return {"status": "ok", "service": "octocat-storefront"}

    return app


app = create_app()
