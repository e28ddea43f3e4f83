# app/core/cart_context.py
import logging

from fastapi import Request

from app.repositories.cart_store import CartStore
from app.services.cart_service import CartService

logger = logging.getLogger(__name__)


class CartContextError(RuntimeError):
    """
    Raised when the cart is used outside of an active CartProvider scope.
    This is an integration bug, never a condition to recover from.
    """


class CartProvider:
    """
    Session scope for the cart.

    Entering the provider builds the one CartService of the session
    (loading the saved cart); leaving it ends the session. Consumers get
    the cart from the provider and must not cache it beyond the scope.

    Usage:

        with CartProvider(store) as cart:
            cart.add_to_cart(product, 1)
    """

    def __init__(self, store: CartStore, **cart_options):
        self.store = store
        self.cart_options = cart_options
        self._cart: CartService | None = None

    @property
    def active(self) -> bool:
        return self._cart is not None

    @property
    def cart(self) -> CartService:
        if self._cart is None:
            raise CartContextError("cart must be used within an active CartProvider")
        return self._cart

    def __enter__(self) -> CartService:
        if self._cart is not None:
            raise CartContextError("CartProvider is already active")
        self._cart = CartService(self.store, **self.cart_options)
        logger.info(
            "Cart session started with %d line(s)", len(self._cart.cart_items)
        )
        return self._cart

    def __exit__(self, exc_type, exc, tb) -> None:
        self._cart = None
        logger.info("Cart session closed")


def get_cart(request: Request) -> CartService:
    """
    FastAPI dependency returning the cart of the running session.

    Raises:
        CartContextError: if the app was not started with a CartProvider
        (e.g. the lifespan did not run).
    """
    provider: CartProvider | None = getattr(request.app.state, "cart_provider", None)
    if provider is None:
        raise CartContextError("cart must be used within an active CartProvider")
    return provider.cart
