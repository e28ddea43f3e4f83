# app/routers/cart.py
from fastapi import APIRouter, Depends

from app.core.cart_context import get_cart
from app.repositories.product_repo import ProductRepository
from app.schemas.cart import CartSummary, CartItemCreate, CartItemUpdate
from app.services.cart_service import CartService
from app.services.product_service import ProductService

router = APIRouter(prefix="/cart", tags=["Cart"])

product_repo = ProductRepository()
product_service = ProductService(product_repo)


@router.get("", response_model=CartSummary)
def get_my_cart(cart: CartService = Depends(get_cart)):
    """
    Get the cart with its totals.
    """
    return cart.summary()


@router.post("", response_model=CartSummary)
def add_to_cart(
    payload: CartItemCreate,
    cart: CartService = Depends(get_cart),
):
    """
    Add a catalog product to the cart.

    - 404 if the product does not exist.
    - quantity <= 0 leaves the cart unchanged.

    Returns the updated cart summary.
    """
    product = product_service.get_product(payload.product_id)
    cart.add_to_cart(product, payload.quantity)
    return cart.summary()


@router.patch("/{product_id}", response_model=CartSummary)
def update_cart_item(
    product_id: int,
    payload: CartItemUpdate,
    cart: CartService = Depends(get_cart),
):
    """
    Set the quantity of a product in the cart (0 or less removes it).

    Returns the updated cart summary.
    """
    cart.update_quantity(product_id, payload.quantity)
    return cart.summary()


@router.post("/{product_id}/increment", response_model=CartSummary)
def increment_cart_item(product_id: int, cart: CartService = Depends(get_cart)):
    cart.step_quantity(product_id, 1)
    return cart.summary()


@router.post("/{product_id}/decrement", response_model=CartSummary)
def decrement_cart_item(product_id: int, cart: CartService = Depends(get_cart)):
    cart.step_quantity(product_id, -1)
    return cart.summary()


@router.delete("/{product_id}", response_model=CartSummary)
def remove_cart_item(product_id: int, cart: CartService = Depends(get_cart)):
    """
    Remove a product from the cart. Unknown products are ignored.

    Returns the updated cart summary.
    """
    cart.remove_from_cart(product_id)
    return cart.summary()


@router.delete("", response_model=CartSummary)
def clear_cart(cart: CartService = Depends(get_cart)):
    """
    Clear the entire cart.

    Returns an empty cart summary.
    """
    cart.clear_cart()
    return cart.summary()
