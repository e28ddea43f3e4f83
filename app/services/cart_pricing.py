# app/services/cart_pricing.py
"""
Derived cart totals.

Everything here is a pure function of the cart lines and is recomputed on
every read; nothing is cached or stored next to the items. Arithmetic keeps
full float precision, rounding only happens in format_money().
"""
from typing import Iterable

from app.core.constants import FREE_SHIPPING_THRESHOLD, SHIPPING_FEE
from app.schemas.cart import CartLineItem


def effective_price(item: CartLineItem) -> float:
    """Unit price after the line's discount (if any)."""
    if item.discount:
        return item.price * (1 - item.discount)
    return item.price


def line_total(item: CartLineItem) -> float:
    return effective_price(item) * item.quantity


def discount_percent(item: CartLineItem) -> int | None:
    """Whole-number discount badge ("25% OFF"), or None without a discount."""
    if not item.discount or item.discount <= 0:
        return None
    return round(item.discount * 100)


def item_count(items: Iterable[CartLineItem]) -> int | float:
    return sum(item.quantity for item in items)


def subtotal(items: Iterable[CartLineItem]) -> float:
    return sum((line_total(item) for item in items), 0.0)


def shipping_cost(
    cart_subtotal: float,
    threshold: float = FREE_SHIPPING_THRESHOLD,
    fee: float = SHIPPING_FEE,
) -> float:
    """
    Flat shipping fee, waived once the subtotal reaches the threshold.

    An empty cart (subtotal 0) still pays the fee.
    """
    if cart_subtotal >= threshold:
        return 0.0
    return fee


def final_total(
    items: Iterable[CartLineItem],
    threshold: float = FREE_SHIPPING_THRESHOLD,
    fee: float = SHIPPING_FEE,
) -> float:
    cart_subtotal = subtotal(items)
    return cart_subtotal + shipping_cost(cart_subtotal, threshold, fee)


def amount_to_free_shipping(
    cart_subtotal: float,
    threshold: float = FREE_SHIPPING_THRESHOLD,
) -> float:
    """How much more has to be added before shipping becomes free."""
    return max(threshold - cart_subtotal, 0.0)


def format_money(value: float) -> str:
    return f"${value:.2f}"
