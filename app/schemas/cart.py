# app/schemas/cart.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for cart models: snake_case in Python, camelCase on the wire
    and in storage.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CartLineItem(CamelModel):
    """
    One cart entry.

    name/price/img_name/discount are copied from the product when it is
    first added and are not refreshed afterwards.
    quantity is not restricted to whole numbers (callers pass ints).
    """

    product_id: int
    name: str
    price: float
    img_name: str
    quantity: int | float
    discount: float | None = None


class CartItemCreate(CamelModel):
    """
    Payload for adding a product to the cart.
    Non-positive quantities are accepted and ignored by the cart.
    """

    product_id: int
    quantity: int = 1


class CartItemUpdate(CamelModel):
    """
    Payload for setting the quantity of a cart line.
    0 or less removes the line.
    """

    quantity: int


class CartLineRead(CartLineItem):
    """
    Cart line with its derived prices, as rendered by the storefront.
    """

    effective_price: float
    line_total: float
    discount_percent: int | None = None


class CartSummary(CamelModel):
    """
    Full cart response model with totals.
    """

    cart_items: list[CartLineRead]
    cart_item_count: int | float
    cart_total: float
    shipping_cost: float
    final_total: float
    free_shipping_threshold: float
    amount_to_free_shipping: float
