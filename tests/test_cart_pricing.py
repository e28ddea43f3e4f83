import pytest

from app.schemas.cart import CartLineItem
from app.services import cart_pricing


def line(product_id=1, price=10.0, quantity=1, discount=None) -> CartLineItem:
    return CartLineItem(
        product_id=product_id,
        name=f"Product {product_id}",
        price=price,
        img_name=f"p{product_id}.png",
        quantity=quantity,
        discount=discount,
    )


def test_effective_price_without_discount():
    assert cart_pricing.effective_price(line(price=40.0)) == 40.0


def test_effective_price_with_discount():
    assert cart_pricing.effective_price(line(price=40.0, discount=0.25)) == pytest.approx(30.0)


def test_zero_discount_is_treated_as_no_discount():
    item = line(price=19.99, discount=0)
    assert cart_pricing.effective_price(item) == 19.99
    assert cart_pricing.discount_percent(item) is None


def test_discount_percent_is_rounded():
    assert cart_pricing.discount_percent(line(discount=0.125)) == 12
    assert cart_pricing.discount_percent(line(discount=0.1)) == 10


def test_line_total_and_item_count():
    items = [line(1, 10.0, 3), line(2, 40.0, 2, discount=0.5)]

    assert cart_pricing.line_total(items[1]) == pytest.approx(40.0)
    assert cart_pricing.item_count(items) == 5
    assert cart_pricing.subtotal(items) == pytest.approx(70.0)


def test_empty_cart_totals():
    assert cart_pricing.item_count([]) == 0
    assert cart_pricing.subtotal([]) == 0
    assert cart_pricing.shipping_cost(0) == 25.0
    assert cart_pricing.final_total([]) == 25.0


@pytest.mark.parametrize(
    "subtotal, expected",
    [(99.99, 25.0), (100.0, 0.0), (150.0, 0.0)],
)
def test_free_shipping_threshold_is_inclusive(subtotal, expected):
    assert cart_pricing.shipping_cost(subtotal) == expected


def test_shipping_threshold_and_fee_can_be_overridden():
    assert cart_pricing.shipping_cost(60.0, threshold=50.0, fee=5.0) == 0.0
    assert cart_pricing.shipping_cost(40.0, threshold=50.0, fee=5.0) == 5.0
    assert cart_pricing.final_total([line(price=40.0)], threshold=50.0, fee=5.0) == 45.0


def test_subtotal_keeps_full_precision():
    items = [line(price=0.1, quantity=3)]
    # 0.1 * 3 is not exactly 0.3; rounding is left to presentation
    assert cart_pricing.subtotal(items) == 0.1 * 3
    assert cart_pricing.format_money(cart_pricing.subtotal(items)) == "$0.30"


def test_amount_to_free_shipping():
    assert cart_pricing.amount_to_free_shipping(30.0) == 70.0
    assert cart_pricing.amount_to_free_shipping(120.0) == 0.0


def test_format_money():
    assert cart_pricing.format_money(55) == "$55.00"
    assert cart_pricing.format_money(12.5) == "$12.50"
