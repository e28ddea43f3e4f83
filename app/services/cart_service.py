# app/services/cart_service.py
import logging
import threading

from app.core.constants import FREE_SHIPPING_THRESHOLD, SHIPPING_FEE
from app.repositories.cart_store import CartStore
from app.schemas.cart import CartLineItem, CartLineRead, CartSummary
from app.schemas.product import Product
from app.services import cart_pricing

logger = logging.getLogger(__name__)


class CartService:
    """
    Single source of truth for the shopping cart of one session.

    Responsibilities:
      - own the ordered list of cart lines (one per product)
      - expose derived totals, recomputed from the lines on every read
      - persist the lines through the CartStore after each change

    Mutators never raise: unknown products and non-positive quantities
    are silently ignored.

    Sync FastAPI endpoints run in a threadpool, so every mutation (change
    and save) and every summary runs under one lock: saves happen in the
    same order as the changes and the stored cart always matches the last
    change.
    """

    def __init__(
        self,
        store: CartStore,
        free_shipping_threshold: float = FREE_SHIPPING_THRESHOLD,
        shipping_fee: float = SHIPPING_FEE,
    ):
        self.store = store
        self.free_shipping_threshold = free_shipping_threshold
        self.shipping_fee = shipping_fee
        # Reentrant: update_quantity() calls remove_from_cart()
        self._lock = threading.RLock()
        self._items: list[CartLineItem] = store.load()

    # ---- internal helpers ----

    def _find(self, product_id: int) -> CartLineItem | None:
        for item in self._items:
            if item.product_id == product_id:
                return item
        return None

    def _commit(self, items: list[CartLineItem]) -> None:
        self._items = items
        self.store.save(self._items)
        logger.debug(
            "Cart saved: %d line(s), total %s",
            len(self._items),
            cart_pricing.format_money(self.final_total),
        )

    # ---- derived state ----

    @property
    def cart_items(self) -> tuple[CartLineItem, ...]:
        return tuple(self._items)

    @property
    def cart_item_count(self) -> int | float:
        return cart_pricing.item_count(self._items)

    @property
    def cart_total(self) -> float:
        return cart_pricing.subtotal(self._items)

    @property
    def shipping_cost(self) -> float:
        return cart_pricing.shipping_cost(
            self.cart_total, self.free_shipping_threshold, self.shipping_fee
        )

    @property
    def final_total(self) -> float:
        return self.cart_total + self.shipping_cost

    def summary(self) -> CartSummary:
        """
        Return full cart summary:
          - lines with effective price, line total and discount badge
          - item count, subtotal, shipping and final total
        """
        with self._lock:
            items = list(self._items)

        lines = [
            CartLineRead(
                **item.model_dump(),
                effective_price=cart_pricing.effective_price(item),
                line_total=cart_pricing.line_total(item),
                discount_percent=cart_pricing.discount_percent(item),
            )
            for item in items
        ]
        cart_total = cart_pricing.subtotal(items)
        shipping = cart_pricing.shipping_cost(
            cart_total, self.free_shipping_threshold, self.shipping_fee
        )
        return CartSummary(
            cart_items=lines,
            cart_item_count=cart_pricing.item_count(items),
            cart_total=cart_total,
            shipping_cost=shipping,
            final_total=cart_total + shipping,
            free_shipping_threshold=self.free_shipping_threshold,
            amount_to_free_shipping=cart_pricing.amount_to_free_shipping(
                cart_total, self.free_shipping_threshold
            ),
        )

    # ---- public operations ----

    def add_to_cart(self, product: Product, quantity: int) -> None:
        """
        Add `quantity` units of a product.

        Rules:
          - quantity <= 0 is ignored (nothing is saved)
          - a product already in the cart only gets its quantity increased;
            the price/discount captured on first add are kept
        """
        if quantity <= 0:
            return

        with self._lock:
            existing = self._find(product.product_id)
            if existing:
                items = [
                    item.model_copy(update={"quantity": item.quantity + quantity})
                    if item.product_id == product.product_id
                    else item
                    for item in self._items
                ]
            else:
                new_item = CartLineItem(
                    product_id=product.product_id,
                    name=product.name,
                    price=product.price,
                    img_name=product.img_name,
                    quantity=quantity,
                    discount=product.discount,
                )
                items = [*self._items, new_item]

            self._commit(items)

    def remove_from_cart(self, product_id: int) -> None:
        """
        Remove a product from the cart (if present).
        """
        with self._lock:
            if not self._find(product_id):
                return
            self._commit(
                [item for item in self._items if item.product_id != product_id]
            )

    def update_quantity(self, product_id: int, quantity: int) -> None:
        """
        Set the quantity of a cart line.

        quantity <= 0 removes the line; unknown products are ignored.
        """
        if quantity <= 0:
            self.remove_from_cart(product_id)
            return

        with self._lock:
            if not self._find(product_id):
                return

            self._commit(
                [
                    item.model_copy(update={"quantity": quantity})
                    if item.product_id == product_id
                    else item
                    for item in self._items
                ]
            )

    def step_quantity(self, product_id: int, delta: int) -> None:
        """
        +/- buttons of a cart line. Stepping down to 0 removes the line.
        """
        with self._lock:
            item = self._find(product_id)
            if not item:
                return
            self.update_quantity(product_id, item.quantity + delta)

    def clear_cart(self) -> None:
        """
        Remove every line from the cart.
        """
        with self._lock:
            if not self._items:
                return
            self._commit([])
