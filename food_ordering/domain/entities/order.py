"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- pydantic
- infrastructure adapters
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from ..enums.order_status import OrderStatus, transition
from ..exceptions import OrderDomainException, OrderErrorCode
from ..value_objects import (
    CustomerId,
    Money,
    OrderId,
    OrderItemId,
    ProductId,
    RestaurantId,
    StreetAddress,
    TrackingId,
)
from .restaurant import Product


@dataclass
class OrderItem:
    """Individual line item within an order."""
    product: Product
    quantity: int
    price: Money
    sub_total: Money
    item_id: Optional[OrderItemId] = None
    order_id: Optional[OrderId] = None

    def __post_init__(self):
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity < 1:
            raise ValueError(f"Order item quantity must be a positive integer, got: {self.quantity!r}")

    def initialize_order_item(self, order_id: OrderId, item_id: OrderItemId) -> None:
        self.order_id = order_id
        self.item_id = item_id

    def is_price_valid(self) -> bool:
        """Price is positive and the subtotal is price x quantity."""
        return (
            self.price.is_greater_than_zero()
            and self.price.multiply(self.quantity) == self.sub_total
        )


def _invalid_item_price(item: OrderItem) -> OrderDomainException:
    return OrderDomainException(
        f"Order item price: {item.price} is not valid for product {item.product.product_id}",
        OrderErrorCode.INVALID_ITEM_PRICE,
    )


@dataclass
class Order:
    """
    Order aggregate root.

    A freshly mapped order has no id, tracking id or status. It becomes a
    PENDING order through ``initialize_order`` once ``validate_order`` and
    ``validate_items_price`` have passed. The status afterwards only moves
    through ``pay``, ``approve``, ``init_cancel`` and ``cancel``.
    """
    customer_id: CustomerId
    restaurant_id: RestaurantId
    delivery_address: StreetAddress
    price: Optional[Money]
    items: List[OrderItem] = field(default_factory=list)
    order_id: Optional[OrderId] = None
    tracking_id: Optional[TrackingId] = None
    failure_messages: List[str] = field(default_factory=list)
    _order_status: Optional[OrderStatus] = field(default=None, init=False)

    @property
    def order_status(self) -> Optional[OrderStatus]:
        return self._order_status

    # =========================================================================
    # VALIDATION
    # =========================================================================

    def validate_order(self) -> None:
        """
        Check the order's own arithmetic.

        Raises:
            OrderDomainException: If the order was already initialized, the
                total is missing or not positive, an item subtotal is not
                price x quantity, or the subtotals do not add up to the total
        """
        self._validate_initial_order()
        self._validate_total_price()
        self._validate_items_total()

    def validate_items_price(self, catalog: Iterable[Product]) -> None:
        """
        Check every item price against the restaurant catalog.

        When every item matches, each item gets the catalog name and price
        confirmed on its product. On failure no item is changed.

        Raises:
            OrderDomainException: If a product is missing from the catalog
                or its catalog price differs from the item price
        """
        products: Dict[ProductId, Product] = {}
        for product in catalog:
            products.setdefault(product.product_id, product)

        confirmed: List[Tuple[OrderItem, Product]] = []
        for item in self.items:
            catalog_product = products.get(item.product.product_id)
            if catalog_product is None or catalog_product.price != item.price:
                raise _invalid_item_price(item)
            confirmed.append((item, catalog_product))

        # Items are only touched once every price checked out
        for item, catalog_product in confirmed:
            item.product.update_with_confirmed_name_and_price(
                catalog_product.name, catalog_product.price
            )

    def _validate_initial_order(self) -> None:
        if self._order_status is not None or self.order_id is not None:
            raise OrderDomainException(
                "Order is not in correct state for initialization!",
                OrderErrorCode.INVALID_ORDER_STATE,
            )

    def _validate_total_price(self) -> None:
        if self.price is None or not self.price.is_greater_than_zero():
            raise OrderDomainException(
                "Total price must be greater than zero!",
                OrderErrorCode.INVALID_TOTAL_PRICE,
            )

    def _validate_items_total(self) -> None:
        items_total = Money.ZERO
        for item in self.items:
            if not item.is_price_valid():
                raise _invalid_item_price(item)
            items_total = items_total + item.sub_total

        if items_total != self.price:
            raise OrderDomainException(
                f"Total price: {self.price} is not equal to Order items total: {items_total}!",
                OrderErrorCode.INVALID_TOTAL_PRICE,
            )

    # =========================================================================
    # STATE TRANSITIONS
    # =========================================================================

    def initialize_order(self) -> None:
        """Assign ids, a new tracking id and the PENDING status."""
        self._order_status = transition(self._order_status, OrderStatus.PENDING, "initialize")
        self.order_id = OrderId.generate()
        self.tracking_id = TrackingId.generate()
        for position, item in enumerate(self.items, start=1):
            item.initialize_order_item(self.order_id, OrderItemId(position))

    def pay(self) -> None:
        self._order_status = transition(self._order_status, OrderStatus.PAID, "pay")

    def approve(self) -> None:
        self._order_status = transition(self._order_status, OrderStatus.APPROVED, "approve")

    def init_cancel(self, failure_messages: Optional[Iterable[str]] = None) -> None:
        """Start compensation (e.g. restaurant rejected a paid order)."""
        self._order_status = transition(self._order_status, OrderStatus.CANCELLING, "init_cancel")
        self._update_failure_messages(failure_messages)

    def cancel(self, failure_messages: Optional[Iterable[str]] = None) -> None:
        self._order_status = transition(self._order_status, OrderStatus.CANCELLED, "cancel")
        self._update_failure_messages(failure_messages)

    def _update_failure_messages(self, failure_messages: Optional[Iterable[str]]) -> None:
        if failure_messages:
            self.failure_messages.extend(message for message in failure_messages if message)
