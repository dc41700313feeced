"""Domain models, ports and service for orders.

This module contains the dataclasses used as DTOs for orders, protocol
definitions (ports) for the stores the service depends on, and the domain
service that resolves product references and places an order.
"""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Iterable, List, Optional, Protocol

from apps.common.ids import UuidGenerator
from apps.products.domain import Product, ProductRepositoryPort

logger = logging.getLogger("orders")


# ---- Errors ----
class OrderNotFound(LookupError):
    """Raised when no order exists for the requested identifier."""

    def __init__(self, order_id: uuid.UUID):
        self.order_id = order_id
        super().__init__(f"Order with id: {order_id} could not be found")


class OrderProductNotFound(ValueError):
    """Raised when an order references products that do not exist.

    Attributes:
        missing_ids: The requested ids absent from the product store, sorted
            by their string form.
    """

    def __init__(self, missing_ids: Iterable[uuid.UUID]):
        self.missing_ids = sorted(set(missing_ids), key=str)
        ids = ", ".join(str(i) for i in self.missing_ids)
        super().__init__(f"The products with the following ids do not exist: [{ids}]")


# ---- Entities / DTOs ----
@dataclass(frozen=True)
class LineItem:
    """A single line in an order.

    Attributes:
        product_id: The referenced product.
        product_name: Product name when the order was placed.
        price: Product price when the order was placed.

    The dataclass is frozen because a line item is a snapshot: later changes
    to the product never reach it.
    """

    product_id: uuid.UUID
    product_name: str
    price: Decimal

    @classmethod
    def snapshot(cls, product: Product) -> "LineItem":
        return cls(product_id=product.id, product_name=product.name, price=product.price)


@dataclass
class Order:
    """Container for order data.

    Attributes:
        id: Identifier assigned by ``OrderService.create``.
        customer_email: Contact e-mail of the customer.
        total_price: Exact sum of the line-item prices.
        items: Line items in the order they were requested.
        created_at: Set by the store when the order is persisted.
    """

    id: uuid.UUID
    customer_email: str
    total_price: Decimal
    items: List[LineItem] = field(default_factory=list)
    created_at: Optional[datetime] = None


def order_total(items: Iterable[LineItem]) -> Decimal:
    """Sum line-item prices with exact decimal arithmetic."""
    return sum((item.price for item in items), Decimal("0"))


# ---- Ports (DIP) ----
class OrderRepositoryPort(Protocol):
    """Port describing the order store used by the domain."""

    def get(self, order_id: uuid.UUID) -> Optional[Order]:
        """Return the order with its line items, or None when unknown."""
        raise NotImplementedError()

    def save(self, order: Order) -> Order:
        """Persist a new order and its line items.

        Returns:
            The stored order with ``created_at`` assigned.
        """
        raise NotImplementedError()

    def find_all_between(self, start: datetime, end: datetime) -> List[Order]:
        """Return orders with ``start <= created_at <= end``."""
        raise NotImplementedError()


# ---- Domain service ----
class OrderService:
    """Domain service responsible for placing and reading orders.

    Product references are resolved through the product store in one batch
    lookup. An order is only persisted when every referenced product exists.
    """

    def __init__(
        self,
        orders: OrderRepositoryPort,
        products: ProductRepositoryPort,
        ids: UuidGenerator | None = None,
    ):
        self.orders = orders
        self.products = products
        self.ids = ids or UuidGenerator()

    def create(self, customer_email: str, product_ids: List[uuid.UUID]) -> Order:
        """Place an order for the given products.

        Line items follow request order; a product requested more than once
        yields a single line item at its first position. Each line item
        snapshots the product's current name and price and the total is
        their exact sum.

        Args:
            customer_email: Contact e-mail of the customer.
            product_ids: Requested product identifiers, non-empty.

        Returns:
            The persisted Order.

        Raises:
            ValueError: 'EMPTY_ORDER' when no product id is given.
            OrderProductNotFound: When any requested id is unknown. Nothing
                is persisted in that case.
        """
        if not product_ids:
            raise ValueError("EMPTY_ORDER")

        requested = list(dict.fromkeys(product_ids))
        found = {p.id: p for p in self.products.find_all_by_ids(requested)}

        missing = set(requested) - set(found)
        if missing:
            logger.warning(
                "order rejected: unknown products",
                extra={"missing_ids": sorted(str(m) for m in missing)},
            )
            raise OrderProductNotFound(missing)

        items = [LineItem.snapshot(found[pid]) for pid in requested]
        order = Order(
            id=self.ids.generate(),
            customer_email=customer_email,
            total_price=order_total(items),
            items=items,
        )
        saved = self.orders.save(order)
        logger.info(
            "order created",
            extra={"order_id": str(saved.id), "items": len(saved.items), "total_price": str(saved.total_price)},
        )
        return saved

    def get_by_id(self, order_id: uuid.UUID) -> Order:
        """Fetch an order with its line items.

        Raises:
            OrderNotFound: If the identifier is unknown.
        """
        order = self.orders.get(order_id)
        if order is None:
            logger.info("order not found", extra={"order_id": str(order_id)})
            raise OrderNotFound(order_id)
        return order

    def get_all_in_time_interval(self, start: datetime, end: datetime) -> List[Order]:
        """Orders created within the closed interval ``[start, end]``."""
        return self.orders.find_all_between(start, end)
