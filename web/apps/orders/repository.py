"""Repository layer for persisting orders.

This module contains the Django ORM implementation of ``OrderRepositoryPort``.
It maps ``OrderModel``/``OrderItemModel`` rows to and from the ``Order`` and
``LineItem`` domain dataclasses so the domain layer is not coupled to Django
ORM details.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from django.db import transaction

from .domain import LineItem, Order, OrderRepositoryPort
from .models import OrderItemModel, OrderModel


def to_domain(obj: OrderModel) -> Order:
    """Map an order row (with prefetched items) to the domain ``Order``."""
    return Order(
        id=obj.id,
        customer_email=obj.customer_email,
        total_price=obj.total_price,
        items=[
            LineItem(product_id=i.product_id, product_name=i.product_name, price=i.price)
            for i in obj.items.all()
        ],
        created_at=obj.created_at,
    )


class OrderRepository(OrderRepositoryPort):
    """Repository that persists Order domain objects using Django ORM."""

    def _queryset(self):
        return OrderModel.objects.prefetch_related("items")

    def get(self, order_id: uuid.UUID) -> Optional[Order]:
        obj = self._queryset().filter(id=order_id).first()
        return to_domain(obj) if obj else None

    @transaction.atomic
    def save(self, order: Order) -> Order:
        """Persist a new order and its line items in one transaction.

        The order row gets its ``created_at`` from the model default; line
        items keep their position in ``order.items``.

        Args:
            order: Domain ``Order`` instance to persist.

        Returns:
            The stored order, re-read from the database.
        """
        obj = OrderModel.objects.create(
            id=order.id,
            customer_email=order.customer_email,
            total_price=order.total_price,
        )
        OrderItemModel.objects.bulk_create(
            [
                OrderItemModel(
                    order=obj,
                    product_id=item.product_id,
                    product_name=item.product_name,
                    price=item.price,
                    position=pos,
                )
                for pos, item in enumerate(order.items)
            ]
        )
        return to_domain(self._queryset().get(id=obj.id))

    def find_all_between(self, start: datetime, end: datetime) -> List[Order]:
        # __range is BETWEEN: both bounds inclusive
        return [to_domain(o) for o in self._queryset().filter(created_at__range=(start, end))]
