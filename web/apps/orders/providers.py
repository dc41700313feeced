"""Service provider helpers for wiring OrderService with its stores.

``get_order_service`` returns an ``OrderService`` bound to the order and
product stores selected by ``settings.STORE_BACKEND``. The default ``"orm"``
backend uses the Django ORM repositories; ``"memory"`` uses process-wide
in-memory repositories suitable for local development.
"""

from django.conf import settings

from apps.products.providers import get_product_repository

from .adapters import InMemoryOrderRepository
from .domain import OrderRepositoryPort, OrderService
from .repository import OrderRepository

_memory_store = InMemoryOrderRepository()


def get_order_repository() -> OrderRepositoryPort:
    """Return the order store for the configured backend."""
    if getattr(settings, "STORE_BACKEND", "orm") == "memory":
        return _memory_store
    return OrderRepository()


def get_order_service() -> OrderService:
    """Return a configured OrderService instance.

    Returns:
        OrderService: A service wired with the order store and the product
        store used to resolve product references.
    """
    return OrderService(
        orders=get_order_repository(),
        products=get_product_repository(),
    )
