"""Service provider helpers for wiring ProductService with a store.

``get_product_service`` returns a ``ProductService`` bound to the store
selected by ``settings.STORE_BACKEND``: the Django ORM repository by default,
or a process-wide in-memory repository when the backend is ``"memory"``.
"""

from django.conf import settings

from .adapters import InMemoryProductRepository
from .domain import ProductRepositoryPort, ProductService
from .repository import ProductRepository

_memory_store = InMemoryProductRepository()


def get_product_repository() -> ProductRepositoryPort:
    """Return the product store for the configured backend."""
    if getattr(settings, "STORE_BACKEND", "orm") == "memory":
        return _memory_store
    return ProductRepository()


def get_product_service() -> ProductService:
    """Return a ``ProductService`` wired with the configured store."""
    return ProductService(repository=get_product_repository())
