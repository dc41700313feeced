import pytest


@pytest.fixture(autouse=True)
def use_orm_store(settings):
    settings.STORE_BACKEND = "orm"


@pytest.fixture
def memory_store(settings, monkeypatch):
    """Switch the providers to fresh in-memory stores for one test."""
    from apps.orders import providers as order_providers
    from apps.orders.adapters import InMemoryOrderRepository
    from apps.products import providers as product_providers
    from apps.products.adapters import InMemoryProductRepository

    settings.STORE_BACKEND = "memory"
    products = InMemoryProductRepository()
    orders = InMemoryOrderRepository()
    monkeypatch.setattr(product_providers, "_memory_store", products)
    monkeypatch.setattr(order_providers, "_memory_store", orders)
    return products, orders
