"""Unit tests for the OrderService domain logic.

These tests validate order placement against in-memory stores: line-item
snapshots and totals, rejection of unknown products, duplicate handling and
the closed time-interval query.
"""

import uuid
from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from apps.orders.adapters import InMemoryOrderRepository
from apps.orders.domain import LineItem, OrderNotFound, OrderProductNotFound, OrderService, order_total
from apps.products.adapters import InMemoryProductRepository
from apps.products.domain import Product, ProductPatch, ProductService

EMAIL = "contact@storefront.dev"
T0 = datetime(2020, 11, 9, 0, 0, 0)


class SteppingClock:
    """Clock returning the queued timestamps, one per saved order."""

    def __init__(self, *stamps):
        self._stamps = list(stamps)

    def __call__(self):
        return self._stamps.pop(0)


def product(name, price):
    return Product(id=uuid.uuid4(), name=name, price=Decimal(price))


@pytest.fixture
def catalogue():
    a, b = product("A", "10"), product("B", "1")
    return InMemoryProductRepository([a, b]), a, b


def test_create_order_sums_snapshot_prices(catalogue):
    products, a, b = catalogue
    orders = InMemoryOrderRepository()
    service = OrderService(orders, products)

    out = service.create(EMAIL, [a.id, b.id])

    assert out.total_price == Decimal("11")
    assert out.customer_email == EMAIL
    assert [i.product_id for i in out.items] == [a.id, b.id]
    assert out.created_at is not None
    assert orders.get(out.id) == out


def test_line_items_follow_request_order(catalogue):
    products, a, b = catalogue
    out = OrderService(InMemoryOrderRepository(), products).create(EMAIL, [b.id, a.id])
    assert [i.product_name for i in out.items] == ["B", "A"]


def test_total_uses_exact_decimal_arithmetic():
    x, y = product("X", "0.10"), product("Y", "0.20")
    service = OrderService(InMemoryOrderRepository(), InMemoryProductRepository([x, y]))
    assert service.create(EMAIL, [x.id, y.id]).total_price == Decimal("0.30")


def test_unknown_product_rejects_order_and_persists_nothing(catalogue):
    products, a, _ = catalogue
    orders = InMemoryOrderRepository()
    service = OrderService(orders, products)
    unknown = uuid.uuid4()

    with pytest.raises(OrderProductNotFound) as e:
        service.create(EMAIL, [a.id, unknown])

    assert e.value.missing_ids == [unknown]
    assert str(unknown) in str(e.value)
    assert orders.find_all_between(datetime.min, datetime.max) == []


def test_missing_ids_are_exactly_requested_minus_found(catalogue):
    products, a, b = catalogue
    u1, u2 = uuid.uuid4(), uuid.uuid4()
    with pytest.raises(OrderProductNotFound) as e:
        OrderService(InMemoryOrderRepository(), products).create(EMAIL, [u1, a.id, u2, b.id, u1])
    assert set(e.value.missing_ids) == {u1, u2}
    assert e.value.missing_ids == sorted([u1, u2], key=str)


def test_duplicate_ids_collapse_into_one_line_item(catalogue):
    products, a, b = catalogue
    out = OrderService(InMemoryOrderRepository(), products).create(EMAIL, [a.id, b.id, a.id])
    assert [i.product_id for i in out.items] == [a.id, b.id]
    assert out.total_price == Decimal("11")


def test_later_price_change_does_not_touch_existing_order(catalogue):
    products, a, b = catalogue
    orders = InMemoryOrderRepository()
    service = OrderService(orders, products)
    placed = service.create(EMAIL, [a.id, b.id])

    ProductService(products).update(a.id, ProductPatch(price=Decimal("99"), name="A2"))

    again = service.get_by_id(placed.id)
    assert again.total_price == Decimal("11")
    assert again.items[0] == LineItem(product_id=a.id, product_name="A", price=Decimal("10"))


def test_empty_order_raises():
    service = OrderService(InMemoryOrderRepository(), InMemoryProductRepository())
    with pytest.raises(ValueError) as e:
        service.create(EMAIL, [])
    assert str(e.value) == "EMPTY_ORDER"


def test_get_by_id_unknown_raises_not_found():
    service = OrderService(InMemoryOrderRepository(), InMemoryProductRepository())
    with pytest.raises(OrderNotFound):
        service.get_by_id(uuid.uuid4())


def test_interval_is_closed_on_both_ends(catalogue):
    products, a, _ = catalogue
    clock = SteppingClock(
        T0 - timedelta(seconds=1),
        T0,
        T0 + timedelta(minutes=30),
        T0 + timedelta(hours=1),
        T0 + timedelta(hours=1, seconds=1),
    )
    service = OrderService(InMemoryOrderRepository(clock=clock), products)
    placed = [service.create(EMAIL, [a.id]) for _ in range(5)]

    hits = service.get_all_in_time_interval(T0, T0 + timedelta(hours=1))

    assert [o.id for o in hits] == [o.id for o in placed[1:4]]


def test_interval_without_orders_is_empty():
    service = OrderService(InMemoryOrderRepository(), InMemoryProductRepository())
    assert service.get_all_in_time_interval(T0, T0 + timedelta(days=1)) == []


def test_order_total_of_no_items_is_zero():
    assert order_total([]) == Decimal("0")
