import uuid
from datetime import datetime
from decimal import Decimal

import pytest

from apps.orders.models import OrderItemModel, OrderModel
from apps.products.models import ProductModel

DETAIL_URL = "/v1/orders/{oid}"
LIST_URL = "/v1/orders"
EMAIL = "contact@storefront.dev"


def seed_order(created_at, price="10.00"):
    p = ProductModel.objects.create(id=uuid.uuid4(), name="P", price=Decimal(price))
    o = OrderModel.objects.create(
        id=uuid.uuid4(), customer_email=EMAIL, total_price=Decimal(price), created_at=created_at
    )
    OrderItemModel.objects.create(order=o, product=p, product_name=p.name, price=p.price, position=0)
    return o


@pytest.mark.django_db
def test_get_order_by_id_returns_200_and_payload(client):
    o = seed_order(datetime(2020, 11, 9, 0, 30, 0))
    r = client.get(DETAIL_URL.format(oid=o.id))
    assert r.status_code == 200
    body = r.json()
    assert body["id"] == str(o.id)
    assert body["customerEmail"] == EMAIL
    assert body["timestamp"] == "2020-11-09T00:30:00"
    assert Decimal(str(body["totalPrice"])) == Decimal("10")
    assert len(body["products"]) == 1 and body["products"][0]["name"] == "P"


@pytest.mark.django_db
def test_get_order_not_found_returns_404(client):
    r = client.get(DETAIL_URL.format(oid=uuid.uuid4()))
    assert r.status_code == 404
    assert r.json()["detail"] == "NOT_FOUND"


def test_get_order_malformed_id_returns_400(client):
    r = client.get(DETAIL_URL.format(oid="123"))
    assert r.status_code == 400
    assert r.json()[0]["field"] == "id"


@pytest.mark.django_db
def test_list_orders_in_interval_includes_both_bounds(client):
    before = seed_order(datetime(2020, 11, 8, 23, 59, 59))
    at_start = seed_order(datetime(2020, 11, 9, 0, 0, 0))
    inside = seed_order(datetime(2020, 11, 9, 0, 30, 0))
    at_end = seed_order(datetime(2020, 11, 9, 1, 0, 0))
    after = seed_order(datetime(2020, 11, 9, 1, 0, 1))

    r = client.get(LIST_URL, {"startTime": "2020-11-09T00:00:00", "endTime": "2020-11-09T01:00:00"})

    assert r.status_code == 200
    ids = [o["id"] for o in r.json()]
    assert ids == [str(at_start.id), str(inside.id), str(at_end.id)]
    assert str(before.id) not in ids and str(after.id) not in ids


@pytest.mark.django_db
def test_list_orders_empty_interval_returns_204(client):
    seed_order(datetime(2020, 11, 9, 0, 30, 0))
    r = client.get(LIST_URL, {"startTime": "2021-01-01T00:00:00", "endTime": "2021-01-02T00:00:00"})
    assert r.status_code == 204


@pytest.mark.parametrize(
    "params, field",
    [
        ({"endTime": "2020-11-09T01:00:00"}, "startTime"),
        ({"startTime": "2020-11-09 00:00:00", "endTime": "2020-11-09T01:00:00"}, "startTime"),
        ({"startTime": "2020-11-09T00:00:00", "endTime": "tomorrow"}, "endTime"),
        ({"start_time": "2020-11-09T00:00:00", "endTime": "2020-11-09T01:00:00"}, "startTime"),
    ],
)
def test_list_orders_bad_query_returns_400(client, params, field):
    r = client.get(LIST_URL, params)
    assert r.status_code == 400
    assert [e["field"] for e in r.json()] == [field]
