# tests/test_payments.py
from decimal import Decimal

import pytest
from sqlalchemy import event
from sqlalchemy.exc import OperationalError

from store_service.models import Payment, PaymentItem
from store_service.schemas.payment import PaymentItemCreate
from store_service.services.payment_service import compute_total

PAYLOAD = {
    "customer": {"name": "Jan Kowalski", "email": "jan@example.com"},
    "items": [
        {"product_id": 1, "name": "Go Guide", "price": 10, "qty": 2},
        {"product_id": 2, "name": "Bookmark", "price": 5, "qty": 1},
    ],
}


def test_create_payment(client):
    r = client.post("/payments", json=PAYLOAD)
    assert r.status_code == 201
    body = r.json()
    assert body["message"] == "Payment accepted"

    payment = body["payment"]
    assert payment["id"] > 0
    assert payment["total"] == 25
    assert payment["customer_name"] == "Jan Kowalski"
    assert payment["customer_email"] == "jan@example.com"

    items = payment["items"]
    assert len(items) == 2
    for got, sent in zip(items, PAYLOAD["items"]):
        assert got["product_id"] == sent["product_id"]
        assert got["name"] == sent["name"]
        assert got["price"] == sent["price"]
        assert got["qty"] == sent["qty"]
        assert "payment_id" not in got


def test_payment_rows_are_persisted(client, db):
    client.post("/payments", json=PAYLOAD)

    payment = db.query(Payment).one()
    assert payment.total == Decimal("25.00")
    assert [(i.name, i.qty) for i in payment.items] == [("Go Guide", 2), ("Bookmark", 1)]


def test_resubmission_creates_second_payment(client, db):
    first = client.post("/payments", json=PAYLOAD).json()["payment"]
    second = client.post("/payments", json=PAYLOAD).json()["payment"]
    assert first["id"] != second["id"]
    assert db.query(Payment).count() == 2
    assert db.query(PaymentItem).count() == 4


def test_price_is_snapshot_not_catalog_price(client):
    r = client.post("/categories", json={"name": "Books"})
    r = client.post("/products", json={"name": "Go Guide", "price": 29.99, "category_id": r.json()["id"]})
    product = r.json()

    payload = {
        "customer": {"name": "A", "email": "a@example.com"},
        "items": [{"product_id": product["id"], "name": "Go Guide", "price": 19.99, "qty": 3}],
    }
    payment = client.post("/payments", json=payload).json()["payment"]
    assert payment["total"] == pytest.approx(59.97)

    client.put(f"/products/{product['id']}", json={"price": 1, "name": "Renamed"})
    item = payment["items"][0]
    assert item["price"] == 19.99
    assert item["name"] == "Go Guide"


def test_failed_item_insert_rolls_back_everything(client, db):
    def fail_insert(mapper, connection, target):
        raise OperationalError("INSERT INTO payment_items", {}, Exception("disk I/O error"))

    event.listen(PaymentItem, "before_insert", fail_insert)
    try:
        r = client.post("/payments", json=PAYLOAD)
    finally:
        event.remove(PaymentItem, "before_insert", fail_insert)

    assert r.status_code == 500
    assert "disk I/O error" in r.json()["error"]
    assert db.query(Payment).count() == 0
    assert db.query(PaymentItem).count() == 0

    # следующая попытка проходит
    assert client.post("/payments", json=PAYLOAD).status_code == 201


@pytest.mark.parametrize("payload", [
    {"items": PAYLOAD["items"]},
    {"customer": PAYLOAD["customer"], "items": []},
    {"customer": PAYLOAD["customer"], "items": [{"product_id": 1, "name": "x", "price": 1, "qty": 0}]},
    {"customer": PAYLOAD["customer"], "items": [{"product_id": 1, "name": "x", "price": -1, "qty": 1}]},
])
def test_invalid_payment_body(client, db, payload):
    r = client.post("/payments", json=payload)
    assert r.status_code == 400
    assert list(r.json()) == ["error"]
    assert db.query(Payment).count() == 0


def test_sub_cent_item_price_is_rejected(client, db):
    payload = {
        "customer": PAYLOAD["customer"],
        "items": [{"product_id": 1, "name": "Gum", "price": "0.005", "qty": 3}],
    }
    r = client.post("/payments", json=payload)
    assert r.status_code == 400
    assert "price" in r.json()["error"]
    assert db.query(Payment).count() == 0


def test_stored_total_matches_stored_items(client, db):
    payload = {
        "customer": PAYLOAD["customer"],
        "items": [
            {"product_id": 1, "name": "Gum", "price": "0.01", "qty": 3},
            {"product_id": 2, "name": "Tea", "price": "3.33", "qty": 7},
        ],
    }
    assert client.post("/payments", json=payload).status_code == 201

    payment = db.query(Payment).one()
    assert payment.total == sum(item.price * item.qty for item in payment.items)
    assert payment.total == Decimal("23.34")


def test_compute_total():
    items = [
        PaymentItemCreate(product_id=1, name="a", price=Decimal("0.10"), qty=3),
        PaymentItemCreate(product_id=2, name="b", price=Decimal("0.20"), qty=1),
    ]
    assert compute_total(items) == Decimal("0.50")
    assert compute_total([]) == Decimal("0")
