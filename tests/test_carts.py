# tests/test_carts.py
from concurrent.futures import ThreadPoolExecutor


def test_create_and_list_carts(client):
    assert client.get("/carts").json() == []

    r = client.post("/carts", json={"user_id": 7, "cart_value": 120.5})
    assert r.status_code == 201
    cart = r.json()
    assert cart["id"] > 0
    assert cart["user_id"] == 7
    assert cart["cart_value"] == 120.5

    r = client.get("/carts")
    assert r.status_code == 200
    assert [c["id"] for c in r.json()] == [cart["id"]]


def test_cart_value_is_stored_verbatim(client):
    r = client.post("/carts", json={"user_id": 1, "cart_value": "19.99"})
    assert r.status_code == 201
    assert r.json()["cart_value"] == 19.99

    r = client.post("/carts", json={"user_id": 1, "cart_value": 0})
    assert r.json()["cart_value"] == 0

    assert [c["cart_value"] for c in client.get("/carts").json()] == [19.99, 0]


def test_cart_value_rejects_sub_cent_amount(client):
    r = client.post("/carts", json={"user_id": 1, "cart_value": "1.999"})
    assert r.status_code == 400
    assert client.get("/carts").json() == []


def test_create_cart_bad_body(client):
    r = client.post("/carts", json={"user_id": "someone", "cart_value": 1})
    assert r.status_code == 400
    assert list(r.json()) == ["error"]


def test_concurrent_cart_creation(client):
    def create(user_id):
        return client.post("/carts", json={"user_id": user_id, "cart_value": user_id})

    with ThreadPoolExecutor(max_workers=4) as pool:
        responses = list(pool.map(create, range(12)))

    assert all(r.status_code == 201 for r in responses)
    ids = [r.json()["id"] for r in responses]
    assert len(set(ids)) == 12
    assert len(client.get("/carts").json()) == 12
