# tests/test_categories.py
from conftest import create_category, create_product


def test_create_and_get_category(client):
    created = create_category(client, "Books")
    assert created["products"] == []

    r = client.get(f"/categories/{created['id']}")
    assert r.status_code == 200
    assert r.json()["name"] == "Books"


def test_category_not_found(client):
    r = client.get("/categories/7")
    assert r.status_code == 404
    assert r.json() == {"message": "Category not found"}


def test_list_categories_with_products(client):
    books = create_category(client, "Books")
    create_category(client, "Empty")
    create_product(client, "Go Guide", 29.99, books["id"])
    gone = create_product(client, "Old Guide", 9.99, books["id"])
    client.delete(f"/products/{gone['id']}")

    r = client.get("/categories")
    assert r.status_code == 200
    body = r.json()
    assert [c["name"] for c in body] == ["Books", "Empty"]
    assert [p["name"] for p in body[0]["products"]] == ["Go Guide"]
    assert body[1]["products"] == []


def test_create_category_with_nested_products(client):
    created = create_category(
        client,
        "Stationery",
        products=[{"name": "Pen", "price": 1.5}, {"name": "Notebook", "price": 4}],
    )
    assert [p["name"] for p in created["products"]] == ["Pen", "Notebook"]
    assert all(p["category_id"] == created["id"] for p in created["products"])

    pen = client.get(f"/products/{created['products'][0]['id']}").json()
    assert pen["category"]["name"] == "Stationery"


def test_create_category_requires_name(client):
    r = client.post("/categories", json={})
    assert r.status_code == 400
    assert list(r.json()) == ["error"]


def test_out_of_range_category_id_is_not_found(client):
    r = client.get("/categories/99999999999999999999")
    assert r.status_code == 404
    assert r.json() == {"message": "Category not found"}
