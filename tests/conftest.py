import pytest
from fastapi.testclient import TestClient

from store_service.config import Settings
from store_service.main import create_app


@pytest.fixture
def app(tmp_path):
    settings = Settings(database_url=f"sqlite:///{tmp_path / 'store.db'}")
    return create_app(settings)


@pytest.fixture
def client(app):
    # lifespan создает таблицы
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(app, client):
    with app.state.db.SessionLocal() as session:
        yield session


def create_category(client, name="Books", **extra):
    r = client.post("/categories", json={"name": name, **extra})
    assert r.status_code == 201, r.text
    return r.json()


def create_product(client, name, price, category_id):
    r = client.post("/products", json={"name": name, "price": price, "category_id": category_id})
    assert r.status_code == 201, r.text
    return r.json()
