import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from database import engine, metadata  # noqa: E402
from main import app  # noqa: E402
from services.menu_cache import menu_cache  # noqa: E402


@pytest.fixture(autouse=True)
def schema():
    metadata.create_all(engine)
    menu_cache.clear()
    yield
    metadata.drop_all(engine)


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seed(client):
    """One restaurant with three dishes and three participants."""
    restaurant = client.post(
        "/api/restaurantes",
        json={"nombre": "La Brasa", "telefono": "3001234567", "direccion": "Calle 10"},
    ).json()

    def dish(nombre, precio):
        return client.post(
            "/api/menu-items",
            json={"nombre": nombre, "precio": precio, "restaurante_id": restaurant["id"]},
        ).json()

    def user(nombre):
        return client.post("/api/usuarios", json={"nombre": nombre}).json()

    return {
        "restaurant": restaurant,
        "pollo": dish("Pollo", 10000),
        "costillas": dish("Costillas", 15000),
        "arepa": dish("Arepa", 3000),
        "ana": user("Ana"),
        "bruno": user("Bruno"),
        "carla": user("Carla"),
    }


@pytest.fixture
def order_payload(seed):
    """Build an order body from (participant, dish, quantity) triples."""

    def build(items, valor_domicilio=5000, responsable="ana"):
        return {
            "restaurante_id": seed["restaurant"]["id"],
            "usuario_responsable_id": seed[responsable]["id"],
            "valor_domicilio": valor_domicilio,
            "items": [
                {
                    "usuario_id": seed[user]["id"],
                    "menu_item_id": seed[dish]["id"],
                    "cantidad": cantidad,
                    "subtotal": cantidad * seed[dish]["precio"],
                }
                for user, dish, cantidad in items
            ],
        }

    return build
