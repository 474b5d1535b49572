# conftest.py - Fixtures comunes: app con un store en memoria nuevo por test

import pytest
from fastapi.testclient import TestClient

from inventory_app.db.memory import MemoryInventoryStore
from inventory_app.main import create_app


@pytest.fixture
def store():
    return MemoryInventoryStore()


@pytest.fixture
def client(store):
    with TestClient(create_app(store=store)) as c:
        yield c


@pytest.fixture
def new_item_data():
    return {
        "name": "Laptop Computer",
        "description": "High-performance laptop",
        "quantity": 15,
        "price": 999.99,
        "category": "Electronics",
    }
