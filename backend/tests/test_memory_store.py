# test_memory_store.py - Backend en memoria

import pytest

from inventory_app.db.memory import MemoryInventoryStore
from inventory_app.db.samples import SAMPLE_ITEMS
from inventory_app.utils.errors import ItemNotFoundError

FIELDS = {"name": "Mouse", "description": "Wireless", "quantity": 25, "price": 49.99, "category": "Electronics"}


def test_ids_are_never_reused():
    store = MemoryInventoryStore()
    first = store.create_item(FIELDS)
    store.delete_item(first["_id"])
    second = store.create_item(FIELDS)
    assert second["_id"] != first["_id"]


def test_returned_items_are_copies():
    store = MemoryInventoryStore()
    item = store.create_item(FIELDS)
    item["quantity"] = 999
    store.list_items()[0]["name"] = "changed"

    stored = store.get_item(item["_id"])
    assert stored["quantity"] == 25
    assert stored["name"] == "Mouse"


def test_update_keeps_id_and_created_at():
    store = MemoryInventoryStore()
    item = store.create_item(FIELDS)
    updated = store.update_item(item["_id"], {**FIELDS, "_id": "other", "quantity": 1})
    assert updated["_id"] == item["_id"]
    assert updated["createdAt"] == item["createdAt"]
    assert updated["updatedAt"] >= item["updatedAt"]
    assert updated["quantity"] == 1


@pytest.mark.parametrize("op", ["get_item", "delete_item"])
def test_unknown_id(op):
    store = MemoryInventoryStore()
    with pytest.raises(ItemNotFoundError):
        getattr(store, op)("42")


def test_update_unknown_id():
    store = MemoryInventoryStore()
    with pytest.raises(ItemNotFoundError):
        store.update_item("42", FIELDS)


def test_initial_samples():
    store = MemoryInventoryStore(SAMPLE_ITEMS)
    items = store.list_items()
    assert len(items) == len(SAMPLE_ITEMS)
    assert items[-1]["name"] == SAMPLE_ITEMS[0]["name"]
    assert store.describe() == "In-Memory Storage (No MongoDB)"
    assert store.is_connected
