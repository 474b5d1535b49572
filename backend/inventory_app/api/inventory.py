# backend/inventory_app/api/inventory.py
from __future__ import annotations

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, Request

from inventory_app.db.base import InventoryStore
from inventory_app.models.item import DeleteOut, ItemOut
from inventory_app.services.validation import validate_item

logger = logging.getLogger(__name__)

router = APIRouter()


def get_store(request: Request) -> InventoryStore:
    return request.app.state.store


# ---------- Endpoints ----------
@router.get("", response_model=List[ItemOut])
def list_items(store: InventoryStore = Depends(get_store)):
    """Devuelve todos los items, los más recientes primero."""
    return store.list_items()


@router.get("/{item_id}", response_model=ItemOut)
def get_item(item_id: str, store: InventoryStore = Depends(get_store)):
    return store.get_item(item_id)


@router.post("", response_model=ItemOut, status_code=201)
def create_item(
    payload: Any = Body(None),
    store: InventoryStore = Depends(get_store),
):
    """
    Crea un item. El store asigna _id, createdAt y updatedAt;
    cualquier valor de esos campos en el body se ignora.
    """
    fields = validate_item(payload)
    item = store.create_item(fields)
    logger.info("Item creado: %s (%s)", item["_id"], item["name"])
    return item


@router.put("/{item_id}", response_model=ItemOut)
def update_item(
    item_id: str,
    payload: Any = Body(None),
    store: InventoryStore = Depends(get_store),
):
    """
    Reemplaza los cinco campos de negocio y refresca updatedAt.
    Sin control de concurrencia: gana la última escritura.
    """
    # 404 antes que 400: un id inexistente no se valida
    store.get_item(item_id)
    fields = validate_item(payload)
    item = store.update_item(item_id, fields)
    logger.info("Item actualizado: %s", item_id)
    return item


@router.delete("/{item_id}", response_model=DeleteOut)
def delete_item(item_id: str, store: InventoryStore = Depends(get_store)):
    item = store.delete_item(item_id)
    logger.info("Item eliminado: %s", item_id)
    return {"message": "Item deleted successfully", "item": item}
