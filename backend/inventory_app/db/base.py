# base.py - Contrato común de los backends de almacenamiento
from __future__ import annotations

import abc
from datetime import datetime, timezone
from typing import Any, Dict, List

from inventory_app.models.item import BUSINESS_FIELDS

Item = Dict[str, Any]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def business_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    # _id y timestamps los gestiona el store, nunca el cliente
    return {k: fields[k] for k in BUSINESS_FIELDS if k in fields}


class InventoryStore(abc.ABC):
    """
    Colección de items de inventario.

    Los items son dicts con las mismas claves que el documento JSON:
    _id, name, description, quantity, price, category, createdAt, updatedAt.
    Errores: ItemNotFoundError si el id no existe, StorageError si falla
    el almacenamiento subyacente.
    """

    mode: str = "unknown"

    @abc.abstractmethod
    def list_items(self) -> List[Item]:
        """Todos los items, createdAt descendente."""

    @abc.abstractmethod
    def get_item(self, item_id: str) -> Item:
        ...

    @abc.abstractmethod
    def create_item(self, fields: Dict[str, Any]) -> Item:
        """Asigna id y timestamps, persiste y devuelve el item creado."""

    @abc.abstractmethod
    def update_item(self, item_id: str, fields: Dict[str, Any]) -> Item:
        """Reemplaza los campos de negocio y refresca updatedAt."""

    @abc.abstractmethod
    def delete_item(self, item_id: str) -> Item:
        """Elimina y devuelve el item eliminado."""

    @property
    def is_connected(self) -> bool:
        return True

    @abc.abstractmethod
    def describe(self) -> str:
        """Texto de estado para /health."""

    async def start(self) -> None:
        pass

    async def close(self) -> None:
        pass
