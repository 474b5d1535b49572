# memory.py - Backend en memoria (vive lo que vive el proceso)
from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Iterable, List, Optional

from inventory_app.db.base import InventoryStore, Item, business_fields, utcnow
from inventory_app.utils.errors import ItemNotFoundError

logger = logging.getLogger(__name__)


class MemoryInventoryStore(InventoryStore):
    mode = "memory"

    def __init__(self, initial: Optional[Iterable[Dict[str, Any]]] = None):
        self._items: List[Item] = []
        # Orden de inserción para desempatar createdAt iguales
        self._seq: Dict[str, int] = {}
        self._next_id = 1
        for fields in initial or []:
            self.create_item(fields)

    def _find(self, item_id: str) -> Item:
        for item in self._items:
            if item["_id"] == item_id:
                return item
        raise ItemNotFoundError()

    def list_items(self) -> List[Item]:
        ordered = sorted(
            self._items,
            key=lambda i: (i["createdAt"], self._seq[i["_id"]]),
            reverse=True,
        )
        return copy.deepcopy(ordered)

    def get_item(self, item_id: str) -> Item:
        return copy.deepcopy(self._find(item_id))

    def create_item(self, fields: Dict[str, Any]) -> Item:
        now = utcnow()
        item_id = str(self._next_id)
        self._seq[item_id] = self._next_id
        self._next_id += 1

        item = {"_id": item_id, **business_fields(fields), "createdAt": now, "updatedAt": now}
        self._items.append(item)
        return copy.deepcopy(item)

    def update_item(self, item_id: str, fields: Dict[str, Any]) -> Item:
        item = self._find(item_id)
        item.update(business_fields(fields))
        item["updatedAt"] = utcnow()
        return copy.deepcopy(item)

    def delete_item(self, item_id: str) -> Item:
        item = self._find(item_id)
        self._items.remove(item)
        del self._seq[item_id]
        return item

    def describe(self) -> str:
        return "In-Memory Storage (No MongoDB)"

    async def start(self) -> None:
        logger.info("💾 Storage: In-Memory (%d items). Data will be lost on restart.", len(self._items))
