# backend/inventory_app/db/mongo.py
"""
Backend MongoDB (pymongo).

La conexión se verifica con un `ping`. Si falla al arrancar, `start()` deja
una tarea en segundo plano que reintenta cada MONGODB_RECONNECT_INTERVAL
segundos, sin límite y sin backoff. Mientras tanto las operaciones fallan
con StorageError("Database not connected").
"""
from __future__ import annotations

import asyncio
import contextlib
import logging
from datetime import timezone
from typing import Any, Callable, Dict, List, Optional

from bson import ObjectId
from fastapi.concurrency import run_in_threadpool
from pymongo import ASCENDING, DESCENDING, MongoClient, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from inventory_app.core.settings import mask_uri
from inventory_app.db.base import InventoryStore, Item, business_fields, utcnow
from inventory_app.utils.errors import ItemNotFoundError, StorageError

logger = logging.getLogger(__name__)

INDEXES = [
    [("name", ASCENDING)],
    [("category", ASCENDING)],
    [("createdAt", DESCENDING)],
]


def _object_id(item_id: str) -> ObjectId:
    # Un id mal formado no puede existir en la colección
    if not ObjectId.is_valid(item_id):
        raise ItemNotFoundError()
    return ObjectId(item_id)


def _to_item(doc: Dict[str, Any]) -> Item:
    item = dict(doc)
    item["_id"] = str(doc["_id"])
    for key in ("createdAt", "updatedAt"):
        value = item.get(key)
        if value is not None and value.tzinfo is None:
            item[key] = value.replace(tzinfo=timezone.utc)
    return item


@contextlib.contextmanager
def _storage_errors():
    try:
        yield
    except PyMongoError as e:
        logger.error("MongoDB error: %s", e)
        raise StorageError(str(e)) from e


class MongoInventoryStore(InventoryStore):
    mode = "mongodb"

    def __init__(
        self,
        uri: str,
        collection_name: str = "inventoryitems",
        *,
        default_database: str = "inventory",
        server_selection_timeout_ms: int = 5000,
        socket_timeout_ms: int = 45000,
        reconnect_interval: float = 5.0,
        client_factory: Callable[..., MongoClient] = MongoClient,
    ):
        self.uri = uri
        self.collection_name = collection_name
        self.default_database = default_database
        self.server_selection_timeout_ms = server_selection_timeout_ms
        self.socket_timeout_ms = socket_timeout_ms
        self.reconnect_interval = reconnect_interval
        self._client_factory = client_factory

        self._client: Optional[MongoClient] = None
        self._collection: Optional[Collection] = None
        self._connect_task: Optional[asyncio.Task] = None

    @classmethod
    def from_collection(cls, collection: Collection) -> "MongoInventoryStore":
        """Store ya conectado a una colección existente (tests, scripts)."""
        store = cls(uri="", collection_name=collection.name)
        store._collection = collection
        return store

    # ---------- Conexión ----------
    def connect(self) -> bool:
        client = None
        try:
            client = self._client_factory(
                self.uri,
                serverSelectionTimeoutMS=self.server_selection_timeout_ms,
                socketTimeoutMS=self.socket_timeout_ms,
                tz_aware=True,
            )
            client.admin.command("ping")
            db = client.get_default_database(default=self.default_database)
        except PyMongoError as e:
            logger.error("❌ MongoDB connection error: %s", e)
            if client is not None:
                client.close()
            return False

        self._client = client
        self._collection = db[self.collection_name]
        logger.info("✅ Connected to MongoDB %s (database: %s)", mask_uri(self.uri), db.name)
        return True

    async def _connect_forever(self) -> None:
        while not await run_in_threadpool(self.connect):
            logger.info("🔄 Retrying connection in %s seconds...", self.reconnect_interval)
            await asyncio.sleep(self.reconnect_interval)

    async def start(self) -> None:
        if self._collection is not None:
            return
        self._connect_task = asyncio.create_task(self._connect_forever())

    async def close(self) -> None:
        if self._connect_task is not None and not self._connect_task.done():
            self._connect_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._connect_task
        self._connect_task = None
        if self._client is not None:
            self._client.close()
            logger.info("🔴 MongoDB connection closed")
        self._client = None
        self._collection = None

    @property
    def is_connected(self) -> bool:
        return self._collection is not None

    def describe(self) -> str:
        return "MongoDB (connected)" if self.is_connected else "MongoDB (disconnected)"

    @property
    def collection(self) -> Collection:
        if self._collection is None:
            raise StorageError("Database not connected")
        return self._collection

    def ensure_indexes(self) -> List[str]:
        with _storage_errors():
            return [self.collection.create_index(keys) for keys in INDEXES]

    # ---------- CRUD ----------
    def list_items(self) -> List[Item]:
        with _storage_errors():
            cursor = self.collection.find().sort([("createdAt", DESCENDING), ("_id", DESCENDING)])
            return [_to_item(doc) for doc in cursor]

    def get_item(self, item_id: str) -> Item:
        oid = _object_id(item_id)
        with _storage_errors():
            doc = self.collection.find_one({"_id": oid})
        if doc is None:
            raise ItemNotFoundError()
        return _to_item(doc)

    def create_item(self, fields: Dict[str, Any]) -> Item:
        now = utcnow()
        doc = {**business_fields(fields), "createdAt": now, "updatedAt": now}
        with _storage_errors():
            result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return _to_item(doc)

    def update_item(self, item_id: str, fields: Dict[str, Any]) -> Item:
        oid = _object_id(item_id)
        changes = {**business_fields(fields), "updatedAt": utcnow()}
        with _storage_errors():
            doc = self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        if doc is None:
            raise ItemNotFoundError()
        return _to_item(doc)

    def delete_item(self, item_id: str) -> Item:
        oid = _object_id(item_id)
        with _storage_errors():
            doc = self.collection.find_one_and_delete({"_id": oid})
        if doc is None:
            raise ItemNotFoundError()
        return _to_item(doc)
