# factory.py - Selección del backend de almacenamiento (una sola vez, al arrancar)

from inventory_app.core.settings import Settings
from inventory_app.db.base import InventoryStore
from inventory_app.db.memory import MemoryInventoryStore
from inventory_app.db.mongo import MongoInventoryStore
from inventory_app.db.samples import SAMPLE_ITEMS


def build_store(current: Settings) -> InventoryStore:
    if current.STORAGE_MODE == "memory":
        return MemoryInventoryStore(SAMPLE_ITEMS if current.MEMORY_SEED_SAMPLES else None)

    return MongoInventoryStore(
        current.MONGODB_URI,
        current.MONGODB_COLLECTION,
        default_database=current.MONGODB_DATABASE,
        server_selection_timeout_ms=current.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
        socket_timeout_ms=current.MONGODB_SOCKET_TIMEOUT_MS,
        reconnect_interval=current.MONGODB_RECONNECT_INTERVAL,
    )
