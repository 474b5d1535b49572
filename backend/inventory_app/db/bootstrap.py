# bootstrap.py - Inicialización de la base MongoDB (usuario, colección, índices, datos)
from __future__ import annotations

import logging

from pymongo.database import Database
from pymongo.errors import OperationFailure

from inventory_app.db.mongo import MongoInventoryStore
from inventory_app.db.samples import SAMPLE_ITEMS
from inventory_app.services.validation import validate_item

logger = logging.getLogger(__name__)

# Código de MongoDB para "user already exists"
USER_EXISTS = 51003


def create_app_user(db: Database, user: str, password: str) -> bool:
    """Crea el usuario readWrite de la app. Devuelve False si ya existía."""
    try:
        db.command(
            "createUser",
            user,
            pwd=password,
            roles=[{"role": "readWrite", "db": db.name}],
        )
    except OperationFailure as e:
        if e.code == USER_EXISTS:
            logger.info("Usuario '%s' ya existe, se omite", user)
            return False
        raise
    logger.info("Usuario '%s' creado en '%s'", user, db.name)
    return True


def seed_collection(db: Database, collection_name: str = "inventoryitems") -> int:
    """
    Crea la colección y sus índices e inserta los datos de ejemplo.
    Idempotente: solo inserta si la colección está vacía.
    """
    if collection_name not in db.list_collection_names():
        db.create_collection(collection_name)
        logger.info("Colección '%s' creada", collection_name)

    store = MongoInventoryStore.from_collection(db[collection_name])
    store.ensure_indexes()

    if store.collection.count_documents({}) == 0:
        for sample in SAMPLE_ITEMS:
            store.create_item(validate_item(sample))
        logger.info("%d items de ejemplo insertados", len(SAMPLE_ITEMS))

    return store.collection.count_documents({})
