# scripts/check_db.py
# Propósito: Diagnóstico de la conexión a MongoDB (ping + insert/read/delete de prueba).

import logging
import sys

from pymongo import MongoClient
from pymongo.errors import OperationFailure, PyMongoError, ServerSelectionTimeoutError

from inventory_app.core.settings import mask_uri, settings
from inventory_app.utils.logging import setup_logging

logger = logging.getLogger("check_db")

TEST_COLLECTION = "connection_tests"


def _hints(error: PyMongoError) -> None:
    if isinstance(error, ServerSelectionTimeoutError):
        logger.info("💡 Comprueba que MongoDB está levantado y que el puerto 27017 es accesible")
        logger.info("💡 Con Docker: docker compose up -d mongodb && docker ps")
    elif isinstance(error, OperationFailure) and error.code == 18:
        logger.info("💡 Revisa usuario/contraseña y el parámetro authSource del connection string")


def main() -> int:
    setup_logging(settings.LOG_LEVEL)
    logger.info("🧪 Probando conexión a %s", mask_uri(settings.MONGODB_URI))

    client = MongoClient(
        settings.MONGODB_URI,
        serverSelectionTimeoutMS=settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
    )
    try:
        client.admin.command("ping")
        db = client.get_default_database(default=settings.MONGODB_DATABASE)
        logger.info("✅ Conectado. Base de datos: %s", db.name)

        tests = db[TEST_COLLECTION]
        inserted = tests.insert_one({"message": "Connection test successful!"})
        found = tests.find_one({"_id": inserted.inserted_id})
        tests.delete_one({"_id": inserted.inserted_id})
        logger.info("✅ Insert/read/delete OK: %s", found["message"])

        if settings.MONGODB_COLLECTION in db.list_collection_names():
            count = db[settings.MONGODB_COLLECTION].count_documents({})
            logger.info("📦 Colección '%s' con %d items", settings.MONGODB_COLLECTION, count)
        else:
            logger.info("ℹ️  Colección '%s' no existe (se crea al primer uso o con scripts/seed.py)",
                        settings.MONGODB_COLLECTION)
    except PyMongoError as e:
        logger.error("❌ Falló la conexión a MongoDB: %s", e)
        _hints(e)
        return 1
    finally:
        client.close()

    logger.info("🎉 MongoDB listo")
    return 0


if __name__ == "__main__":
    sys.exit(main())
