# backend/inventory_app/core/settings.py — configuración de la app (env + .env)

import logging
import re
from typing import List, Literal, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Permite variables de entorno que no están definidas
        extra="ignore",
    )

    # =========================
    # App metadata
    # =========================
    PROJECT_NAME: str = "Inventory Manager"
    VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # =========================
    # Almacenamiento
    # =========================
    STORAGE_MODE: Literal["mongodb", "memory"] = "mongodb"

    MONGODB_URI: str = "mongodb://localhost:27017/inventory"
    MONGODB_DATABASE: str = "inventory"
    MONGODB_COLLECTION: str = "inventoryitems"
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = 5000
    MONGODB_SOCKET_TIMEOUT_MS: int = 45000
    MONGODB_RECONNECT_INTERVAL: float = 5.0

    # Usuario dedicado que crea scripts/seed.py
    MONGODB_APP_USER: str = "inventoryuser"
    MONGODB_APP_PASSWORD: str = "inventorypass"

    MEMORY_SEED_SAMPLES: bool = True

    # =========================
    # CORS
    # =========================
    # Acepta tanto lista como string separado por comas
    ALLOWED_ORIGINS: Union[List[str], str] = ["*"]

    @field_validator("ALLOWED_ORIGINS")
    @classmethod
    def parse_origins(cls, v):
        """Convierte string separado por comas en lista."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v or []


def mask_uri(uri: str) -> str:
    """Oculta usuario/contraseña de un connection string."""
    return re.sub(r"//[^@/]*@", "//***:***@", uri)


# ===== INSTANCIA GLOBAL =====
settings = Settings()


def log_settings(current: Settings = settings) -> None:
    """Log seguro de configuración sin exponer secretos."""
    logger.info("===== CONFIGURACIÓN %s v%s =====", current.PROJECT_NAME, current.VERSION)
    logger.info("Entorno: %s | Debug: %s", current.ENVIRONMENT, current.DEBUG)
    logger.info("Storage: %s", current.STORAGE_MODE)
    if current.STORAGE_MODE == "mongodb":
        logger.info("MongoDB URI: %s", mask_uri(current.MONGODB_URI))
        logger.info("Colección: %s", current.MONGODB_COLLECTION)
    logger.info("CORS orígenes: %s", ", ".join(current.ALLOWED_ORIGINS))
