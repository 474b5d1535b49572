# backend/inventory_app/main.py
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from inventory_app.core.settings import Settings, log_settings, settings
from inventory_app.db.base import InventoryStore, utcnow
from inventory_app.db.factory import build_store
from inventory_app.models.item import HealthOut
from inventory_app.utils.logging import setup_logging
from inventory_app.utils.errors import register_exception_handlers

# Routers
from inventory_app.api.inventory import router as inventory_router

logger = logging.getLogger(__name__)

STATIC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static")


def create_app(store: Optional[InventoryStore] = None, app_settings: Optional[Settings] = None) -> FastAPI:
    current = app_settings or settings

    # 1) Logging
    setup_logging(current.LOG_LEVEL)
    if current.DEBUG:
        log_settings(current)

    # 2) Store: uno solo, elegido al arrancar
    if store is None:
        store = build_store(current)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await store.start()
        yield
        await store.close()

    # 3) App
    app = FastAPI(
        title=current.PROJECT_NAME,
        version=current.VERSION,
        docs_url="/docs" if current.DEBUG else None,
        redoc_url="/redoc" if current.DEBUG else None,
        lifespan=lifespan,
    )
    app.state.store = store

    # 4) CORS
    origins = current.ALLOWED_ORIGINS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # 5) Log de peticiones (solo API)
    @app.middleware("http")
    async def request_log_middleware(request: Request, call_next):
        response = await call_next(request)
        path = request.url.path
        if path.startswith("/api/"):
            logger.info("%s %s -> %s", request.method, path, response.status_code)
        return response

    # 6) Error handlers
    register_exception_handlers(app)

    # 7) Routers
    app.include_router(inventory_router, prefix="/api/inventory", tags=["inventory"])

    @app.get("/health", response_model=HealthOut, tags=["health"])
    def health_check(request: Request):
        """Liveness + modo de almacenamiento."""
        return {
            "status": "OK",
            "timestamp": utcnow().isoformat().replace("+00:00", "Z"),
            "database": request.app.state.store.describe(),
        }

    # 8) Front end estático; va al final para no tapar /api ni /health
    app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")

    return app


app = create_app()


def run() -> None:
    logger.info("🚀 %s en http://%s:%s (storage: %s)", settings.PROJECT_NAME, settings.HOST, settings.PORT, settings.STORAGE_MODE)
    # Se pasa el objeto app: con `python -m` la import string crearía otra app
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
        access_log=True,
        log_level=settings.LOG_LEVEL.lower(),
    )


# Run
if __name__ == "__main__":
    run()
