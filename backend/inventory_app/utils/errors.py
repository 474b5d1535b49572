# errors.py - Tipos de error del dominio y manejadores de excepción

import enum
import logging
from typing import Optional

from fastapi import FastAPI
from starlette.exceptions import HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorKind(str, enum.Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    STORAGE = "storage"


class InventoryError(Exception):
    """Error base del inventario; `kind` decide el status HTTP en el borde."""

    kind: ErrorKind = ErrorKind.STORAGE
    default_message = "Inventory error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ItemValidationError(InventoryError):
    kind = ErrorKind.VALIDATION
    default_message = "Invalid item"


class ItemNotFoundError(InventoryError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Item not found"


class StorageError(InventoryError):
    kind = ErrorKind.STORAGE
    default_message = "Storage error"


STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.STORAGE: 500,
}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe_request_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Malformed JSON body"
    return first.get("msg") or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(InventoryError)
    async def inventory_exception_handler(request, exc: InventoryError):
        status_code = STATUS_BY_KIND[exc.kind]
        if status_code >= 500:
            logger.error("%s %s -> %s: %s", request.method, request.url.path, status_code, exc.message)
        return _error(status_code, exc.message)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request, exc: HTTPException):
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request, exc: RequestValidationError):
        return _error(400, _describe_request_error(exc))

    @app.exception_handler(Exception)
    async def generic_exception_handler(request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error(500, str(exc) or "Internal server error")
