# backend/inventory_app/services/validation.py
"""
Validación previa a escrituras (create/update).

Devuelve los cinco campos de negocio ya normalizados o lanza
ItemValidationError. Las claves desconocidas (_id, createdAt, ...) se ignoran.
"""
from __future__ import annotations

from typing import Any, Dict

from pydantic import ValidationError

from inventory_app.models.item import BUSINESS_FIELDS, ItemIn
from inventory_app.utils.errors import ItemValidationError

TEXT_FIELDS = ("name", "description", "category")
NUMERIC_FIELDS = ("quantity", "price")

MSG_NOT_OBJECT = "Request body must be a JSON object"
MSG_REQUIRED = "All fields are required"
MSG_NEGATIVE = "Quantity and price must be non-negative"


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_item(payload: Any) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise ItemValidationError(MSG_NOT_OBJECT)

    if any(_is_blank(payload.get(f)) for f in TEXT_FIELDS):
        raise ItemValidationError(MSG_REQUIRED)
    if any(payload.get(f) is None for f in NUMERIC_FIELDS):
        raise ItemValidationError(MSG_REQUIRED)

    try:
        item = ItemIn.model_validate({f: payload[f] for f in BUSINESS_FIELDS})
    except ValidationError as e:
        errors = e.errors()
        # Un valor negativo tiene su propio mensaje
        if any(err["type"] == "greater_than_equal" for err in errors):
            raise ItemValidationError(MSG_NEGATIVE) from e
        err = errors[0]
        field = err["loc"][0] if err["loc"] else "body"
        raise ItemValidationError(f"Invalid value for '{field}': {err['msg']}") from e

    return item.model_dump()
