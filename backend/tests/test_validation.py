# test_validation.py - Reglas de validación previas a escritura

import pytest

from inventory_app.models.item import MAX_QUANTITY
from inventory_app.services.validation import (
    MSG_NEGATIVE,
    MSG_NOT_OBJECT,
    MSG_REQUIRED,
    validate_item,
)
from inventory_app.utils.errors import ErrorKind, ItemValidationError

VALID = {
    "name": "Office Chair",
    "description": "Ergonomic",
    "quantity": 8,
    "price": 299.99,
    "category": "Furniture",
}


def test_valid_payload_returns_business_fields_only():
    fields = validate_item({**VALID, "_id": "x", "updatedAt": "later"})
    assert fields == VALID


def test_numeric_strings_are_coerced():
    fields = validate_item({**VALID, "quantity": "3", "price": "4.5"})
    assert fields["quantity"] == 3
    assert fields["price"] == 4.5


def test_zero_is_allowed():
    fields = validate_item({**VALID, "quantity": 0, "price": 0})
    assert fields["quantity"] == 0
    assert fields["price"] == 0.0


@pytest.mark.parametrize("payload", [None, [], "text", 42])
def test_non_object_body(payload):
    with pytest.raises(ItemValidationError) as exc:
        validate_item(payload)
    assert exc.value.message == MSG_NOT_OBJECT


@pytest.mark.parametrize("field,value", [
    ("name", ""),
    ("description", "  "),
    ("category", None),
    ("quantity", None),
    ("price", None),
])
def test_required_fields(field, value):
    with pytest.raises(ItemValidationError) as exc:
        validate_item({**VALID, field: value})
    assert exc.value.message == MSG_REQUIRED
    assert exc.value.kind is ErrorKind.VALIDATION


@pytest.mark.parametrize("field,value", [("quantity", -1), ("price", -0.5)])
def test_negative_numbers(field, value):
    with pytest.raises(ItemValidationError) as exc:
        validate_item({**VALID, field: value})
    assert exc.value.message == MSG_NEGATIVE


@pytest.mark.parametrize("field,value", [
    ("quantity", 1.5),
    ("quantity", "lots"),
    ("price", "free"),
    ("name", 123),
])
def test_bad_types_name_the_field(field, value):
    with pytest.raises(ItemValidationError) as exc:
        validate_item({**VALID, field: value})
    assert exc.value.message.startswith(f"Invalid value for '{field}'")


def test_quantity_above_8_byte_limit_is_rejected():
    with pytest.raises(ItemValidationError) as exc:
        validate_item({**VALID, "quantity": 10**20})
    assert exc.value.message.startswith("Invalid value for 'quantity'")


def test_largest_8_byte_quantity_is_accepted():
    assert validate_item({**VALID, "quantity": MAX_QUANTITY})["quantity"] == MAX_QUANTITY
