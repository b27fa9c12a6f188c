"""
Validation layer tests - per-field rules for full and partial item payloads.
"""

from decimal import Decimal

import pytest

from inventory_tracker.core.exceptions import PayloadValidationError
from inventory_tracker.schemas.item import ItemCreate, ItemUpdate
from inventory_tracker.services.validation import validate_item_payload
from tests.factories import WIDGET, item_payload


def _errors(payload, partial=False) -> PayloadValidationError:
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_item_payload(payload, partial=partial)
    return exc_info.value


def test_valid_full_payload():
    data = validate_item_payload(WIDGET)
    assert isinstance(data, ItemCreate)
    assert data.name == "Widget"
    assert data.quantity == 5
    assert data.price == Decimal("9.99")
    assert data.sku == "WID-1"


def test_price_with_three_decimals_is_rejected():
    err = _errors(item_payload(price=9.999))
    assert err.fields == ["price"]
    assert "2 decimal places" in err.errors[0].message


def test_two_violations_are_both_reported_in_field_order():
    err = _errors(item_payload(quantity=-1, price=-5))
    assert err.fields == ["quantity", "price"]


def test_full_schema_requires_every_required_field():
    err = _errors({"description": "only a description"})
    assert err.fields == ["name", "quantity", "price", "category", "sku"]


@pytest.mark.parametrize("name", ["", "a", "  a  ", "x" * 101])
def test_name_length_is_checked_after_trimming(name):
    assert _errors(item_payload(name=name)).fields == ["name"]


def test_name_is_stored_as_supplied():
    assert validate_item_payload(item_payload(name="  ab")).name == "  ab"


def test_name_upper_bound_ignores_surrounding_whitespace():
    padded = "  " + "a" * 99
    assert validate_item_payload(item_payload(name=padded)).name == padded
    assert _errors(item_payload(name="  " + "a" * 101)).fields == ["name"]


def test_description_limit():
    assert _errors(item_payload(description="d" * 501)).fields == ["description"]
    assert validate_item_payload(item_payload(description="d" * 500)).description == "d" * 500


@pytest.mark.parametrize("quantity", [-1, 1_000_000, 2.5, 5.0, "5", True])
def test_quantity_must_be_an_integer_in_range(quantity):
    assert _errors(item_payload(quantity=quantity)).fields == ["quantity"]


@pytest.mark.parametrize("quantity", [0, 999999])
def test_quantity_bounds_are_inclusive(quantity):
    assert validate_item_payload(item_payload(quantity=quantity)).quantity == quantity


@pytest.mark.parametrize("price", [-0.01, 1000000, 999999.999, True, "abc"])
def test_invalid_prices(price):
    assert _errors(item_payload(price=price)).fields == ["price"]


@pytest.mark.parametrize(
    "price, expected",
    [(0, Decimal("0")), (999999.99, Decimal("999999.99")), ("10.50", Decimal("10.50")), (0.1, Decimal("0.1"))],
)
def test_valid_prices(price, expected):
    assert validate_item_payload(item_payload(price=price)).price == expected


@pytest.mark.parametrize("sku", ["", "WID 1", "WID_1", "wid#1", "S" * 51])
def test_invalid_skus(sku):
    assert _errors(item_payload(sku=sku)).fields == ["sku"]


def test_sku_accepts_letters_digits_and_hyphens_in_any_case():
    assert validate_item_payload(item_payload(sku="aB-09-z")).sku == "aB-09-z"


@pytest.mark.parametrize("category", ["", "c" * 51])
def test_category_length(category):
    assert _errors(item_payload(category=category)).fields == ["category"]


def test_owner_fields_in_payload_are_ignored():
    data = validate_item_payload(item_payload(owner_id="someone", ownerId="someone", userId="x"))
    assert "owner_id" not in data.model_dump()


def test_payload_must_be_an_object():
    assert _errors(["not", "an", "object"]).fields == ["body"]


def test_partial_payload_checks_only_supplied_fields():
    data = validate_item_payload({"quantity": 3}, partial=True)
    assert isinstance(data, ItemUpdate)
    assert data.changes() == {"quantity": 3}


def test_partial_payload_uses_the_same_rules():
    err = _errors({"price": 1.234, "sku": "bad sku"}, partial=True)
    assert err.fields == ["price", "sku"]


def test_empty_partial_payload_changes_nothing():
    assert validate_item_payload({}, partial=True).changes() == {}


def test_partial_null_clears_description_only():
    assert validate_item_payload({"description": None}, partial=True).changes() == {"description": None}
    err = _errors({"name": None, "quantity": None}, partial=True)
    assert err.fields == ["name", "quantity"]
