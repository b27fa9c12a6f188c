"""
BDD step definitions for role-based inventory access (pytest-bdd).
"""

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

scenarios("../features/inventory.feature")


@pytest.fixture
def accounts():
    """email -> {"id", "headers"} for every signed-up actor."""
    return {}


@pytest.fixture
def current():
    """The item under discussion across steps."""
    return {}


def _create(api, accounts, email, **fields):
    return api.post(
        "/api/v1/items",
        headers=accounts[email]["headers"],
        json={"description": None, **fields},
    )


@given(parsers.parse('a signed-up "{role}" account "{email}"'))
def signed_up_account(api, accounts, role, email):
    r = api.post("/api/v1/auth/signup", json={"email": email, "password": "password123", "role": role})
    assert r.status_code == 201, r.text
    body = r.json()
    accounts[email] = {
        "id": body["user"]["id"],
        "headers": {"Authorization": f"Bearer {body['access_token']}"},
    }


@given(parsers.parse('"{email}" owns an item with SKU "{sku}"'))
def owns_item(api, accounts, email, sku):
    r = _create(api, accounts, email, name="Thing", quantity=1, price=1, category="Misc", sku=sku)
    assert r.status_code == 201, r.text


@when(
    parsers.parse(
        '"{email}" creates "{name}" with quantity {quantity:d}, price {price:g}, '
        'category "{category}" and SKU "{sku}"'
    )
)
def create_item(api, accounts, current, response, email, name, quantity, price, category, sku):
    r = _create(api, accounts, email, name=name, quantity=quantity, price=price, category=category, sku=sku)
    response["status"] = r.status_code
    response["body"] = r.json()
    if r.status_code == 201:
        current.update(r.json())


@when(parsers.parse('"{email}" sets the item quantity to {quantity:d}'))
def set_quantity(api, accounts, current, response, email, quantity):
    r = api.patch(f"/api/v1/items/{current['id']}", headers=accounts[email]["headers"], json={"quantity": quantity})
    response["status"] = r.status_code
    response["body"] = r.json()


@when(parsers.parse('"{email}" lists the inventory'))
def list_inventory(api, accounts, response, email):
    r = api.get("/api/v1/items", headers=accounts[email]["headers"])
    response["status"] = r.status_code
    response["body"] = r.json()


@then(parsers.parse("the response status should be {status:d}"))
def response_status(response, status):
    assert response["status"] == status, response["body"]


@then(parsers.parse('the item is owned by "{email}"'))
def item_owned_by(accounts, response, email):
    assert response["body"]["ownerId"] == accounts[email]["id"]


@then(parsers.parse('the item has quantity {quantity:d} and name "{name}"'))
def item_has(response, quantity, name):
    assert response["body"]["quantity"] == quantity
    assert response["body"]["name"] == name


@then(parsers.parse('only items owned by "{email}" are returned'))
def only_owned_by(accounts, response, email):
    assert response["body"]
    assert all(item["ownerId"] == accounts[email]["id"] for item in response["body"])


@then(parsers.parse("{count:d} items are returned"))
def count_returned(response, count):
    assert len(response["body"]) == count
