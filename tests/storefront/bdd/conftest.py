"""Shared BDD fixtures and step definitions for the storefront."""

from decimal import Decimal

import pytest
from pytest_bdd import given, parsers, then
from storefront.cart import service as cart_service


@pytest.fixture()
def error():
    """Container for capturing exceptions raised by When steps."""
    return {"exc": None}


@pytest.fixture()
def lines():
    """Line ids returned by the cart, keyed by product id."""
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("the default catalogue")
def default_catalogue(catalogue):
    assert len(catalogue) == 8


@given("an empty cart")
def empty_cart():
    assert cart_service.get_cart().is_empty


@given(parsers.cfparse("product {product_id:d} is in the cart with quantity {qty:d}"))
def product_in_cart(product_id, qty, lines):
    result = cart_service.add_item(product_id, qty)
    lines[product_id] = result["id"]


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the cart has {count:d} line"))
def cart_has_one_line(count):
    assert len(cart_service.get_cart().items) == count


@then(parsers.cfparse("the cart has {count:d} lines"))
def cart_has_n_lines(count):
    assert len(cart_service.get_cart().items) == count


@then(parsers.cfparse('the cart total is "{total}"'))
def cart_total_is(total):
    assert cart_service.get_cart().total == Decimal(total)


@then(parsers.cfparse("product {product_id:d} has quantity {qty:d}"))
def product_has_quantity(product_id, qty):
    item = next(item for item in cart_service.get_cart().items if item.product_id == product_id)
    assert item.quantity == qty


@then(parsers.cfparse('the request is rejected with "{message}"'))
def request_rejected(error, message):
    assert error["exc"] is not None
    assert message in str(error["exc"])
