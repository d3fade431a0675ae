"""Shared BDD fixtures and step definitions for the Inventory domain."""

import pytest
from inventory.adjustment.service import AdjustmentService
from inventory.product.product import Product
from inventory.queries import QueryService
from inventory.store import build_inventory
from protean.exceptions import ObjectNotFoundError, ValidationError
from pytest_bdd import given, parsers, then


class Outcome:
    """What the last When step produced: an adjustment or the error that stopped it."""

    def __init__(self):
        self.adjustment = None
        self.rejection = None

    @property
    def rejected(self):
        return self.rejection is not None


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def store():
    return build_inventory()


@pytest.fixture()
def service(store):
    return AdjustmentService(store)


@pytest.fixture()
def queries(store):
    return QueryService(store)


@pytest.fixture()
def outcome():
    return Outcome()


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse('a product "{sku}" with {stock:d} units on hand and a minimum of {minimum:d}'),
    target_fixture="product_id",
)
def _(store, sku, stock, minimum):
    product = Product.create(sku=sku, name=f"Product {sku}", current_stock=stock, min_stock=minimum)
    store.catalog.add(product)
    return product.id


@given(
    parsers.cfparse('a discontinued product "{sku}" with {stock:d} units on hand'),
    target_fixture="product_id",
)
def _(store, sku, stock):
    product = Product.create(sku=sku, name=f"Product {sku}", current_stock=stock, discontinued=True)
    store.catalog.add(product)
    return product.id


# ---------------------------------------------------------------------------
# Then steps: shared assertions
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the product has {stock:d} units on hand"))
def _(queries, product_id, stock):
    assert queries.get_by_id(product_id).current_stock == stock


@then(parsers.cfparse('the product status is "{status}"'))
def _(queries, product_id, status):
    assert queries.get_by_id(product_id).status == status


@then(parsers.cfparse("the product has {count:d} adjustments recorded"))
def _(queries, product_id, count):
    assert len(queries.history(product_id)) == count


@then("the action fails with a validation error")
def _(outcome):
    assert outcome.rejected
    assert isinstance(outcome.rejection, ValidationError)


@then("the action fails because the product does not exist")
def _(outcome):
    assert outcome.rejected
    assert isinstance(outcome.rejection, ObjectNotFoundError)


@then("nothing is recorded in the ledger")
def _(store):
    assert len(store.ledger) == 0
