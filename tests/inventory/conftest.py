import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def inventory_bed():
    from inventory.domain import inventory

    bed = DomainFixture(inventory)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(inventory_bed):
    with inventory_bed.domain_context():
        yield


@pytest.fixture()
def make_product():
    """Factory for products with sensible defaults."""
    from inventory.product.product import Product

    def _make(**overrides):
        defaults = {
            "sku": "ELEC-001",
            "name": "Wireless Keyboard",
            "description": "Ergonomic wireless keyboard with backlit keys",
            "category": "electronics",
            "current_stock": 150,
            "min_stock": 20,
            "max_stock": 500,
            "location": {"zone": "A", "aisle": "01", "rack": "R1", "shelf": "S3"},
            "price": 49.99,
        }
        defaults.update(overrides)
        return Product.create(**defaults)

    return _make


@pytest.fixture()
def store():
    from inventory.store import build_inventory

    return build_inventory()
