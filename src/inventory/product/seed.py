"""Demo products loaded into a fresh catalog."""

from datetime import UTC, datetime

from inventory.product.product import Product

DEMO_PRODUCTS = [
    {
        "product_id": "1",
        "sku": "ELEC-001",
        "name": "Wireless Keyboard",
        "description": "Ergonomic wireless keyboard with backlit keys",
        "category": "electronics",
        "current_stock": 150,
        "min_stock": 20,
        "max_stock": 500,
        "unit": "pieces",
        "location": {"zone": "A", "aisle": "01", "rack": "R1", "shelf": "S3"},
        "price": 49.99,
        "created_at": datetime(2024, 1, 15, tzinfo=UTC),
    },
    {
        "product_id": "2",
        "sku": "ELEC-002",
        "name": "USB-C Hub 7-in-1",
        "description": "Multi-port USB-C hub with HDMI and card reader",
        "category": "electronics",
        "current_stock": 8,
        "min_stock": 15,
        "max_stock": 200,
        "unit": "pieces",
        "location": {"zone": "A", "aisle": "01", "rack": "R2", "shelf": "S1"},
        "price": 39.99,
        "created_at": datetime(2024, 2, 20, tzinfo=UTC),
    },
    {
        "product_id": "3",
        "sku": "FURN-001",
        "name": "Standing Desk Frame",
        "description": "Electric height-adjustable desk frame",
        "category": "furniture",
        "current_stock": 0,
        "min_stock": 5,
        "max_stock": 50,
        "unit": "pieces",
        "location": {"zone": "B", "aisle": "03", "rack": "R1", "shelf": "S1"},
        "price": 299.99,
        "created_at": datetime(2024, 3, 1, tzinfo=UTC),
    },
    {
        "product_id": "4",
        "sku": "PACK-001",
        "name": "Cardboard Boxes (Medium)",
        "description": "12x12x12 inch shipping boxes",
        "category": "packaging",
        "current_stock": 2500,
        "min_stock": 500,
        "max_stock": 5000,
        "unit": "pieces",
        "location": {"zone": "C", "aisle": "01", "rack": "R1", "shelf": "S1"},
        "price": 1.25,
        "created_at": datetime(2024, 1, 1, tzinfo=UTC),
    },
    {
        "product_id": "5",
        "sku": "TOOL-001",
        "name": "Cordless Drill Set",
        "description": "20V cordless drill with battery and case",
        "category": "tools",
        "current_stock": 45,
        "min_stock": 10,
        "max_stock": 100,
        "unit": "pieces",
        "location": {"zone": "D", "aisle": "02", "rack": "R3", "shelf": "S2"},
        "price": 129.99,
        "created_at": datetime(2024, 4, 10, tzinfo=UTC),
    },
    {
        "product_id": "6",
        "sku": "ELEC-003",
        "name": "Bluetooth Mouse",
        "description": "Ergonomic vertical mouse with adjustable DPI",
        "category": "electronics",
        "current_stock": 78,
        "min_stock": 25,
        "max_stock": 300,
        "unit": "pieces",
        "location": {"zone": "A", "aisle": "01", "rack": "R1", "shelf": "S4"},
        "price": 34.99,
        "created_at": datetime(2024, 2, 15, tzinfo=UTC),
    },
]


def demo_products() -> list[Product]:
    return [Product.create(**attributes) for attributes in DEMO_PRODUCTS]
