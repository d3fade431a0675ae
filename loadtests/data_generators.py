"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the API's Pydantic request
schemas: non-negative stock values and adjustment types and reasons from
the published vocabularies.
"""

import random

from faker import Faker

fake = Faker()

# ---------- Accounts ----------

DEMO_ACCOUNTS = [
    ("admin@warehouse.com", "admin123"),
    ("manager@warehouse.com", "manager123"),
    ("operator@warehouse.com", "operator123"),
    ("demo@warehouse.com", "demo"),
]


def demo_credentials() -> dict:
    email, password = random.choice(DEMO_ACCOUNTS)
    return {"email": email, "password": password}


# ---------- Products ----------

DEMO_PRODUCT_IDS = ["1", "2", "3", "4", "5", "6"]
DEMO_SKUS = ["ELEC-001", "ELEC-002", "FURN-001", "PACK-001", "TOOL-001", "ELEC-003"]
CATEGORIES = ["electronics", "furniture", "clothing", "food", "tools", "packaging", "other"]
STATUSES = ["in_stock", "low_stock", "out_of_stock", "discontinued"]
SEARCH_TERMS = ["keyboard", "usb", "desk", "box", "drill", "mouse", "ergonomic", "elec"]


def search_params() -> dict:
    """Random mix of search filters; some requests carry none at all."""
    params = {}
    if random.random() < 0.5:
        params["query"] = random.choice(SEARCH_TERMS)
    if random.random() < 0.3:
        params["category"] = random.choice(CATEGORIES)
    if random.random() < 0.2:
        params["status"] = random.choice(STATUSES)
    if random.random() < 0.2:
        params["max_stock"] = random.choice([0, 10, 100, 1000])
    return params


# ---------- Adjustments ----------

_REASONS_BY_TYPE = {
    "increase": ["received_shipment", "returned"],
    "decrease": ["sold", "damaged", "lost"],
    "correction": ["inventory_count", "other"],
    "transfer_in": ["transfer"],
    "transfer_out": ["transfer"],
}


def adjustment_data(current_stock: int | None = None) -> dict:
    """Stock adjustment body whose type agrees with the direction of the change."""
    current_stock = current_stock if current_stock is not None else random.randint(0, 500)
    adjustment_type = random.choice(list(_REASONS_BY_TYPE))

    if adjustment_type in ("increase", "transfer_in"):
        new_stock = current_stock + random.randint(1, 100)
    elif adjustment_type in ("decrease", "transfer_out"):
        new_stock = max(current_stock - random.randint(1, 20), 0)
    else:
        new_stock = max(current_stock + random.randint(-10, 10), 0)

    return {
        "new_stock": new_stock,
        "adjustment_type": adjustment_type,
        "reason": random.choice(_REASONS_BY_TYPE[adjustment_type]),
        "notes": fake.sentence(nb_words=6) if random.random() < 0.5 else None,
    }
