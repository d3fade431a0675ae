"""Stress test scenarios for per-product lock contention.

HotProductUser hammers a single product so every request queues on the same
product lock. SpikeUser simulates sudden bursts of searches.
"""

from locust import HttpUser, constant_pacing, task

from loadtests.data_generators import adjustment_data, demo_credentials, search_params

HOT_PRODUCT_ID = "1"


class _TokenUser(HttpUser):
    abstract = True

    def on_start(self):
        resp = self.client.post("/auth/login", json=demo_credentials(), name="[STRESS] POST /auth/login")
        self.headers = {"Authorization": f"Bearer {resp.json()['token']}"} if resp.ok else {}


class HotProductUser(_TokenUser):
    """Stress test: every user adjusts the same product.

    Target: serialize all writes on one product lock.
    Check afterwards: GET /products/1/adjustments must chain, each entry's
    previous_stock equal to the next older entry's new_stock.
    """

    wait_time = constant_pacing(0.1)  # ~10 requests/sec per user

    @task(4)
    def adjust_hot_product(self):
        self.client.patch(
            f"/products/{HOT_PRODUCT_ID}/stock",
            json=adjustment_data(),
            headers=self.headers,
            name="[STRESS] PATCH /products/{id}/stock",
        )

    @task(1)
    def read_hot_product(self):
        self.client.get(f"/products/{HOT_PRODUCT_ID}", headers=self.headers, name="[STRESS] GET /products/{id}")


class SpikeUser(_TokenUser):
    """Spike test: rapid-fire searches.

    Spawn 50-100 of these simultaneously to see how reads hold up while
    HotProductUser keeps the write lock busy.
    """

    wait_time = constant_pacing(0.05)  # ~20 req/sec per user

    @task
    def rapid_search(self):
        self.client.get("/products", params=search_params(), headers=self.headers, name="[SPIKE] GET /products")
