"""Inventory load test scenarios.

Two stateful SequentialTaskSet journeys: an operator adjusting one product's
stock several times in a row, and a browser searching and drilling into
products and their history.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import DEMO_PRODUCT_IDS, DEMO_SKUS, adjustment_data, demo_credentials, search_params
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import OperatorState


class _AuthenticatedJourney(SequentialTaskSet):
    def on_start(self):
        self.state = OperatorState()
        with self.client.post(
            "/auth/login",
            json=demo_credentials(),
            catch_response=True,
            name="POST /auth/login",
        ) as resp:
            if resp.status_code == 200:
                self.state.token = resp.json()["token"]
            else:
                resp.failure(f"Login failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()


class StockAdjustmentJourney(_AuthenticatedJourney):
    """Login -> Read product -> Adjust x3 -> Read history.

    Several users landing on the same product contend for its lock; the
    history read afterwards must still come back newest first.
    """

    @task
    def read_product(self):
        self.state.product_id = random.choice(DEMO_PRODUCT_IDS)
        with self.client.get(
            f"/products/{self.state.product_id}",
            headers=self.state.headers,
            catch_response=True,
            name="GET /products/{id}",
        ) as resp:
            if resp.status_code == 200:
                self.state.last_known_stock = resp.json()["current_stock"]
            else:
                resp.failure(f"Read product failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def adjust_stock(self):
        for _ in range(3):
            with self.client.patch(
                f"/products/{self.state.product_id}/stock",
                json=adjustment_data(self.state.last_known_stock),
                headers=self.state.headers,
                catch_response=True,
                name="PATCH /products/{id}/stock",
            ) as resp:
                if resp.status_code == 200:
                    self.state.last_known_stock = resp.json()["new_stock"]
                else:
                    resp.failure(f"Adjust stock failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def read_history(self):
        with self.client.get(
            f"/products/{self.state.product_id}/adjustments",
            headers=self.state.headers,
            catch_response=True,
            name="GET /products/{id}/adjustments",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"History failed: {resp.status_code}: {extract_error_detail(resp)}")
                return

            stamps = [entry["adjusted_at"] for entry in resp.json()]
            if stamps != sorted(stamps, reverse=True):
                resp.failure("History is not newest first")

    @task
    def done(self):
        self.interrupt()


class BrowseJourney(_AuthenticatedJourney):
    """Login -> Search -> Lookup by SKU -> Read history."""

    @task
    def search(self):
        with self.client.get(
            "/products",
            params=search_params(),
            headers=self.state.headers,
            catch_response=True,
            name="GET /products",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Search failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def lookup_by_sku(self):
        sku = random.choice(DEMO_SKUS)
        with self.client.get(
            f"/products/sku/{sku.lower()}",
            headers=self.state.headers,
            catch_response=True,
            name="GET /products/sku/{sku}",
        ) as resp:
            if resp.status_code == 200:
                self.state.product_id = resp.json()["id"]
            else:
                resp.failure(f"SKU lookup failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def read_history(self):
        self.client.get(
            f"/products/{self.state.product_id}/adjustments",
            headers=self.state.headers,
            name="GET /products/{id}/adjustments",
        )

    @task
    def done(self):
        self.interrupt()


class InventoryUser(HttpUser):
    """Locust user simulating warehouse staff.

    Weighted distribution:
    - 60% Browsing (searches and lookups dominate)
    - 40% Stock adjustments
    """

    wait_time = between(0.5, 2.0)
    tasks = {
        BrowseJourney: 3,
        StockAdjustmentJourney: 2,
    }
