"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state; nothing is shared across users.
"""

from dataclasses import dataclass


@dataclass
class OperatorState:
    """Tracks one simulated warehouse operator: their token and the product in hand."""

    token: str | None = None
    product_id: str | None = None
    last_known_stock: int | None = None

    @property
    def headers(self) -> dict:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}
