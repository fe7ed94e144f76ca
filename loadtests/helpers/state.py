"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance keeps its own view of what it put in the shared
cart, so follow-up operations can reference the line ids it was handed.
Other users mutate the same cart, so a tracked line may vanish at any time.
"""

from dataclasses import dataclass, field


@dataclass
class CatalogueState:
    """Product ids discovered from GET /api/products."""

    product_ids: list[int] = field(default_factory=list)


@dataclass
class CartState:
    """Lines this user has added to the shared cart."""

    line_ids: list[int] = field(default_factory=list)
    item_count: int = 0

    def forget(self, line_id: int) -> None:
        if line_id in self.line_ids:
            self.line_ids.remove(line_id)
