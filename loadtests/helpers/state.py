"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state: no cross-user sharing.
State tracks the menu item a simulated cook put on the shelf so follow-up
operations can reference it.
"""

from dataclasses import dataclass


@dataclass
class ShelfItemState:
    """Tracks state for a single menu item on the shelf."""

    item_id: int | None = None
    quantity: int = 0
    version: int = 0
