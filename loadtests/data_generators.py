"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the API's request validation
(menu item ids from 1000 up, non-blank names, positive quantities) and match
the field names expected by the Pydantic request schemas.
"""

import random

from faker import Faker

fake = Faker()

# Each simulated cook draws ids from a wide range so parallel users rarely
# collide on the same menu item.
ITEM_ID_RANGE = (1000, 9_999_999)


def menu_item_id() -> int:
    return random.randint(*ITEM_ID_RANGE)


def menu_item_name() -> str:
    dish = random.choice(["Soup", "Salad", "Burger", "Pasta", "Curry", "Wrap", "Pie"])
    return f"{fake.first_name()}'s {dish}"


def add_item_data(item_id: int | None = None, quantity: int | None = None) -> dict:
    return {
        "item_id": item_id or menu_item_id(),
        "item_name": menu_item_name(),
        "quantity": quantity or random.randint(5, 30),
    }


def update_item_data(update_type: str, quantity: int) -> dict:
    return {"update_type": update_type, "quantity": quantity}
