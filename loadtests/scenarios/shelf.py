"""Shelf load test scenarios.

Two stateful SequentialTaskSet journeys: a cook stocking the shelf during a
shift and a waiter draining it until it runs dry.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import add_item_data, update_item_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import ShelfItemState


class _ShelfJourney(SequentialTaskSet):
    def on_start(self):
        self.state = ShelfItemState()

    def _put_on_shelf(self, quantity=None):
        payload = add_item_data(quantity=quantity)
        with self.client.post(
            "/shelf",
            json=payload,
            catch_response=True,
            name="POST /shelf",
        ) as resp:
            if resp.status_code == 201:
                body = resp.json()
                self.state.item_id = body["item_id"]
                self.state.quantity = body["quantity"]
                self.state.version = body["version"]
            elif resp.status_code == 409:
                # Another user already owns this id; not a server fault.
                resp.success()
                self.interrupt()
            else:
                resp.failure(f"Add item failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()

    def _update(self, update_type, quantity, expect_shortfall=False):
        with self.client.put(
            f"/shelf/{self.state.item_id}",
            json=update_item_data(update_type, quantity),
            catch_response=True,
            name="PUT /shelf/{id}",
        ) as resp:
            if resp.status_code == 200:
                body = resp.json()
                self.state.quantity = body["quantity"]
                self.state.version = body["version"]
                return True
            if resp.status_code == 409 and expect_shortfall:
                resp.success()
            else:
                resp.failure(f"Update item failed: {resp.status_code}: {extract_error_detail(resp)}")
            return False


class CookShiftJourney(_ShelfJourney):
    """Add Item -> Top Up -> Fetch Item -> Fetch Shelf.

    Models a cook putting a freshly prepared dish on the shelf and topping
    it up as more portions come out of the kitchen.
    """

    @task
    def put_on_shelf(self):
        self._put_on_shelf()

    @task
    def top_up(self):
        self._update("ADD", random.randint(1, 10))

    @task
    def fetch_item(self):
        with self.client.get(
            f"/shelf/{self.state.item_id}",
            catch_response=True,
            name="GET /shelf/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Fetch item failed: {resp.status_code}: {extract_error_detail(resp)}")
            elif resp.json()["quantity"] != self.state.quantity:
                resp.failure("Fetched a stale quantity after an update")

    @task
    def fetch_shelf(self):
        with self.client.get("/shelf", catch_response=True, name="GET /shelf") as resp:
            if resp.status_code != 200:
                resp.failure(f"Fetch shelf failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class WaiterDrainJourney(_ShelfJourney):
    """Add Item -> Take until empty -> Take once more.

    Models waiters serving a dish until the shelf runs dry. The final take
    must be rejected with a shortfall.
    """

    @task
    def put_on_shelf(self):
        self._put_on_shelf(quantity=random.randint(3, 8))

    @task
    def serve_until_empty(self):
        while self.state.quantity > 0:
            if not self._update("TAKE", min(self.state.quantity, random.randint(1, 3))):
                break

    @task
    def take_from_empty_shelf(self):
        self._update("TAKE", 1, expect_shortfall=True)

    @task
    def done(self):
        self.interrupt()


class ShelfUser(HttpUser):
    """Locust user simulating kitchen shelf interactions.

    Weighted distribution:
    - 60% Cook shift (stocking and reading)
    - 40% Waiter drain (taking until empty)
    """

    wait_time = between(0.5, 2.0)
    tasks = {
        CookShiftJourney: 3,
        WaiterDrainJourney: 2,
    }
