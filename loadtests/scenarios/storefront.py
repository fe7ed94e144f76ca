"""Storefront load test scenarios.

ShopperUser runs the full browse -> add -> update -> remove -> checkout
journey against the shared cart. BrowsingUser only reads.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import cart_item_data, checkout_data, invalid_cart_item_data, quantity_update_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import CartState, CatalogueState


class ShopperJourney(SequentialTaskSet):
    """List Products -> Add Items -> Update Quantity -> Remove Line -> Checkout.

    Line ids handed to this user may be removed by another user sharing the
    cart, so a 404 on update or remove is recorded as a success.
    """

    def on_start(self):
        self.catalogue = CatalogueState()
        self.cart = CartState()

    @task
    def list_products(self):
        with self.client.get("/api/products", catch_response=True, name="GET /api/products") as resp:
            if resp.status_code == 200:
                self.catalogue.product_ids = [product["id"] for product in resp.json()]
            else:
                resp.failure(f"List products failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def add_items(self):
        for _ in range(random.randint(1, 3)):
            with self.client.post(
                "/api/cart",
                json=cart_item_data(self.catalogue.product_ids),
                catch_response=True,
                name="POST /api/cart",
            ) as resp:
                if resp.status_code == 200:
                    line_id = resp.json()["id"]
                    if line_id not in self.cart.line_ids:
                        self.cart.line_ids.append(line_id)
                    self.cart.item_count += 1
                else:
                    resp.failure(f"Add to cart failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def update_quantity(self):
        if not self.cart.line_ids:
            return
        line_id = random.choice(self.cart.line_ids)
        with self.client.put(
            f"/api/cart/{line_id}",
            json=quantity_update_data(),
            catch_response=True,
            name="PUT /api/cart/{id}",
        ) as resp:
            if resp.status_code == 404:
                self.cart.forget(line_id)
                resp.success()
            elif resp.status_code != 200:
                resp.failure(f"Update quantity failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def remove_line(self):
        if not self.cart.line_ids:
            return
        line_id = self.cart.line_ids[0]
        with self.client.delete(
            f"/api/cart/{line_id}",
            catch_response=True,
            name="DELETE /api/cart/{id}",
        ) as resp:
            if resp.status_code in (200, 404):
                self.cart.forget(line_id)
                resp.success()
            else:
                resp.failure(f"Remove line failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def checkout(self):
        with self.client.get("/api/cart", catch_response=True, name="GET /api/cart") as resp:
            if resp.status_code != 200:
                resp.failure(f"Get cart failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()
                return
            items = resp.json()["items"]

        if not items:
            self.interrupt()
            return

        with self.client.post(
            "/api/checkout",
            json=checkout_data(items),
            catch_response=True,
            name="POST /api/checkout",
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Checkout failed: {resp.status_code} - {extract_error_detail(resp)}")
        self.interrupt()


class ShopperUser(HttpUser):
    """Simulates shoppers working the shared cart."""

    tasks = [ShopperJourney]
    wait_time = between(1, 3)


class BrowsingUser(HttpUser):
    """Read-only traffic: catalogue and cart views, plus the odd bad request."""

    wait_time = between(0.5, 2)

    @task(5)
    def list_products(self):
        self.client.get("/api/products", name="GET /api/products")

    @task(3)
    def view_product(self):
        self.client.get(f"/api/products/{random.randint(1, 8)}", name="GET /api/products/{id}")

    @task(3)
    def view_cart(self):
        self.client.get("/api/cart", name="GET /api/cart")

    @task(1)
    def invalid_add(self):
        with self.client.post(
            "/api/cart",
            json=invalid_cart_item_data(),
            catch_response=True,
            name="POST /api/cart [invalid]",
        ) as resp:
            if resp.status_code == 400:
                resp.success()
            else:
                resp.failure(f"Expected 400, got {resp.status_code}")
