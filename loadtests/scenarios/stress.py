"""Stress test scenario for shared-cart contention.

CartContentionUser hammers POST /api/cart for a small set of products so that
concurrent adds keep merging into the same lines. Every accepted add must be
reflected in the line quantity; a lost update shows up as a line whose
quantity lags the number of successful adds.
"""

from locust import HttpUser, constant_pacing, task

HOT_PRODUCT_IDS = (1, 2)


class CartContentionUser(HttpUser):
    """Stress test: concurrent read-merge-write on the shared cart.

    No think time between requests; every task touches one of two lines.
    Monitor: GET /api/cart at the end of the run should show the sum of all
    accepted quantities for each hot product.
    """

    wait_time = constant_pacing(0.1)  # ~10 requests/sec per user

    @task(5)
    def add_hot_product(self):
        for product_id in HOT_PRODUCT_IDS:
            self.client.post(
                "/api/cart",
                json={"productId": product_id, "quantity": 1},
                name="[STRESS] POST /api/cart",
            )

    @task(1)
    def read_cart(self):
        self.client.get("/api/cart", name="[STRESS] GET /api/cart")
