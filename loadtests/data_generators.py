"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the storefront's validation rules
(EmailAddress VO, positive whole quantities) and use the camelCase field
names expected by the API's Pydantic request schemas.
"""

import random
import uuid

from faker import Faker

fake = Faker()

DEFAULT_PRODUCT_IDS = list(range(1, 9))


def valid_email() -> str:
    """Generate emails that pass EmailAddress VO validation.

    Rules: exactly one @, no spaces/tabs, valid domain with dot,
    no leading/trailing dots, no consecutive dots.
    """
    local = fake.user_name()[:20]
    domain = fake.free_email_domain()
    return f"{local}.{uuid.uuid4().hex[:4]}@{domain}"


def customer_name() -> str:
    return fake.name()


def cart_item_data(product_ids=None) -> dict:
    """Payload for POST /api/cart."""
    return {
        "productId": random.choice(product_ids or DEFAULT_PRODUCT_IDS),
        "quantity": random.randint(1, 3),
    }


def quantity_update_data() -> dict:
    """Payload for PUT /api/cart/{lineId}."""
    return {"quantity": random.randint(1, 5)}


def checkout_data(cart_items: list[dict]) -> dict:
    """Payload for POST /api/checkout from the items of GET /api/cart."""
    return {
        "cartItems": cart_items,
        "name": customer_name(),
        "email": valid_email(),
    }


# ---------- Invalid payloads (expected 4xx) ----------


def invalid_cart_item_data() -> dict:
    """A payload the API must reject with 400."""
    return random.choice(
        [
            {"productId": 1, "quantity": 0},
            {"productId": 1, "quantity": -1},
            {"productId": 1, "quantity": 1.5},
            {"quantity": 1},
        ]
    )
