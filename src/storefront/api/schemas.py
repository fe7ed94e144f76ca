"""Pydantic request/response schemas for the storefront API.

These are the external contracts, camelCase on the wire and snake_case in
Python, kept separate from the internal Protean commands.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictInt
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------
class ProductResponse(CamelModel):
    id: int
    name: str
    price: float
    image: str
    description: str


# ---------------------------------------------------------------------------
# Cart Request Schemas
# ---------------------------------------------------------------------------
class AddToCartRequest(CamelModel):
    # Optional so that a missing productId reaches the cart service and is
    # reported with the same 400 body as any other invalid argument.
    product_id: StrictInt | None = None
    quantity: StrictInt | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "productId": 1,
                    "quantity": 1,
                }
            ]
        }
    }


class UpdateCartQuantityRequest(CamelModel):
    quantity: StrictInt | None = None


# ---------------------------------------------------------------------------
# Cart Response Schemas
# ---------------------------------------------------------------------------
class CartLineResponse(CamelModel):
    id: int
    product_id: int
    quantity: int


class CartQuantityResponse(CamelModel):
    id: int
    quantity: int


class RemovedLineResponse(CamelModel):
    id: int


class CartItemResponse(CamelModel):
    id: int
    line_id: int
    product_id: int
    name: str
    price: float
    image: str
    quantity: int
    subtotal: float


class CartResponse(CamelModel):
    items: list[CartItemResponse]
    total: float


# ---------------------------------------------------------------------------
# Checkout
# ---------------------------------------------------------------------------
class CheckoutRequest(CamelModel):
    cart_items: list[dict[str, Any]] = []
    name: str = ""
    email: str = ""

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "cartItems": [
                        {"id": 1, "productId": 1, "name": "Wireless Headphones", "price": 79.99, "quantity": 3}
                    ],
                    "name": "Ada Lovelace",
                    "email": "ada@example.com",
                }
            ]
        }
    }


class ReceiptResponse(CamelModel):
    order_id: str
    customer_name: str
    customer_email: str
    timestamp: datetime
    items: list[dict[str, Any]]
    total: float
