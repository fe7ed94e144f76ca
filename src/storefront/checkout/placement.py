"""Order placement — turns a priced cart snapshot into a receipt.

The snapshot is whatever the client last saw of the cart: a list of items
carrying at least ``price`` and ``quantity``. Items are copied to the receipt
as given and the total is recomputed from them. Nothing is persisted and the
cart is left untouched.
"""

import copy
from datetime import UTC, datetime

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Dict, List, String
from protean.utils.globals import current_domain

from storefront.cart.cart import MAX_LINE_QUANTITY
from storefront.cart.pricing import line_subtotal, total_of
from storefront.checkout.order import Order
from storefront.checkout.receipt import Receipt
from storefront.domain import logger, storefront
from storefront.shared.email import EmailAddress


@storefront.command(part_of="Order")
class PlaceOrder:
    customer_name = String(required=True, max_length=255)
    customer_email = String(required=True, max_length=254)
    items = List(content_type=Dict)


def _item_quantity(item, position):
    quantity = item.get("quantity")
    if isinstance(quantity, bool) or not isinstance(quantity, int) or not 1 <= quantity <= MAX_LINE_QUANTITY:
        raise ValidationError({"items": [f"Item {position} has an invalid quantity"]})
    return quantity


def _item_subtotal(item, position):
    if not isinstance(item, dict) or "price" not in item:
        raise ValidationError({"items": [f"Item {position} has no price"]})

    quantity = _item_quantity(item, position)
    try:
        return line_subtotal(item["price"], quantity)
    except ValidationError as exc:
        raise ValidationError({"items": [f"Item {position} has an invalid price: {item['price']!r}"]}) from exc


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        items = list(command.items or [])
        if not items:
            raise ValidationError({"items": ["Cart is empty"]})

        name = (command.customer_name or "").strip()
        if not name:
            raise ValidationError({"customer_name": ["Customer name is required"]})

        order = Order(
            customer_name=name,
            customer_email=EmailAddress(address=command.customer_email.strip()),
            placed_at=datetime.now(UTC),
        )
        subtotals = [_item_subtotal(item, position) for position, item in enumerate(items, start=1)]

        receipt = Receipt(
            order_id=str(order.id),
            customer_name=order.customer_name,
            customer_email=order.customer_email.address,
            timestamp=order.placed_at,
            items=tuple(copy.deepcopy(items)),
            total=total_of(subtotals),
        )

        logger.info(
            "Order placed",
            order_id=receipt.order_id,
            item_count=len(receipt.items),
            total=str(receipt.total),
        )
        return receipt


def place_order(items, customer_name, customer_email) -> Receipt:
    """Record a checkout for ``items`` and return its receipt."""
    return current_domain.process(
        PlaceOrder(
            customer_name=customer_name,
            customer_email=customer_email,
            items=items,
        ),
        asynchronous=False,
    )
