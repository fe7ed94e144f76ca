"""Cart activity log — records every cart line event in the structured log."""

import structlog
from protean.utils.mixins import handle

from storefront.cart.cart import Cart
from storefront.cart.events import CartLineAdded, CartLineQuantityChanged, CartLineRemoved
from storefront.domain import storefront

logger = structlog.get_logger(__name__)


@storefront.event_handler(part_of=Cart)
class CartActivityEventHandler:
    @handle(CartLineAdded)
    def on_line_added(self, event: CartLineAdded) -> None:
        logger.info(
            "Cart line added",
            line_id=event.line_id,
            product_id=event.product_id,
            quantity=event.quantity,
            line_quantity=event.line_quantity,
        )

    @handle(CartLineQuantityChanged)
    def on_quantity_changed(self, event: CartLineQuantityChanged) -> None:
        logger.info(
            "Cart line quantity changed",
            line_id=event.line_id,
            previous_quantity=event.previous_quantity,
            new_quantity=event.new_quantity,
        )

    @handle(CartLineRemoved)
    def on_line_removed(self, event: CartLineRemoved) -> None:
        logger.info("Cart line removed", line_id=event.line_id, product_id=event.product_id)
