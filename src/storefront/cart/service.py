"""Cart service — the four cart operations the storefront exposes.

Arguments are checked before anything touches the store, so a rejected call
leaves the cart exactly as it was. ``CartService`` owns the lock that every
operation runs under, including the unit of work that persists it: the
read-merge-write of ``add_item`` cannot interleave with another write to the
cart it guards.
"""

import threading

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart, validate_identifier, validate_quantity
from storefront.cart.items import AddToCart, RemoveFromCart, UpdateCartQuantity
from storefront.cart.pricing import CartIntegrityError, CartSummary, price_cart
from storefront.catalogue.product import Product
from storefront.domain import logger


class CartService:
    """Serialized access to the shared cart."""

    def __init__(self):
        self._lock = threading.RLock()

    def add_item(self, product_id, quantity) -> dict:
        """Add ``quantity`` units of a product; returns ``{id, product_id, quantity}`` of the line."""
        if product_id is None:
            raise ValidationError({"product_id": ["product_id is required"]})
        validate_identifier(product_id, "product_id")
        validate_quantity(quantity)

        with self._lock:
            return current_domain.process(AddToCart(product_id=product_id, quantity=quantity), asynchronous=False)

    def update_quantity(self, line_id, quantity) -> dict:
        """Set the absolute quantity of a line; returns ``{id, quantity}``."""
        validate_identifier(line_id, "line_id")
        validate_quantity(quantity)

        with self._lock:
            return current_domain.process(UpdateCartQuantity(line_id=line_id, quantity=quantity), asynchronous=False)

    def remove_item(self, line_id) -> int:
        """Delete a whole line; returns the removed line id."""
        validate_identifier(line_id, "line_id")

        with self._lock:
            return current_domain.process(RemoveFromCart(line_id=line_id), asynchronous=False)

    def get_cart(self) -> CartSummary:
        """Price every line of the shared cart against the catalogue."""
        with self._lock:
            cart = current_domain.repository_for(Cart).current()
            lines = cart.ordered_lines()

            product_repo = current_domain.repository_for(Product)
            products_by_id = {}
            for product_id in {line.product_id for line in lines}:
                try:
                    products_by_id[product_id] = product_repo.get(product_id)
                except ObjectNotFoundError as exc:
                    logger.error("Cart references a missing product", product_id=product_id)
                    raise CartIntegrityError(f"Cart refers to unknown product {product_id}") from exc

        return price_cart(lines, products_by_id)


shared_cart = CartService()

add_item = shared_cart.add_item
update_quantity = shared_cart.update_quantity
remove_item = shared_cart.remove_item
get_cart = shared_cart.get_cart
