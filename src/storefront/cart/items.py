"""Cart line management — commands and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Integer
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.catalogue.product import Product
from storefront.domain import storefront


@storefront.command(part_of="Cart")
class AddToCart:
    product_id = Integer(required=True)
    quantity = Integer(required=True, min_value=1)


@storefront.command(part_of="Cart")
class UpdateCartQuantity:
    line_id = Integer(required=True)
    quantity = Integer(required=True, min_value=1)


@storefront.command(part_of="Cart")
class RemoveFromCart:
    line_id = Integer(required=True)


@storefront.command_handler(part_of=Cart)
class ManageCartLinesHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        try:
            product = current_domain.repository_for(Product).get(command.product_id)
        except ObjectNotFoundError as exc:
            raise ObjectNotFoundError(f"Product {command.product_id} not found") from exc

        repo = current_domain.repository_for(Cart)
        cart = repo.current()
        line = cart.add_product(product.id, command.quantity)
        repo.add(cart)

        return {"id": line.id, "product_id": line.product_id, "quantity": line.quantity}

    @handle(UpdateCartQuantity)
    def update_cart_quantity(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.current()
        line = cart.set_quantity(command.line_id, command.quantity)
        repo.add(cart)

        return {"id": line.id, "quantity": line.quantity}

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.current()
        line = cart.remove_line(command.line_id)
        repo.add(cart)

        return line.id
