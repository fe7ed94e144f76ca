"""Domain events for the Cart aggregate."""

from protean.fields import Identifier, Integer

from storefront.domain import storefront


@storefront.event(part_of="Cart")
class CartLineAdded:
    """A product was put in the cart, either on a new line or merged into its existing line."""

    __version__ = 1

    cart_id = Identifier(required=True)
    line_id = Integer(required=True)
    product_id = Integer(required=True)
    quantity = Integer(required=True)  # requested quantity
    line_quantity = Integer(required=True)  # quantity on the line afterwards


@storefront.event(part_of="Cart")
class CartLineQuantityChanged:
    """The quantity of a cart line was set to a new absolute value."""

    __version__ = 1

    cart_id = Identifier(required=True)
    line_id = Integer(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@storefront.event(part_of="Cart")
class CartLineRemoved:
    """A whole line was taken out of the cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    line_id = Integer(required=True)
    product_id = Integer(required=True)
