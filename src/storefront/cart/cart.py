"""Shared shopping cart aggregate and its line entity.

The storefront keeps exactly one cart. Each line references a catalogue
product by id and there is never more than one line per product: adding a
product that is already in the cart merges into its line. Line ids come from
a counter stored on the cart, so they only ever increase and a removed line's
id is not handed out again.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, HasMany, Integer

from storefront.cart.events import CartLineAdded, CartLineQuantityChanged, CartLineRemoved
from storefront.domain import storefront

SHARED_CART_ID = "shared"
MAX_LINE_QUANTITY = 9999


def validate_quantity(quantity) -> int:
    """Return ``quantity`` if it is a whole number from 1 to MAX_LINE_QUANTITY, else raise ValidationError."""
    if isinstance(quantity, bool) or not isinstance(quantity, int) or not 1 <= quantity <= MAX_LINE_QUANTITY:
        raise ValidationError({"quantity": [f"Quantity must be a whole number from 1 to {MAX_LINE_QUANTITY}"]})
    return quantity


def validate_identifier(value, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError({field_name: [f"{field_name} must be an integer"]})
    return value


@storefront.entity(part_of="Cart")
class CartLine:
    id = Integer(identifier=True)
    product_id = Integer(required=True)
    quantity = Integer(required=True, min_value=1, max_value=MAX_LINE_QUANTITY)


@storefront.aggregate
class Cart:
    lines = HasMany(CartLine)
    last_line_id = Integer(default=0)
    updated_at = DateTime()

    @invariant.post
    def one_line_per_product(self):
        product_ids = [line.product_id for line in self.lines]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"lines": ["A product can appear on at most one cart line"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls):
        return cls(id=SHARED_CART_ID, last_line_id=0, updated_at=datetime.now(UTC))

    # -------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------
    def ordered_lines(self) -> list[CartLine]:
        """Lines in creation order."""
        return sorted(self.lines, key=lambda line: line.id)

    def line_for_product(self, product_id) -> CartLine | None:
        return next((line for line in self.lines if line.product_id == product_id), None)

    def get_line(self, line_id) -> CartLine:
        line = next((line for line in self.lines if line.id == line_id), None)
        if line is None:
            raise ObjectNotFoundError(f"Cart item {line_id} not found")
        return line

    # -------------------------------------------------------------------
    # Line management
    # -------------------------------------------------------------------
    def add_product(self, product_id, quantity) -> CartLine:
        """Put ``quantity`` units of a product in the cart, merging into its line if present."""
        validate_quantity(quantity)

        line = self.line_for_product(product_id)
        if line is not None:
            if line.quantity + quantity > MAX_LINE_QUANTITY:
                raise ValidationError(
                    {"quantity": [f"A cart line cannot hold more than {MAX_LINE_QUANTITY} units"]}
                )
            line.quantity += quantity
        else:
            self.last_line_id = (self.last_line_id or 0) + 1
            line = CartLine(id=self.last_line_id, product_id=product_id, quantity=quantity)
            self.add_lines(line)

        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartLineAdded(
                cart_id=str(self.id),
                line_id=line.id,
                product_id=product_id,
                quantity=quantity,
                line_quantity=line.quantity,
            )
        )
        return line

    def set_quantity(self, line_id, quantity) -> CartLine:
        """Replace the quantity of a line. Zero is rejected; removal is explicit."""
        validate_quantity(quantity)
        line = self.get_line(line_id)

        previous_quantity = line.quantity
        line.quantity = quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartLineQuantityChanged(
                cart_id=str(self.id),
                line_id=line.id,
                previous_quantity=previous_quantity,
                new_quantity=quantity,
            )
        )
        return line

    def remove_line(self, line_id) -> CartLine:
        """Take a whole line out of the cart, whatever its quantity."""
        line = self.get_line(line_id)

        self.remove_lines(line)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartLineRemoved(
                cart_id=str(self.id),
                line_id=line.id,
                product_id=line.product_id,
            )
        )
        return line


@storefront.repository(part_of=Cart)
class CartRepository:
    def current(self) -> Cart:
        """The shared cart; a fresh, unsaved one when nothing has been added yet."""
        try:
            return self.get(SHARED_CART_ID)
        except ObjectNotFoundError:
            return Cart.create()
