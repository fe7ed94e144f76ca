"""Cart pricing — subtotals and totals in exact decimal arithmetic.

Catalogue prices are stored as floats; they are converted through their
shortest string form so that ``79.99`` becomes ``Decimal("79.99")`` and not
the binary approximation. Unit prices are capped at MAX_UNIT_PRICE and the
arithmetic runs at MONEY_PRECISION digits, so subtotals are exact and only
the total is rounded, half-up at the cent.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from protean.exceptions import ValidationError

CENT = Decimal("0.01")
ZERO = Decimal("0.00")
MAX_UNIT_PRICE = Decimal("1000000")
MONEY_PRECISION = 60


class CartIntegrityError(Exception):
    """A cart line refers to a product the catalogue does not know."""


def to_money(value) -> Decimal:
    """Convert a price-like value (float, int, str, Decimal) to a Decimal."""
    if isinstance(value, bool):
        raise ValidationError({"price": [f"Invalid price: {value!r}"]})
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise ValidationError({"price": [f"Invalid price: {value!r}"]}) from exc
    if not amount.is_finite():
        raise ValidationError({"price": [f"Invalid price: {value!r}"]})
    return amount


def round_money(amount: Decimal) -> Decimal:
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def to_unit_price(value) -> Decimal:
    """A price between 0 and MAX_UNIT_PRICE, so that totals stay well inside decimal precision."""
    price = to_money(value)
    if not ZERO <= price <= MAX_UNIT_PRICE:
        raise ValidationError({"price": [f"Price must be between 0 and {MAX_UNIT_PRICE}"]})
    return price


def line_subtotal(price, quantity: int) -> Decimal:
    price = to_unit_price(price)
    with localcontext() as ctx:
        ctx.prec = MONEY_PRECISION
        return price * quantity


def total_of(subtotals) -> Decimal:
    """Sum of subtotals rounded half-up to cents; ``0.00`` for no subtotals."""
    with localcontext() as ctx:
        ctx.prec = MONEY_PRECISION
        return round_money(sum(subtotals, ZERO))


@dataclass(frozen=True)
class PricedLine:
    """A cart line joined with its product."""

    line_id: int
    product_id: int
    name: str
    price: Decimal
    image: str
    quantity: int
    subtotal: Decimal


@dataclass(frozen=True)
class CartSummary:
    items: tuple[PricedLine, ...]
    total: Decimal

    @property
    def is_empty(self) -> bool:
        return not self.items


def price_line(line, product) -> PricedLine:
    price = to_unit_price(product.price)
    return PricedLine(
        line_id=line.id,
        product_id=line.product_id,
        name=product.name,
        price=price,
        image=product.image or "",
        quantity=line.quantity,
        subtotal=line_subtotal(price, line.quantity),
    )


def price_cart(lines, products_by_id) -> CartSummary:
    """Join ``lines`` with the products in ``products_by_id`` and total them.

    Raises:
        CartIntegrityError: if a line's product is missing from ``products_by_id``.
    """
    priced = []
    for line in lines:
        product = products_by_id.get(line.product_id)
        if product is None:
            raise CartIntegrityError(f"Cart item {line.id} refers to unknown product {line.product_id}")
        priced.append(price_line(line, product))

    return CartSummary(items=tuple(priced), total=total_of(item.subtotal for item in priced))
