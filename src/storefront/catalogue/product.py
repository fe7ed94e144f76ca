"""Product aggregate — the read-only entries of the storefront catalogue."""

from protean.fields import Float, Integer, String, Text

from storefront.domain import storefront


@storefront.aggregate
class Product:
    """A purchasable item. Created once when the catalogue is seeded, never mutated."""

    id = Integer(identifier=True)
    name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0, max_value=1_000_000.0)
    image = String(max_length=1024, default="")
    description = Text(default="")


@storefront.repository(part_of=Product)
class ProductRepository:
    def list_all(self) -> list[Product]:
        """Every product in the catalogue, ordered by id."""
        products = self._dao.query.all().items
        return sorted(products, key=lambda product: product.id)

    def has_product(self, product_id: int) -> bool:
        return bool(self._dao.query.filter(id=product_id).all().items)
