"""Catalogue registration — command, handler and the default demo catalogue."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import logger, storefront

DEFAULT_PRODUCTS = [
    {
        "id": 1,
        "name": "Wireless Headphones",
        "price": 79.99,
        "image": "https://images.unsplash.com/photo-1505740420928-5e560c06d30e?w=300",
        "description": "Premium sound quality",
    },
    {
        "id": 2,
        "name": "Smart Watch",
        "price": 199.99,
        "image": "https://images.unsplash.com/photo-1523275335684-37898b6baf30?w=300",
        "description": "Fitness tracking & notifications",
    },
    {
        "id": 3,
        "name": "Laptop Stand",
        "price": 49.99,
        "image": "https://images.unsplash.com/photo-1527864550417-7fd91fc51a46?w=300",
        "description": "Ergonomic aluminum design",
    },
    {
        "id": 4,
        "name": "Mechanical Keyboard",
        "price": 129.99,
        "image": "https://images.unsplash.com/photo-1587829741301-dc798b83add3?w=300",
        "description": "RGB backlit gaming keyboard",
    },
    {
        "id": 5,
        "name": "USB-C Hub",
        "price": 39.99,
        "image": "https://images.unsplash.com/photo-1625948515291-69613efd103f?w=300",
        "description": "7-in-1 connectivity",
    },
    {
        "id": 6,
        "name": "Webcam HD",
        "price": 89.99,
        "image": "https://images.unsplash.com/photo-1614624532983-4ce03382d63d?w=300",
        "description": "1080p video quality",
    },
    {
        "id": 7,
        "name": "Desk Lamp",
        "price": 34.99,
        "image": "https://images.unsplash.com/photo-1507473885765-e6ed057f782c?w=300",
        "description": "LED with adjustable brightness",
    },
    {
        "id": 8,
        "name": "Mouse Pad XL",
        "price": 24.99,
        "image": "https://images.unsplash.com/photo-1615663245857-ac93bb7c39e7?w=300",
        "description": "Extended gaming surface",
    },
]


@storefront.command(part_of="Product")
class RegisterProduct:
    product_id = Integer(required=True)
    name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0, max_value=1_000_000.0)
    image = String(max_length=1024)
    description = Text()


@storefront.command_handler(part_of=Product)
class RegisterProductHandler:
    @handle(RegisterProduct)
    def register_product(self, command):
        repo = current_domain.repository_for(Product)
        if repo.has_product(command.product_id):
            raise ValidationError({"product_id": [f"Product {command.product_id} is already registered"]})

        product = Product(
            id=command.product_id,
            name=command.name,
            price=command.price,
            image=command.image or "",
            description=command.description or "",
        )
        repo.add(product)
        return product.id


def seed_catalogue(products=None) -> int:
    """Register every product that is not in the catalogue yet.

    Returns the number of products added; running it twice adds nothing.
    """
    products = DEFAULT_PRODUCTS if products is None else products
    repo = current_domain.repository_for(Product)

    added = 0
    for entry in products:
        if repo.has_product(entry["id"]):
            continue
        current_domain.process(
            RegisterProduct(
                product_id=entry["id"],
                name=entry["name"],
                price=entry["price"],
                image=entry.get("image"),
                description=entry.get("description"),
            ),
            asynchronous=False,
        )
        added += 1

    logger.info("Catalogue seeded", added=added, total=len(products))
    return added
