"""Catalogue reads: the full listing and single-product lookup."""

from protean.utils.globals import current_domain

from storefront.catalogue.product import Product


def list_products() -> list[Product]:
    return current_domain.repository_for(Product).list_all()


def get_product(product_id: int) -> Product:
    """Fetch a product by id.

    Raises:
        ObjectNotFoundError: when no product carries ``product_id``.
    """
    return current_domain.repository_for(Product).get(product_id)
