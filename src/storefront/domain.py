"""Storefront bounded context — product catalogue, shared cart and checkout.

A single Protean domain hosts the catalogue (read-only products), the one
shared shopping cart and the checkout recorder that turns a priced cart
snapshot into a receipt.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
