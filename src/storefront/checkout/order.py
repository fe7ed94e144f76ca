"""Order aggregate — who placed an order and when.

Orders are not stored: placing one validates the customer details and hands
back a receipt.
"""

from protean.fields import DateTime, String, ValueObject

from storefront.domain import storefront
from storefront.shared.email import EmailAddress


@storefront.aggregate
class Order:
    customer_name = String(required=True, max_length=255)
    customer_email = ValueObject(EmailAddress, required=True)
    placed_at = DateTime(required=True)
