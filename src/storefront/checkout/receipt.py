"""Receipt — the immutable record handed back at checkout."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class Receipt:
    order_id: str
    customer_name: str
    customer_email: str
    timestamp: datetime
    items: tuple[dict, ...] = ()
    total: Decimal = Decimal("0.00")
