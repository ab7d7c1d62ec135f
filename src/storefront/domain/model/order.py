"""Order aggregate.

An Order references the customer who placed it and owns its line items.
Each line item locks in the product price at order-creation time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.customer import Customer
from storefront.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class OrderLineItem:

    product_id: str
    quantity: Quantity
    price: Money  # locked at order-creation time

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    ``Order.create()`` validates new orders. The plain constructor is
    left for repositories reconstituting persisted orders.
    """

    id: str | None
    customer: Customer
    products: list[OrderLineItem]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(customer: Customer, products: list[OrderLineItem]) -> Order:
        if not products:
            raise ValidationError("Order must contain at least one product")
        return Order(id=None, customer=customer, products=list(products))

    @property
    def total(self) -> Money:
        result = Money.zero(self.products[0].price.currency)
        for item in self.products:
            result = result + item.line_total
        return result
