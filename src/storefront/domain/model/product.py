"""Product aggregate.

A product carries its catalog price and the stock still available for
ordering. Orders never read the price back later: they copy it into
their line items when they are created.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class ProductQuantity:
    """A product id paired with a unit count.

    Used both for what a customer asks for and for the absolute stock
    levels written back after an order.
    """

    id: str
    quantity: int


@dataclass
class Product:

    id: str
    name: str
    price: Money
    quantity: int = 0

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValidationError(
                f"Stock quantity for {self.name} cannot be negative"
            )

    def update_price(self, new_price: Money) -> None:
        """Change the catalog price.

        Existing orders are unaffected, they hold a price snapshot.
        """
        if new_price.is_zero:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price

    def has_available(self, quantity: int) -> bool:
        return quantity <= self.quantity
