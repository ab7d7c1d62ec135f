"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live
elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from storefront.domain.model.product import Product, ProductQuantity
from storefront.domain.model.value_objects import Money


class ProductRepository(ABC):

    @abstractmethod
    def create(self, name: str, price: Money, quantity: int) -> Product:
        """Assign an id to a new product, persist and return it."""

    @abstractmethod
    def find_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def find_by_name(self, name: str) -> Product | None:
        """Return a product by name (case-insensitive), or None."""

    @abstractmethod
    def find_all_by_id(self, products: Sequence[ProductQuantity]) -> list[Product]:
        """Return the products whose ids appear in *products*.

        Unknown ids are skipped; the result order is not guaranteed.
        """

    @abstractmethod
    def update_quantity(self, updates: Sequence[ProductQuantity]) -> list[Product]:
        """Overwrite stock with the absolute quantities in *updates*."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist an updated product."""
