"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import uuid
from collections.abc import Sequence
from decimal import Decimal
from pathlib import Path

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product, ProductQuantity
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    def create(self, name: str, price: Money, quantity: int) -> Product:
        product = Product(id=str(uuid.uuid4()), name=name, price=price, quantity=quantity)
        products = self._load()
        products[product.id] = product
        self._persist(products)
        return product

    def find_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def find_by_name(self, name: str) -> Product | None:
        for product in self._load().values():
            if product.name.lower() == name.lower():
                return product
        return None

    def find_all_by_id(self, products: Sequence[ProductQuantity]) -> list[Product]:
        wanted = {p.id for p in products}
        return [p for p in self._load().values() if p.id in wanted]

    def update_quantity(self, updates: Sequence[ProductQuantity]) -> list[Product]:
        products = self._load()
        for update in updates:
            product = products.get(update.id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{update.id}' not found")
            product.quantity = update.quantity
        self._persist(products)
        return [products[update.id] for update in updates]

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                price=Money(Decimal(item["price"]), item.get("currency", "USD")),
                quantity=item.get("quantity", 0),
            )
            for item in self._file.load()
        }

    def _persist(self, products: dict[str, Product]) -> None:
        self._file.persist([
            {
                "id": p.id,
                "name": p.name,
                "price": str(p.price.amount),
                "currency": p.price.currency,
                "quantity": p.quantity,
            }
            for p in products.values()
        ])
