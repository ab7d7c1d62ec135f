"""JSON-file-backed implementation of OrderRepository.

The customer record is embedded in each order as it was when the order
was placed.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.customer import Customer
from storefront.domain.model.order import Order, OrderLineItem
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def create(self, customer: Customer, products: list[OrderLineItem]) -> Order:
        order = Order.create(customer=customer, products=products)
        order.id = str(uuid.uuid4())

        records = self._file.load()
        records.append(self._to_raw(order))
        self._file.persist(records)
        return order

    def find_by_id(self, order_id: str) -> Order | None:
        for raw in self._file.load():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer": {
                "id": order.customer.id,
                "name": order.customer.name,
                "email": order.customer.email,
            },
            "created_at": order.created_at.isoformat(),
            "products": [
                {
                    "product_id": item.product_id,
                    "quantity": item.quantity.value,
                    "price": str(item.price.amount),
                    "currency": item.price.currency,
                }
                for item in order.products
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderLineItem(
                product_id=i["product_id"],
                quantity=Quantity(i["quantity"]),
                price=Money(Decimal(i["price"]), i.get("currency", "USD")),
            )
            for i in raw["products"]
        ]
        return Order(
            id=raw["id"],
            customer=Customer(**raw["customer"]),
            products=items,
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
