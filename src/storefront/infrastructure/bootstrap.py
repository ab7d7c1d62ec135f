"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.infrastructure.config import load_settings
from storefront.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def customer_repository() -> JsonCustomerRepository:
    return JsonCustomerRepository(load_settings().data_dir / "customers.json")


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(load_settings().data_dir / "products.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(load_settings().data_dir / "orders.json")
