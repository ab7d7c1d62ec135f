"""Application service: Create Order use case.

Orchestrates the three repositories: resolves the customer and the
requested products, checks stock, persists the order and writes the
decremented stock levels back.

Every check runs before the first write, so a rejected request leaves
no order and no stock change behind. There is no transaction around
the read-then-write of stock and no compensation if a write fails
part-way.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import (
    CustomerNotFoundError,
    DomainException,
    InsufficientQuantityError,
    NoProductsFoundError,
    ProductNotFoundError,
)
from storefront.domain.model.order import Order, OrderLineItem
from storefront.domain.model.product import Product, ProductQuantity
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CreateOrderService:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._customer_repo = customer_repo

    def execute(self, customer_id: str, products: list[ProductQuantity]) -> Order:
        try:
            return self._create(customer_id, products)
        except DomainException as exc:
            logger.warning("order rejected customer=%s reason=%s", customer_id, exc)
            raise

    def _create(self, customer_id: str, products: list[ProductQuantity]) -> Order:
        customer = self._customer_repo.find_by_id(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)

        found = self._product_repo.find_all_by_id(products)
        if not found:
            raise NoProductsFoundError()

        by_id: dict[str, Product] = {product.id: product for product in found}

        for requested in products:
            if requested.id not in by_id:
                raise ProductNotFoundError(requested.id)

        if any(not by_id[p.id].has_available(p.quantity) for p in products):
            raise InsufficientQuantityError()

        line_items = [
            OrderLineItem(
                product_id=requested.id,
                quantity=Quantity(requested.quantity),
                price=by_id[requested.id].price,  # <-- price snapshot
            )
            for requested in products
        ]

        order = self._order_repo.create(customer=customer, products=line_items)

        updates = [
            ProductQuantity(
                id=requested.id,
                quantity=by_id[requested.id].quantity - requested.quantity,
            )
            for requested in products
        ]
        self._product_repo.update_quantity(updates)

        logger.info(
            "order created id=%s customer=%s lines=%d total=%s",
            order.id, customer.id, len(line_items), order.total,
        )
        return order
