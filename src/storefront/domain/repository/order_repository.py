"""Abstract repository for the Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.customer import Customer
from storefront.domain.model.order import Order, OrderLineItem


class OrderRepository(ABC):

    @abstractmethod
    def create(self, customer: Customer, products: list[OrderLineItem]) -> Order:
        """Build a new order through ``Order.create``, persist and return it."""

    @abstractmethod
    def find_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""
