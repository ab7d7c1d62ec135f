"""Abstract repository for the Customer aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def create(self, name: str, email: str) -> Customer:
        """Assign an id to a new customer, persist and return it."""

    @abstractmethod
    def find_by_id(self, customer_id: str) -> Customer | None:
        """Return a customer by its ID, or None if not found."""

    @abstractmethod
    def find_by_email(self, email: str) -> Customer | None:
        """Return the customer registered under *email*, or None."""

    @abstractmethod
    def list_all(self) -> list[Customer]:
        """Return every customer."""
