"""JSON-file-backed implementation of CustomerRepository."""

from __future__ import annotations

import uuid
from pathlib import Path

from storefront.domain.model.customer import Customer
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def create(self, name: str, email: str) -> Customer:
        customer = Customer(id=str(uuid.uuid4()), name=name, email=email)
        records = self._file.load()
        records.append(self._to_raw(customer))
        self._file.persist(records)
        return customer

    def find_by_id(self, customer_id: str) -> Customer | None:
        for raw in self._file.load():
            if raw["id"] == customer_id:
                return self._to_domain(raw)
        return None

    def find_by_email(self, email: str) -> Customer | None:
        for raw in self._file.load():
            if raw["email"].lower() == email.lower():
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Customer]:
        return [self._to_domain(raw) for raw in self._file.load()]

    @staticmethod
    def _to_raw(customer: Customer) -> dict:
        return {"id": customer.id, "name": customer.name, "email": customer.email}

    @staticmethod
    def _to_domain(raw: dict) -> Customer:
        return Customer(id=raw["id"], name=raw["name"], email=raw["email"])
