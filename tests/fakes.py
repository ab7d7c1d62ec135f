"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. They also record the calls the
create-order flow cares about so tests can assert on writes.
"""

from __future__ import annotations

from collections.abc import Sequence

from storefront.domain.model.customer import Customer
from storefront.domain.model.order import Order, OrderLineItem
from storefront.domain.model.product import Product, ProductQuantity
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository


class FakeCustomerRepository(CustomerRepository):

    def __init__(self, customers: list[Customer] | None = None) -> None:
        self._store: dict[str, Customer] = {}
        self._next_id = 1
        for c in customers or []:
            self._store[c.id] = c

    def create(self, name: str, email: str) -> Customer:
        customer = Customer(id=f"C{self._next_id}", name=name, email=email)
        self._next_id += 1
        self._store[customer.id] = customer
        return customer

    def find_by_id(self, customer_id: str) -> Customer | None:
        return self._store.get(customer_id)

    def find_by_email(self, email: str) -> Customer | None:
        for c in self._store.values():
            if c.email.lower() == email.lower():
                return c
        return None

    def list_all(self) -> list[Customer]:
        return list(self._store.values())


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        self._next_id = 1
        self.lookups: list[list[str]] = []
        self.quantity_updates: list[list[ProductQuantity]] = []
        for p in products or []:
            self._store[p.id] = p

    def create(self, name: str, price: Money, quantity: int) -> Product:
        product = Product(id=f"P{self._next_id}", name=name, price=price, quantity=quantity)
        self._next_id += 1
        self._store[product.id] = product
        return product

    def find_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def find_by_name(self, name: str) -> Product | None:
        for p in self._store.values():
            if p.name.lower() == name.lower():
                return p
        return None

    def find_all_by_id(self, products: Sequence[ProductQuantity]) -> list[Product]:
        self.lookups.append([p.id for p in products])
        # copies, so a later stock write cannot change what the caller saw
        return [
            Product(id=p.id, name=p.name, price=p.price, quantity=p.quantity)
            for p in self._store.values()
            if any(req.id == p.id for req in products)
        ]

    def update_quantity(self, updates: Sequence[ProductQuantity]) -> list[Product]:
        self.quantity_updates.append(list(updates))
        for update in updates:
            self._store[update.id].quantity = update.quantity
        return [self._store[update.id] for update in updates]

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[str, Order] = {}
        self._next_id = 1

    def create(self, customer: Customer, products: list[OrderLineItem]) -> Order:
        order = Order.create(customer=customer, products=products)
        order.id = f"O{self._next_id}"
        self._next_id += 1
        self._store[order.id] = order
        return order

    def find_by_id(self, order_id: str) -> Order | None:
        return self._store.get(order_id)

    def list_all(self) -> list[Order]:
        return list(self._store.values())
