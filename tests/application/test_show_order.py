"""Tests for the ShowOrder query."""

import pytest

from storefront.application.show_order import ShowOrderHandler
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.customer import Customer
from storefront.domain.model.order import OrderLineItem
from storefront.domain.model.value_objects import Money, Quantity
from tests.fakes import FakeOrderRepository


def test_returns_formatted_order():
    repo = FakeOrderRepository()
    order = repo.create(
        Customer(id="C1", name="Alice", email="alice@example.com"),
        [
            OrderLineItem("P1", Quantity(2), Money.of("100")),
            OrderLineItem("P2", Quantity(3), Money.of("2.5")),
        ],
    )

    dto = ShowOrderHandler(repo).handle(order.id)

    assert dto.id == order.id
    assert dto.customer_name == "Alice"
    assert [(i.product_id, i.quantity, i.price, i.line_total) for i in dto.items] == [
        ("P1", 2, "$100.00", "$200.00"),
        ("P2", 3, "$2.50", "$7.50"),
    ]
    assert dto.total == "$207.50"
    assert dto.created_at.endswith("UTC")


def test_unknown_order_rejected():
    with pytest.raises(EntityNotFoundError, match="not found"):
        ShowOrderHandler(FakeOrderRepository()).handle("O404")
