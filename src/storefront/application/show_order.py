"""Application service: Show Order use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO, OrderLineItemDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> OrderDTO:
        order = self._order_repo.find_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")
        return to_dto(order)


def to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_id=order.customer.id,
        customer_name=order.customer.name,
        items=[
            OrderLineItemDTO(
                product_id=item.product_id,
                quantity=item.quantity.value,
                price=str(item.price),
                line_total=str(item.line_total),
            )
            for item in order.products
        ],
        total=str(order.total),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
