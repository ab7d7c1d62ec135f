"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.create_order import CreateOrderService
from storefront.application.dto import OrderDTO
from storefront.application.show_order import ShowOrderHandler, to_dto
from storefront.domain.exceptions import DomainException
from storefront.domain.model.product import ProductQuantity
from storefront.infrastructure.bootstrap import (
    customer_repository,
    order_repository,
    product_repository,
)


def _parse_items(raw: str) -> list[ProductQuantity]:
    """Parse 'id-1:3,id-2:5' into a ProductQuantity list, keeping order."""
    items: list[ProductQuantity] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        items.append(ProductQuantity(id=product_id.strip(), quantity=qty))
    return items


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order {dto.id}")
    click.echo(f"Customer: {dto.customer_name} ({dto.customer_id})")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<36} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*63}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<36} {item.quantity:>5} {item.price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*63}")
    click.echo(f"  {'Order Total':<42} {dto.total:>20}")


@click.command("create")
@click.option("--customer", "customer_id", required=True, help="Customer ID.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
def order_create(customer_id: str, items: str) -> None:
    """Create a new order and take the ordered units out of stock."""
    products = _parse_items(items)

    service = CreateOrderService(
        order_repo=order_repository(),
        product_repo=product_repository(),
        customer_repo=customer_repository(),
    )

    try:
        order = service.execute(customer_id=customer_id, products=products)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(to_dto(order))


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)
