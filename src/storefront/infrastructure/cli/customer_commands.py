"""CLI commands for the Customer aggregate."""

from __future__ import annotations

import click

from storefront.application.create_customer import CreateCustomerHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import customer_repository


@click.command("create")
@click.option("--name", required=True, help="Customer name.")
@click.option("--email", required=True, help="Customer e-mail address.")
def customer_create(name: str, email: str) -> None:
    """Register a new customer."""
    handler = CreateCustomerHandler(customer_repo=customer_repository())

    try:
        customer = handler.handle(name=name, email=email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {customer.id} '{customer.name}' <{customer.email}> created")


@click.command("list")
def customer_list() -> None:
    """List all customers."""
    customers = customer_repository().list_all()

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<20} {'Email'}")
    click.echo("-" * 80)
    for c in customers:
        click.echo(f"{c.id:<36}  {c.name:<20} {c.email}")
