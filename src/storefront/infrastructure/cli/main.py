import logging

import click

from storefront.infrastructure.cli.customer_commands import customer_create, customer_list
from storefront.infrastructure.cli.order_commands import order_create, order_show
from storefront.infrastructure.cli.product_commands import (
    product_create,
    product_list,
    product_update,
)
from storefront.infrastructure.config import load_settings


@click.group()
def cli() -> None:
    """Storefront — customers, catalog and orders"""
    logging.basicConfig(
        level=load_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
customer.add_command(customer_create)
customer.add_command(customer_list)
product.add_command(product_create)
product.add_command(product_list)
product.add_command(product_update)
order.add_command(order_create)
order.add_command(order_show)
