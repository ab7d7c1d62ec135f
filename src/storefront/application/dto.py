"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry already-formatted data from the application layer to the
CLI without exposing domain internals.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderLineItemDTO:

    product_id: str
    quantity: int
    price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:

    id: str
    customer_id: str
    customer_name: str
    items: list[OrderLineItemDTO]
    total: str
    created_at: str
