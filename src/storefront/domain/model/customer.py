"""Customer aggregate.

Orders hold a reference to the customer who placed them; the customer
record itself is owned by the customer repository.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Customer:
    id: str
    name: str
    email: str
