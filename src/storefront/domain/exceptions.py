"""Domain-level exceptions.

Every business rule violation is a subclass of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


# --- Create Order failures ----------------------------------------------------


class CustomerNotFoundError(EntityNotFoundError):

    def __init__(self, customer_id: str) -> None:
        super().__init__("Could not find any customer with the given id.")
        self.customer_id = customer_id


class NoProductsFoundError(EntityNotFoundError):

    def __init__(self) -> None:
        super().__init__("Could not find any product with the given ids.")


class ProductNotFoundError(EntityNotFoundError):

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Could not find product {product_id}")
        self.product_id = product_id


class InsufficientQuantityError(ValidationError):

    def __init__(self) -> None:
        super().__init__("Product with no available quantity.")
