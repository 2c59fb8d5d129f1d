"""ドメイン層モジュール."""
from .catalog import CATALOG, Catalog
from .entities import Cart
from .exceptions import InvalidArgumentError, ItemNotInCartError, NotFoundError
from .identifiers import CartId, CustomerId
from .value_objects import Item, Money, Quantity

__all__ = [
    # Catalog
    "CATALOG",
    "Catalog",
    # Exceptions
    "InvalidArgumentError",
    "ItemNotInCartError",
    "NotFoundError",
    # Identifiers
    "CartId",
    "CustomerId",
    # Value Objects
    "Item",
    "Money",
    "Quantity",
    # Entities
    "Cart",
]
