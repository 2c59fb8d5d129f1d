"""ショッピングカート."""
from .config import Settings, configure_logging
from .domain import (
    CATALOG,
    Cart,
    CartId,
    Catalog,
    CustomerId,
    InvalidArgumentError,
    Item,
    ItemNotInCartError,
    Money,
    NotFoundError,
    Quantity,
)

__version__ = "0.1.0"

__all__ = [
    "CATALOG",
    "Cart",
    "CartId",
    "Catalog",
    "CustomerId",
    "InvalidArgumentError",
    "Item",
    "ItemNotInCartError",
    "Money",
    "NotFoundError",
    "Quantity",
    "Settings",
    "configure_logging",
]
