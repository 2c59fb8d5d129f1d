"""値オブジェクトモジュール."""
from .item import Item
from .money import Money
from .quantity import Quantity

__all__ = [
    "Item",
    "Money",
    "Quantity",
]
