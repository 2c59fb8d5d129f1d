"""識別子モジュール."""
from .cart_id import CartId
from .customer_id import CustomerId

__all__ = [
    "CartId",
    "CustomerId",
]
