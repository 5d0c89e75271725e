"""Entity generators (batch and lazy streams)."""

from .orders import OrderGenerator
from .products import ProductGenerator
from .reviews import ReviewGenerator
from .users import UserGenerator

__all__ = [
    "OrderGenerator",
    "ProductGenerator",
    "ReviewGenerator",
    "UserGenerator",
]
