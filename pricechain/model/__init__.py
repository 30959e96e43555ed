from pricechain.model.loader import DefaultCartLoader
from pricechain.model.types import Cart, CartItem, Customer, Order

__all__ = [
    "Cart",
    "CartItem",
    "Customer",
    "Order",
    "DefaultCartLoader",
]
