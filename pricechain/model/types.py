from dataclasses import dataclass
from decimal import Decimal

from pricechain.errors import InvalidInputError
from pricechain.money import ZERO, to_money


@dataclass(frozen=True, slots=True)
class CartItem:
    """
    One line item of a cart.

    `price` is the unit price; it is coerced to Decimal on construction.
    """

    name: str
    price: Decimal
    qty: int = 1

    def __post_init__(self) -> None:
        price = to_money(self.price, field="price")
        if price < ZERO:
            raise InvalidInputError(
                f"Item '{self.name}' has a negative price: {price}",
                code="negative_price",
                details={"item": self.name, "price": str(price)},
            )
        if isinstance(self.qty, bool) or not isinstance(self.qty, int) or self.qty < 1:
            raise InvalidInputError(
                f"Item '{self.name}' quantity must be a positive integer, got {self.qty!r}",
                code="invalid_quantity",
                details={"item": self.name, "qty": self.qty},
            )
        object.__setattr__(self, "price", price)

    @property
    def line_total(self) -> Decimal:
        return self.price * self.qty


@dataclass(frozen=True, slots=True)
class Customer:
    email: str
    is_gold: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.email, str) or not self.email.strip():
            raise InvalidInputError("Customer email must be a non-empty string.", code="empty_email")


@dataclass(frozen=True, slots=True)
class Cart:
    """
    Immutable pricing context handed to every rule.

    Items keep the order they were given in; an empty cart has a zero subtotal.
    """

    items: tuple[CartItem, ...]
    customer: Customer

    def __post_init__(self) -> None:
        # lists are accepted for convenience but stored as a tuple
        object.__setattr__(self, "items", tuple(self.items))

    @property
    def subtotal(self) -> Decimal:
        return sum((i.line_total for i in self.items), ZERO)


@dataclass(frozen=True, slots=True)
class Order:
    """
    A placed order, as seen by the notification flow.
    """

    customer_email: str

    def __post_init__(self) -> None:
        if not isinstance(self.customer_email, str) or not self.customer_email.strip():
            raise InvalidInputError("Order customer email must be a non-empty string.", code="empty_email")
