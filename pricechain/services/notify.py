from typing import Any, Protocol, runtime_checkable

from pricechain.core.logs import get_logger
from pricechain.model.types import Order


@runtime_checkable
class Notifier(Protocol):
    """Delivers a message to an address. Returns whether delivery succeeded."""

    def send(self, address: str, message: str) -> bool: ...


class EmailNotifier:
    """
    Stand-in for SMTP delivery: records the message in the log.
    """

    def __init__(self, logger: Any = None) -> None:
        self._log = logger if logger is not None else get_logger("email")

    def send(self, address: str, message: str) -> bool:
        self._log.info("email_sent", to=address, message=message)
        return True


class OrderService:
    ORDER_PLACED_MESSAGE = "Order placed"

    def __init__(self, notifier: Notifier) -> None:
        self._notifier = notifier

    def place_order(self, order: Order) -> bool:
        # order business logic lives elsewhere; this only announces the order
        return self._notifier.send(order.customer_email, self.ORDER_PLACED_MESSAGE)
