from pricechain.services.billing import BillingService
from pricechain.services.checkout import CheckoutService
from pricechain.services.notify import EmailNotifier, Notifier, OrderService

__all__ = [
    "BillingService",
    "CheckoutService",
    "EmailNotifier",
    "Notifier",
    "OrderService",
]
