from decimal import Decimal

from pricechain.model.types import Cart
from pricechain.pipeline import PricingPipeline


class CheckoutService:
    """
    Prices a cart: its subtotal goes through the injected pipeline with the
    cart as context.
    """

    def __init__(self, pipeline: PricingPipeline) -> None:
        self._pipeline = pipeline

    def calculate_total(self, cart: Cart) -> Decimal:
        return self._pipeline.compute(cart.subtotal, cart)
