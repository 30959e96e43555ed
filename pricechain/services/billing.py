from decimal import Decimal
from typing import Any

from pricechain.core.config import AppConfig
from pricechain.core.logs import get_logger
from pricechain.model.types import Cart
from pricechain.money import to_non_negative_money
from pricechain.pipeline import PricingPipeline
from pricechain.rules.types import PricingStep


class BillingService:
    """
    Caller-level guard in front of the pipeline: when discounts are switched
    off in config, the base amount is returned as is and no rule runs.
    """

    def __init__(self, pipeline: PricingPipeline, config: AppConfig, logger: Any = None) -> None:
        self._pipeline = pipeline
        self._config = config
        self._log = logger if logger is not None else get_logger("billing")

    @property
    def discounts_enabled(self) -> bool:
        return self._config.discounts_enabled

    def total(self, base: Any, context: Cart | None = None) -> Decimal:
        if not self._gate(base):
            return to_non_negative_money(base, field="base")
        return self._pipeline.compute(base, context)

    def total_with_steps(self, base: Any, context: Cart | None = None) -> tuple[Decimal, tuple[PricingStep, ...]]:
        """
        Like total(), but also returns the traced steps. The rule chain runs
        once, so the total is always the last step's result.
        """
        if not self._gate(base):
            return to_non_negative_money(base, field="base"), ()
        steps = self._pipeline.trace(base, context)
        if not steps:
            return to_non_negative_money(base, field="base"), steps
        return steps[-1].after, steps

    def _gate(self, base: Any) -> bool:
        self._log.info("billing_total", api_base_url=self._config.api_base_url, rules=len(self._pipeline))
        if not self._config.discounts_enabled:
            self._log.info("discounts_disabled", base=str(base))
            return False
        return True
