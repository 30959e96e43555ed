from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pricechain.core.config import AppConfig
from pricechain.core.logs import get_logger
from pricechain.pipeline import PricingPipeline
from pricechain.rules.builtins import default_rules
from pricechain.rules.loader import DefaultRuleFileLoader
from pricechain.rules.registry import RuleRegistry
from pricechain.rules.types import PricingRule
from pricechain.services.billing import BillingService
from pricechain.services.checkout import CheckoutService
from pricechain.services.notify import EmailNotifier, Notifier, OrderService


@dataclass(frozen=True)
class Composition:
    """
    Everything the composition root wired together. Built once per process.
    """

    config: AppConfig
    registry: RuleRegistry
    pipeline: PricingPipeline
    checkout: CheckoutService
    billing: BillingService
    orders: OrderService


def compose(
    config: AppConfig | None = None,
    rules: Iterable[PricingRule] | None = None,
    *,
    rules_files: Sequence[str | Path] = (),
    notifier: Notifier | None = None,
    logger: Any = None,
) -> Composition:
    """
    The single place where collaborators are constructed.

    Rule sources, in this order of precedence:
      1. explicit `rules`
      2. `rules_files` (loaded in the given order)
      3. the default chain (OEM campaign, then GST)
    """
    config = config if config is not None else AppConfig()
    log = logger if logger is not None else get_logger("composition")

    registry = RuleRegistry()
    if rules is not None:
        for rule in rules:
            registry.register(rule)
    elif rules_files:
        DefaultRuleFileLoader().load_many(registry, rules_files)
    else:
        for rule in default_rules():
            registry.register(rule, source="default")

    pipeline = registry.build_pipeline()
    log.debug("pipeline_composed", rules=[e.source for e in registry.entries()])

    return Composition(
        config=config,
        registry=registry,
        pipeline=pipeline,
        checkout=CheckoutService(pipeline),
        billing=BillingService(pipeline, config, logger=logger),
        orders=OrderService(notifier if notifier is not None else EmailNotifier(logger=logger)),
    )
