from typing import Any

from pricechain.cli._io import default_config_file, default_rules_files
from pricechain.core.composition import Composition, compose
from pricechain.core.config import AppConfig, load_config
from pricechain.model.types import Cart
from pricechain.money import to_non_negative_money
from pricechain.reporting.types import Quote
from pricechain.rules.types import rule_name


def build_composition(*, rules: tuple[str, ...] | None, config: str | None) -> Composition:
    """
    CLI flavour of the composition root: explicit files win, otherwise the
    conventional files in the working directory, otherwise defaults.
    """
    rules_files = rules if rules is not None else default_rules_files()
    config_file = config if config is not None else default_config_file()

    cfg = load_config(config_file) if config_file else AppConfig()
    return compose(cfg.with_env(), rules_files=rules_files)


def run_quote(composition: Composition, base: Any, context: Cart | None) -> Quote:
    amount = to_non_negative_money(base, field="base")
    total, steps = composition.billing.total_with_steps(amount, context)

    metadata: dict[str, Any] = {"api_base_url": composition.config.api_base_url}
    if context is not None:
        metadata["customer"] = context.customer.email
        metadata["items"] = len(context.items)

    return Quote(
        base=amount,
        total=total,
        rules=tuple(rule_name(r) for r in composition.pipeline.rules),
        steps=steps,
        discounts_enabled=composition.billing.discounts_enabled,
        metadata=metadata,
    )
