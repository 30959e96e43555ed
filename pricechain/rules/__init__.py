# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Pricechain Contributors
#
# This file is part of Pricechain.
#
# Pricechain is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Pricechain is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

from pathlib import Path

from pricechain.rules.builtins import (
    BUILTIN_RULE_KINDS,
    ConditionalCampaignRule,
    ConditionalLoyaltyDiscount,
    FlatPercentageDiscount,
    PercentageSurcharge,
    default_rules,
)
from pricechain.rules.explain import explain_rule, explain_step
from pricechain.rules.loader import DefaultRuleFileLoader, RuleSpec
from pricechain.rules.registry import LoadedRule, RuleRegistry
from pricechain.rules.types import PricingRule, PricingStep, rule_name

__all__ = [
    # Capability
    "PricingRule",
    "PricingStep",
    "rule_name",
    # Shipped rules
    "FlatPercentageDiscount",
    "ConditionalLoyaltyDiscount",
    "ConditionalCampaignRule",
    "PercentageSurcharge",
    "BUILTIN_RULE_KINDS",
    "default_rules",
    # Assembly
    "RuleRegistry",
    "LoadedRule",
    "DefaultRuleFileLoader",
    "RuleSpec",
    # Explain
    "explain_rule",
    "explain_step",
]

# Convenience helpers (public API)


def load_rules(path: str | Path) -> tuple[PricingRule, ...]:
    """
    Load a rules file and return its rules in document order.
    """
    registry = RuleRegistry()
    DefaultRuleFileLoader().load_into(registry, path)
    return registry.resolve()
