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

from pricechain.rules.builtins import (
    ConditionalCampaignRule,
    ConditionalLoyaltyDiscount,
    FlatPercentageDiscount,
    PercentageSurcharge,
)
from pricechain.rules.types import PricingRule, PricingStep, rule_name


def explain_rule(rule: PricingRule) -> str:
    """
    Explain a rule at a high level (for listing rule chains, debug output).
    """
    name = rule_name(rule)
    kind = type(rule).__name__
    base = name if name == kind else f"{name} ({kind})"

    if isinstance(rule, ConditionalCampaignRule):
        state = "active" if rule.active else "inactive"
        return f"{base}: x{rule.factor} when campaign is {state}"
    if isinstance(rule, ConditionalLoyaltyDiscount):
        return f"{base}: x{rule.factor} for gold customers"
    if isinstance(rule, (FlatPercentageDiscount, PercentageSurcharge)):
        return f"{base}: x{rule.factor}"

    # Fallback: third-party rule, nothing more is known about it
    return base


def explain_step(step: PricingStep) -> str:
    if not step.changed:
        return f"{step.index + 1}. {step.rule}: {step.before} (unchanged)"
    return f"{step.index + 1}. {step.rule}: {step.before} -> {step.after}"
