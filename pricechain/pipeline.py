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

from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from pricechain.model.types import Cart
from pricechain.money import to_non_negative_money
from pricechain.rules.types import PricingRule, PricingStep, rule_name


class PricingPipeline:
    """
    Folds an ordered rule chain over a base amount.

    Semantics:
    - rules run strictly left to right, in the order given at construction
      (no sorting, no priorities, no regrouping)
    - an empty chain is the identity
    - an exception raised by a rule propagates unchanged; later rules are not run
      and no partial total is returned

    The pipeline does not own its rules; the same instances may be shared by
    several pipelines.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Iterable[PricingRule] = ()) -> None:
        self._rules: tuple[PricingRule, ...] = tuple(rules)

    @property
    def rules(self) -> tuple[PricingRule, ...]:
        return self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"PricingPipeline([{', '.join(rule_name(r) for r in self._rules)}])"

    def compute(self, base: Any, context: Cart | None = None) -> Decimal:
        result = to_non_negative_money(base, field="base")
        for rule in self._rules:
            result = rule.apply(result, context)
        return result

    def trace(self, base: Any, context: Cart | None = None) -> tuple[PricingStep, ...]:
        """
        Same fold as compute(), recording the running total around each rule.
        """
        result = to_non_negative_money(base, field="base")
        steps: list[PricingStep] = []
        for idx, rule in enumerate(self._rules):
            after = rule.apply(result, context)
            steps.append(PricingStep(index=idx, rule=rule_name(rule), before=result, after=after))
            result = after
        return tuple(steps)
