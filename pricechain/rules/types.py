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

from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol, runtime_checkable

from pricechain.model.types import Cart


@runtime_checkable
class PricingRule(Protocol):
    """
    One pluggable pricing transform.

    Contract:
    - `apply` is a pure function of (running total, context) -> new total.
    - It must not mutate the context and must not raise for a well-formed
      non-negative total.
    - Whether the rule actually changes the total is the rule's own decision;
      the pipeline treats every rule the same way.
    """

    def apply(self, total: Decimal, context: Cart | None) -> Decimal: ...


def rule_name(rule: PricingRule) -> str:
    """
    Display name of a rule: its `name` attribute when set, else its class name.
    """
    name = getattr(rule, "name", None)
    if isinstance(name, str) and name:
        return name
    return type(rule).__name__


@dataclass(frozen=True, slots=True)
class PricingStep:
    """
    One step of a traced fold: the running total before and after a rule.
    """

    index: int
    rule: str
    before: Decimal
    after: Decimal

    @property
    def changed(self) -> bool:
        return self.before != self.after

    def to_dict(self) -> dict[str, object]:
        return {
            "index": self.index,
            "rule": self.rule,
            "before": str(self.before),
            "after": str(self.after),
        }
