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

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from pricechain.money import quantize_money
from pricechain.rules.types import PricingStep


@dataclass(frozen=True, slots=True)
class Quote:
    """
    Result of pricing one transaction (in-memory).
    Can be rendered to text/json.
    """

    base: Decimal
    total: Decimal
    rules: tuple[str, ...] = ()
    steps: tuple[PricingStep, ...] = ()
    discounts_enabled: bool = True
    metadata: Mapping[str, Any] = field(default_factory=dict)

    @property
    def difference(self) -> Decimal:
        return self.total - self.base

    def to_dict(self) -> dict[str, Any]:
        return {
            "base": str(self.base),
            "total": str(self.total),
            "total_rounded": str(quantize_money(self.total)),
            "difference": str(self.difference),
            "discounts_enabled": self.discounts_enabled,
            "rules": list(self.rules),
            "steps": [s.to_dict() for s in self.steps],
            "metadata": dict(self.metadata),
        }
