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
from typing import Any, Final

from pricechain.errors import InvalidInputError
from pricechain.model.types import Cart
from pricechain.money import ZERO, to_money
from pricechain.rules.types import PricingRule

HUNDRED: Final[Decimal] = Decimal("100")


# ----------------------------
# Helpers
# ----------------------------


def as_factor(value: Any) -> Decimal:
    factor = to_money(value, field="factor")
    if factor < ZERO:
        raise InvalidInputError(
            f"Rule factor must not be negative: {factor}",
            code="negative_factor",
            details={"factor": str(factor)},
        )
    return factor


def discount_factor(percent: Any) -> Decimal:
    """10 -> 0.90"""
    pct = to_money(percent, field="percent")
    if not ZERO <= pct <= HUNDRED:
        raise InvalidInputError(f"Discount percent must be within 0..100, got {pct}", code="invalid_percent")
    return (HUNDRED - pct) / HUNDRED


def surcharge_factor(percent: Any) -> Decimal:
    """18 -> 1.18"""
    pct = to_money(percent, field="percent")
    if pct < ZERO:
        raise InvalidInputError(f"Surcharge percent must not be negative, got {pct}", code="invalid_percent")
    return (HUNDRED + pct) / HUNDRED


class _FactorRule:
    """
    Shared shape of the shipped multiplicative rules: a frozen factor and an
    optional display name. Subclasses are frozen dataclasses.
    """

    __slots__ = ()

    factor: Decimal
    name: str | None

    def __post_init__(self) -> None:
        object.__setattr__(self, "factor", as_factor(self.factor))


# ----------------------------
# Rules
# ----------------------------


@dataclass(frozen=True, slots=True)
class FlatPercentageDiscount(_FactorRule):
    """Unconditional discount: total * factor (0.90 for 10% off)."""

    factor: Decimal
    name: str | None = field(default=None, kw_only=True)

    @classmethod
    def from_percent(cls, percent: Any, *, name: str | None = None) -> "FlatPercentageDiscount":
        return cls(discount_factor(percent), name=name)

    def apply(self, total: Decimal, context: Cart | None) -> Decimal:
        return total * self.factor


@dataclass(frozen=True, slots=True)
class ConditionalLoyaltyDiscount(_FactorRule):
    """
    Discount for gold customers only. Without a context (or for a regular
    customer) the total passes through unchanged.
    """

    factor: Decimal
    name: str | None = field(default=None, kw_only=True)

    @classmethod
    def from_percent(cls, percent: Any, *, name: str | None = None) -> "ConditionalLoyaltyDiscount":
        return cls(discount_factor(percent), name=name)

    def apply(self, total: Decimal, context: Cart | None) -> Decimal:
        if context is not None and context.customer.is_gold:
            return total * self.factor
        return total


@dataclass(frozen=True, slots=True)
class ConditionalCampaignRule(_FactorRule):
    """
    Campaign discount switched by a flag fixed at construction time.
    """

    factor: Decimal
    active: bool = True
    name: str | None = field(default=None, kw_only=True)

    def __post_init__(self) -> None:
        if not isinstance(self.active, bool):
            raise InvalidInputError(
                f"Campaign 'active' must be a boolean, got {self.active!r}",
                code="invalid_flag",
            )
        _FactorRule.__post_init__(self)

    @classmethod
    def from_percent(
        cls, percent: Any, active: bool = True, *, name: str | None = None
    ) -> "ConditionalCampaignRule":
        return cls(discount_factor(percent), active, name=name)

    def apply(self, total: Decimal, context: Cart | None) -> Decimal:
        return total * self.factor if self.active else total


@dataclass(frozen=True, slots=True)
class PercentageSurcharge(_FactorRule):
    """Context-free surcharge such as GST: total * factor (1.18 for 18%)."""

    factor: Decimal
    name: str | None = field(default=None, kw_only=True)

    @classmethod
    def from_percent(cls, percent: Any, *, name: str | None = None) -> "PercentageSurcharge":
        return cls(surcharge_factor(percent), name=name)

    def apply(self, total: Decimal, context: Cart | None) -> Decimal:
        return total * self.factor


# ----------------------------
# Declarative kinds
# ----------------------------

RuleKinds = Mapping[str, type[_FactorRule]]

BUILTIN_RULE_KINDS: Final[RuleKinds] = {
    "flat_percentage": FlatPercentageDiscount,
    "loyalty": ConditionalLoyaltyDiscount,
    "campaign": ConditionalCampaignRule,
    "surcharge": PercentageSurcharge,
}


def default_rules() -> tuple[PricingRule, ...]:
    """
    Rule chain used when nothing else is configured: a 10% OEM campaign
    followed by 18% GST.
    """
    return (
        ConditionalCampaignRule.from_percent(10, True, name="oem-campaign"),
        PercentageSurcharge.from_percent(18, name="gst"),
    )
