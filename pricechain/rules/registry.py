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

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pricechain.errors import RuleConfigError
from pricechain.rules.types import PricingRule

if TYPE_CHECKING:
    from pricechain.pipeline import PricingPipeline

RuleFactory = Callable[[], PricingRule]


@dataclass(frozen=True, slots=True)
class LoadedRule:
    """
    Rule instance together with its provenance (useful for debugging).
    """

    rule: PricingRule
    source: str  # e.g. "manual", "factory:make_gst", "rules.yaml#0"


@dataclass(frozen=True, slots=True)
class _Provider:
    factory: RuleFactory
    source: str


def _qualname(obj: Any) -> str:
    return getattr(obj, "__qualname__", None) or type(obj).__name__


class RuleRegistry:
    """
    Collects pricing rules from independent registration sites into one
    ordered sequence.

    Order is registration order, whatever the provider kind. Providers are
    instantiated exactly once, on the first resolve(); the registry is then
    frozen so that every pipeline built from it sees the same chain.

    Typical lifecycle:
      reg = RuleRegistry()
      reg.register_factory(lambda: ConditionalCampaignRule(Decimal("0.9"), True))
      reg.register_class(PercentageSurcharge, factor=Decimal("1.18"))
      pipeline = reg.build_pipeline()
    """

    def __init__(self) -> None:
        self._providers: list[_Provider] = []
        self._resolved: tuple[LoadedRule, ...] | None = None

    @property
    def frozen(self) -> bool:
        return self._resolved is not None

    def register(self, rule: PricingRule, *, source: str = "manual") -> None:
        """
        Register a ready-made rule instance.
        """
        if not callable(getattr(rule, "apply", None)):
            raise RuleConfigError(
                f"Object of type {type(rule).__name__} has no apply() method",
                code="not_a_rule",
                source=source,
            )
        self._add(_Provider(factory=lambda: rule, source=source))

    def register_factory(self, factory: RuleFactory, *, source: str | None = None) -> None:
        """
        Register a zero-argument callable producing a rule.
        """
        if not callable(factory):
            raise RuleConfigError("Rule factory must be callable", code="not_callable", source=source)
        self._add(_Provider(factory=factory, source=source or f"factory:{_qualname(factory)}"))

    def register_class(self, cls: type, *, source: str | None = None, **config: Any) -> None:
        """
        Register a rule class; it is instantiated with `config` as keyword arguments.
        """
        self.register_factory(lambda: cls(**config), source=source or f"class:{_qualname(cls)}")

    def resolve(self) -> tuple[PricingRule, ...]:
        """
        Instantiate all providers in registration order and freeze the registry.
        """
        return tuple(entry.rule for entry in self.entries())

    def entries(self) -> tuple[LoadedRule, ...]:
        """
        Same as resolve(), with provenance.
        """
        if self._resolved is None:
            self._resolved = tuple(self._instantiate(p) for p in self._providers)
        return self._resolved

    def build_pipeline(self) -> "PricingPipeline":
        from pricechain.pipeline import PricingPipeline

        return PricingPipeline(self.resolve())

    def __len__(self) -> int:
        return len(self._providers)

    def _add(self, provider: _Provider) -> None:
        if self._resolved is not None:
            raise RuleConfigError(
                "Rule registry is frozen: rules were already resolved",
                code="registry_frozen",
                source=provider.source,
            )
        self._providers.append(provider)

    @staticmethod
    def _instantiate(provider: _Provider) -> LoadedRule:
        rule = provider.factory()
        if not callable(getattr(rule, "apply", None)):
            raise RuleConfigError(
                f"Provider returned {type(rule).__name__}, which has no apply() method",
                code="not_a_rule",
                source=provider.source,
            )
        return LoadedRule(rule=rule, source=provider.source)
