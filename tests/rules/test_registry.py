from decimal import Decimal

import pytest
from pricechain.errors import RuleConfigError
from pricechain.pipeline import PricingPipeline
from pricechain.rules.builtins import (
    ConditionalCampaignRule,
    ConditionalLoyaltyDiscount,
    FlatPercentageDiscount,
    PercentageSurcharge,
)
from pricechain.rules.registry import RuleRegistry


class VatRule:
    """Independently authored rule: registering it needs no change elsewhere."""

    def apply(self, total, context):
        return total * Decimal("1.2")


def make_oem() -> ConditionalCampaignRule:
    return ConditionalCampaignRule(Decimal("0.9"), True)


class TestRuleRegistry:
    """Ordered multi-provider registration."""

    def test_empty_registry_resolves_to_identity_pipeline(self):
        reg = RuleRegistry()
        assert reg.resolve() == ()
        assert reg.build_pipeline().compute(Decimal("12.3")) == Decimal("12.3")

    def test_registration_order_is_preserved_across_provider_kinds(self):
        reg = RuleRegistry()
        reg.register_class(PercentageSurcharge, factor=Decimal("1.18"))
        reg.register(FlatPercentageDiscount(Decimal("0.5")), source="zz-manual")
        reg.register_factory(make_oem)
        reg.register(VatRule(), source="aa-vat")

        rules = reg.resolve()

        assert [type(r).__name__ for r in rules] == [
            "PercentageSurcharge",
            "FlatPercentageDiscount",
            "ConditionalCampaignRule",
            "VatRule",
        ]
        assert [e.source for e in reg.entries()] == [
            "class:PercentageSurcharge",
            "zz-manual",
            "factory:make_oem",
            "aa-vat",
        ]

    def test_factories_are_instantiated_once(self):
        calls: list[int] = []

        def factory():
            calls.append(1)
            return FlatPercentageDiscount(Decimal("0.9"))

        reg = RuleRegistry()
        reg.register_factory(factory, source="counting")

        first = reg.resolve()
        second = reg.resolve()

        assert len(calls) == 1
        assert first[0] is second[0]

    def test_factories_are_not_called_before_resolve(self):
        calls: list[int] = []
        reg = RuleRegistry()
        reg.register_factory(lambda: calls.append(1) or FlatPercentageDiscount(Decimal("1")))

        assert calls == []
        reg.resolve()
        assert calls == [1]

    def test_registry_is_frozen_after_resolve(self):
        reg = RuleRegistry()
        reg.register(FlatPercentageDiscount(Decimal("0.9")))
        reg.resolve()

        assert reg.frozen
        with pytest.raises(RuleConfigError) as exc:
            reg.register(PercentageSurcharge(Decimal("1.18")))
        assert exc.value.code == "registry_frozen"

    def test_register_rejects_objects_without_apply(self):
        reg = RuleRegistry()
        with pytest.raises(RuleConfigError) as exc:
            reg.register(object())  # type: ignore[arg-type]
        assert exc.value.code == "not_a_rule"

    def test_factory_returning_non_rule_fails_on_resolve(self):
        reg = RuleRegistry()
        reg.register_factory(lambda: "nope", source="bad")  # type: ignore[arg-type,return-value]
        with pytest.raises(RuleConfigError) as exc:
            reg.resolve()
        assert exc.value.source == "bad"

    def test_register_factory_requires_callable(self):
        with pytest.raises(RuleConfigError):
            RuleRegistry().register_factory(42)  # type: ignore[arg-type]

    def test_build_pipeline_applies_rules_in_registration_order(self):
        reg = RuleRegistry()
        reg.register_factory(make_oem)
        reg.register_class(PercentageSurcharge, factor=Decimal("1.18"))

        pipeline = reg.build_pipeline()

        assert isinstance(pipeline, PricingPipeline)
        assert pipeline.compute(Decimal("1000")) == Decimal("1062.0")

    def test_same_instance_can_be_shared_by_pipelines(self):
        reg = RuleRegistry()
        reg.register(ConditionalLoyaltyDiscount(Decimal("0.95")))

        a = reg.build_pipeline()
        b = reg.build_pipeline()

        assert a.rules[0] is b.rules[0]

    def test_len_counts_providers(self):
        reg = RuleRegistry()
        reg.register(VatRule())
        reg.register(VatRule())
        assert len(reg) == 2
