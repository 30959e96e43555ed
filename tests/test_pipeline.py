from dataclasses import dataclass
from decimal import Decimal
from unittest.mock import Mock

import pytest
from pricechain.errors import InvalidInputError
from pricechain.model.types import Cart
from pricechain.money import quantize_money
from pricechain.pipeline import PricingPipeline
from pricechain.rules.builtins import (
    ConditionalCampaignRule,
    ConditionalLoyaltyDiscount,
    FlatPercentageDiscount,
    PercentageSurcharge,
)

# ----------------------------
# Helpers
# ----------------------------


@dataclass(frozen=True)
class FlatFee:
    """Additive rule: does not commute with multiplicative ones."""

    amount: Decimal

    def apply(self, total: Decimal, context: Cart | None) -> Decimal:
        return total + self.amount


@dataclass(frozen=True)
class Recording:
    """Multiplies and records the total it saw, in call order."""

    factor: Decimal
    seen: list

    def apply(self, total: Decimal, context: Cart | None) -> Decimal:
        self.seen.append(total)
        return total * self.factor


class Boom(RuntimeError):
    pass


@dataclass(frozen=True)
class Exploding:
    def apply(self, total: Decimal, context: Cart | None) -> Decimal:
        raise Boom("rule failed")


# ----------------------------
# Identity / zero
# ----------------------------


@pytest.mark.parametrize("base", [Decimal("0"), Decimal("1"), Decimal("123.45"), Decimal("1000000")])
def test_empty_pipeline_is_identity(base, gold_cart):
    assert PricingPipeline([]).compute(base, gold_cart) == base
    assert PricingPipeline().compute(base) == base


def test_zero_base_stays_zero_for_multiplicative_rules(gold_cart):
    pipeline = PricingPipeline(
        [
            FlatPercentageDiscount(Decimal("0.9")),
            PercentageSurcharge(Decimal("1.18")),
            ConditionalLoyaltyDiscount(Decimal("0.95")),
            ConditionalCampaignRule(Decimal("0.5"), True),
        ]
    )
    assert pipeline.compute(Decimal("0"), gold_cart) == 0


def test_compute_accepts_int_and_string_bases():
    pipeline = PricingPipeline([FlatPercentageDiscount(Decimal("0.5"))])
    assert pipeline.compute(10) == Decimal("5")
    assert pipeline.compute("10.00") == Decimal("5")


# ----------------------------
# Ordering
# ----------------------------


def test_scenario_two_discounts_in_order(gold_cart):
    # subtotal 100, 10% off then 5% off
    pipeline = PricingPipeline([FlatPercentageDiscount(Decimal("0.90")), FlatPercentageDiscount(Decimal("0.95"))])
    assert pipeline.compute(gold_cart.subtotal, gold_cart) == Decimal("85.5")


def test_scenario_oem_campaign_and_gst_both_orders():
    oem = ConditionalCampaignRule.from_percent(10, True)
    gst = PercentageSurcharge.from_percent(18)

    assert PricingPipeline([oem, gst]).compute(Decimal("1000")) == Decimal("1062.0")
    # pure multiplicative scalars commute
    assert PricingPipeline([gst, oem]).compute(Decimal("1000")) == Decimal("1062.0")


def test_additive_and_multiplicative_rules_are_order_sensitive():
    fee = FlatFee(Decimal("10"))
    discount = FlatPercentageDiscount(Decimal("0.9"))

    fee_first = PricingPipeline([fee, discount]).compute(Decimal("100"))
    discount_first = PricingPipeline([discount, fee]).compute(Decimal("100"))

    assert fee_first == Decimal("99.0")  # (100 + 10) * 0.9
    assert discount_first == Decimal("100.0")  # 100 * 0.9 + 10
    assert fee_first != discount_first


def test_rules_run_strictly_left_to_right():
    seen: list = []
    pipeline = PricingPipeline(
        [Recording(Decimal("2"), seen), Recording(Decimal("3"), seen), Recording(Decimal("5"), seen)]
    )

    assert pipeline.compute(Decimal("1")) == Decimal("30")
    assert seen == [Decimal("1"), Decimal("2"), Decimal("6")]


def test_rule_receives_the_context_unchanged(gold_cart):
    rule = Mock()
    rule.apply.side_effect = lambda t, c: t

    PricingPipeline([rule]).compute(Decimal("10"), gold_cart)

    rule.apply.assert_called_once_with(Decimal("10"), gold_cart)


def test_loyalty_rule_depends_on_context(gold_cart, regular_cart):
    pipeline = PricingPipeline([ConditionalLoyaltyDiscount(Decimal("0.95"))])
    assert pipeline.compute(Decimal("100"), gold_cart) == Decimal("95")
    assert pipeline.compute(Decimal("100"), regular_cart) == Decimal("100")
    assert pipeline.compute(Decimal("100")) == Decimal("100")


# ----------------------------
# Construction / determinism
# ----------------------------


def test_pipelines_from_same_rules_are_deterministic(gold_cart):
    rules = [FlatPercentageDiscount(Decimal("0.9")), ConditionalLoyaltyDiscount(Decimal("0.95"))]
    a = PricingPipeline(rules)
    b = PricingPipeline(rules)

    assert a.compute(Decimal("250"), gold_cart) == b.compute(Decimal("250"), gold_cart)
    assert a.compute(Decimal("250"), gold_cart) == a.compute(Decimal("250"), gold_cart)


def test_rule_sequence_is_fixed_after_construction():
    rules = [FlatPercentageDiscount(Decimal("0.9"))]
    pipeline = PricingPipeline(rules)
    rules.append(FlatPercentageDiscount(Decimal("0")))

    assert len(pipeline) == 1
    assert pipeline.compute(Decimal("100")) == Decimal("90.0")


def test_rules_can_be_shared_between_pipelines():
    shared = FlatPercentageDiscount(Decimal("0.5"))
    one = PricingPipeline([shared])
    two = PricingPipeline([shared, shared])

    assert one.compute(Decimal("8")) == Decimal("4")
    assert two.compute(Decimal("8")) == Decimal("2")


def test_accepts_any_iterable():
    pipeline = PricingPipeline(r for r in [PercentageSurcharge(Decimal("2"))])
    assert pipeline.compute(Decimal("3")) == Decimal("6")
    assert pipeline.compute(Decimal("3")) == Decimal("6")


# ----------------------------
# Failures
# ----------------------------


def test_negative_base_is_rejected():
    with pytest.raises(InvalidInputError) as exc:
        PricingPipeline([]).compute(Decimal("-1"))
    assert exc.value.code == "negative_amount"


@pytest.mark.parametrize("base", ["abc", None, True, float("nan")])
def test_non_numeric_base_is_rejected(base):
    with pytest.raises(InvalidInputError):
        PricingPipeline([]).compute(base)


@pytest.mark.parametrize("base", ["1e1000000", Decimal("9E+999999")])
def test_base_beyond_decimal_range_is_rejected(base):
    pipeline = PricingPipeline([FlatPercentageDiscount(Decimal("0.9"))])
    with pytest.raises(InvalidInputError) as exc:
        pipeline.compute(base)
    assert exc.value.code == "amount_out_of_range"


def test_large_base_within_range_is_priced():
    pipeline = PricingPipeline([FlatPercentageDiscount(Decimal("0.9")), PercentageSurcharge(Decimal("1.18"))])
    total = pipeline.compute("1e30")

    assert total == Decimal("1.062E+30")
    assert str(quantize_money(total)) == "1062000000000000000000000000000.00"


def test_negative_zero_base_is_normalised():
    total = PricingPipeline([FlatPercentageDiscount(Decimal("0.9"))]).compute("-0")

    assert not total.is_signed()
    assert str(quantize_money(total)) == "0.00"


def test_failing_rule_propagates_and_stops_the_fold():
    seen: list = []
    after = Recording(Decimal("2"), seen)
    pipeline = PricingPipeline([FlatPercentageDiscount(Decimal("0.9")), Exploding(), after])

    with pytest.raises(Boom, match="rule failed"):
        pipeline.compute(Decimal("100"))

    assert seen == []


# ----------------------------
# Trace
# ----------------------------


def test_trace_records_each_step(gold_cart):
    pipeline = PricingPipeline(
        [
            FlatPercentageDiscount(Decimal("0.9"), name="new-year"),
            ConditionalCampaignRule(Decimal("0.5"), False, name="spring"),
        ]
    )
    steps = pipeline.trace(Decimal("100"), gold_cart)

    assert [s.rule for s in steps] == ["new-year", "spring"]
    assert steps[0].before == Decimal("100") and steps[0].after == Decimal("90.0")
    assert steps[1].changed is False
    assert steps[-1].after == pipeline.compute(Decimal("100"), gold_cart)


def test_trace_of_empty_pipeline_is_empty():
    assert PricingPipeline([]).trace(Decimal("5")) == ()


def test_repr_lists_rule_names():
    pipeline = PricingPipeline(
        [FlatPercentageDiscount(Decimal("0.9"), name="a"), PercentageSurcharge(Decimal("1.1"))]
    )
    assert repr(pipeline) == "PricingPipeline([a, PercentageSurcharge])"
