from decimal import Decimal

from pricechain.rules.builtins import (
    ConditionalCampaignRule,
    ConditionalLoyaltyDiscount,
    FlatPercentageDiscount,
    PercentageSurcharge,
)
from pricechain.rules.explain import explain_rule, explain_step
from pricechain.rules.types import PricingStep


class ThirdPartyRule:
    def apply(self, total, context):
        return total


def test_explain_campaign_rule_shows_state():
    assert explain_rule(ConditionalCampaignRule(Decimal("0.9"), True, name="oem")) == (
        "oem (ConditionalCampaignRule): x0.9 when campaign is active"
    )
    assert "inactive" in explain_rule(ConditionalCampaignRule(Decimal("0.9"), False))


def test_explain_loyalty_and_flat_rules():
    assert explain_rule(ConditionalLoyaltyDiscount(Decimal("0.95"))) == (
        "ConditionalLoyaltyDiscount: x0.95 for gold customers"
    )
    assert explain_rule(FlatPercentageDiscount(Decimal("0.9"), name="new-year")) == (
        "new-year (FlatPercentageDiscount): x0.9"
    )
    assert explain_rule(PercentageSurcharge(Decimal("1.18"))) == "PercentageSurcharge: x1.18"


def test_explain_unknown_rule_falls_back_to_name():
    assert explain_rule(ThirdPartyRule()) == "ThirdPartyRule"


def test_explain_step():
    changed = PricingStep(index=0, rule="gst", before=Decimal("900"), after=Decimal("1062.00"))
    same = PricingStep(index=1, rule="loyalty", before=Decimal("5"), after=Decimal("5"))

    assert explain_step(changed) == "1. gst: 900 -> 1062.00"
    assert explain_step(same) == "2. loyalty: 5 (unchanged)"
    assert changed.to_dict() == {"index": 0, "rule": "gst", "before": "900", "after": "1062.00"}
