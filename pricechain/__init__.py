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

from pricechain._version import _detect_version
from pricechain.errors import ConfigError, InvalidInputError, PricingError, RuleConfigError
from pricechain.model.types import Cart, CartItem, Customer, Order
from pricechain.pipeline import PricingPipeline
from pricechain.rules import (
    ConditionalCampaignRule,
    ConditionalLoyaltyDiscount,
    FlatPercentageDiscount,
    PercentageSurcharge,
    PricingRule,
    RuleRegistry,
)

__version__ = _detect_version()

__all__ = [
    "Cart",
    "CartItem",
    "Customer",
    "Order",
    "PricingRule",
    "PricingPipeline",
    "RuleRegistry",
    "FlatPercentageDiscount",
    "ConditionalLoyaltyDiscount",
    "ConditionalCampaignRule",
    "PercentageSurcharge",
    "PricingError",
    "InvalidInputError",
    "RuleConfigError",
    "ConfigError",
]
