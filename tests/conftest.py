from decimal import Decimal

import pytest
import structlog
from pricechain.model.types import Cart, CartItem, Customer


@pytest.fixture(autouse=True)
def _reset_structlog():
    # CLI tests reconfigure structlog globally; keep tests independent
    yield
    structlog.reset_defaults()


@pytest.fixture
def gold_cart() -> Cart:
    return Cart(items=(CartItem("Item", Decimal("100"), 1),), customer=Customer("a@b.com", is_gold=True))


@pytest.fixture
def regular_cart() -> Cart:
    return Cart(items=(CartItem("Item", Decimal("100"), 1),), customer=Customer("c@d.com", is_gold=False))
