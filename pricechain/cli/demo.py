from pricechain.cli.exitcodes import EXIT_OK
from pricechain.core.composition import compose
from pricechain.model.types import Cart, CartItem, Customer, Order
from pricechain.rules.builtins import ConditionalLoyaltyDiscount, FlatPercentageDiscount


def run() -> int:
    """
    Console sample: a gold customer buys an oil filter and engine oil; a
    new-year 10% discount runs before the 5% loyalty discount.
    """
    cart = Cart(
        items=(CartItem("Oil Filter", 400, 1), CartItem("Engine Oil", 1200, 1)),
        customer=Customer("user@example.com", is_gold=True),
    )
    composition = compose(
        rules=[
            FlatPercentageDiscount.from_percent(10, name="new-year"),
            ConditionalLoyaltyDiscount.from_percent(5, name="loyalty"),
        ]
    )

    total = composition.checkout.calculate_total(cart)
    print(f"Final Total: {total}")

    composition.orders.place_order(Order(customer_email=cart.customer.email))
    return EXIT_OK
