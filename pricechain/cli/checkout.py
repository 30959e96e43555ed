from pricechain.cli._pricing import build_composition, run_quote
from pricechain.cli._render import render_quote
from pricechain.cli.exitcodes import EXIT_OK
from pricechain.model.loader import DefaultCartLoader


def run(
    *,
    cart: str,
    rules: tuple[str, ...] | None,
    config: str | None,
    fmt: str,
    explain: bool,
) -> int:
    """
    Price a cart file: its subtotal is the base, the cart is the context.
    """
    loaded = DefaultCartLoader().load(cart)
    composition = build_composition(rules=rules, config=config)

    quote = run_quote(composition, loaded.subtotal, loaded)
    print(render_quote(quote, fmt=fmt, explain=explain), end="")
    return EXIT_OK
