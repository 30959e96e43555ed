from pricechain.cli._pricing import build_composition, run_quote
from pricechain.cli._render import render_quote
from pricechain.cli.exitcodes import EXIT_OK
from pricechain.model.types import Cart, Customer


def run(
    *,
    amount: str,
    rules: tuple[str, ...] | None,
    config: str | None,
    email: str | None,
    gold: bool,
    fmt: str,
    explain: bool,
) -> int:
    """
    Price a bare amount. A context (an empty cart) is only built when a
    customer is described on the command line.
    """
    composition = build_composition(rules=rules, config=config)

    context = None
    if email is not None or gold:
        context = Cart(items=(), customer=Customer(email=email or "anonymous@example.com", is_gold=gold))

    quote = run_quote(composition, amount, context)
    print(render_quote(quote, fmt=fmt, explain=explain), end="")
    return EXIT_OK
