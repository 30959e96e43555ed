from pricechain.money import quantize_money
from pricechain.reporting.types import Quote
from pricechain.rules.explain import explain_step


class TextQuoteRenderer:
    """
    Human-readable CLI output. Pure rendering: does not recompute anything.

    With `explain=True` every rule step is listed under the total.
    """

    def __init__(self, *, explain: bool = False) -> None:
        self.explain = explain

    def render(self, quote: Quote) -> str:
        lines: list[str] = [f"Final Total: {quantize_money(quote.total)}"]

        if not quote.discounts_enabled:
            lines.append("(discounts disabled: base returned unchanged)")

        if self.explain:
            lines.append("")
            lines.append(f"Base: {quote.base}")
            if not quote.steps:
                lines.append("No rules applied.")
            for step in quote.steps:
                lines.append(explain_step(step))

        return "\n".join(lines) + "\n"
