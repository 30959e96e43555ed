from pricechain.reporting._json import dumps_deterministic
from pricechain.reporting.types import Quote


class JsonQuoteRenderer:
    """
    Machine-readable output: one JSON document per quote, keys sorted.
    """

    def __init__(self, *, indent: int | None = 2) -> None:
        self.indent = indent

    def render(self, quote: Quote) -> str:
        return dumps_deterministic(quote, indent=self.indent) + "\n"
