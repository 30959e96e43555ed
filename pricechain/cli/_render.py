from pricechain.reporting.renderers.json import JsonQuoteRenderer
from pricechain.reporting.renderers.text import TextQuoteRenderer
from pricechain.reporting.types import Quote


def render_quote(quote: Quote, *, fmt: str, explain: bool) -> str:
    if fmt == "json":
        return JsonQuoteRenderer().render(quote)
    return TextQuoteRenderer(explain=explain).render(quote)
