import argparse
import logging
import sys

from pricechain._version import _detect_version
from pricechain.cli import checkout, demo, quote, rules
from pricechain.cli.exitcodes import EXIT_ENGINE_ERROR, EXIT_INVALID_INPUT
from pricechain.core.logs import configure_logging
from pricechain.errors import PricingError


def _add_pricing_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--rules", action="append", default=None, help="Rules file path (repeatable, applied in order).")
    p.add_argument("--config", default=None, help="Config file (pricechain.yaml).")
    p.add_argument("--format", choices=["text", "json"], default="text", help="Output format.")
    p.add_argument("--explain", action="store_true", help="Show the running total after each rule.")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="pricechain", description="Pricechain: ordered pricing-rule pipeline")
    p.add_argument("--version", action="version", version=f"pricechain {_detect_version()}")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    p.add_argument("--log-json", dest="log_json", action="store_true", help="Emit logs as JSON lines.")

    sub = p.add_subparsers(dest="cmd", required=True)

    # quote
    quote_p = sub.add_parser("quote", help="Price a base amount.")
    quote_p.add_argument("amount", help="Base amount (non-negative decimal).")
    quote_p.add_argument("--email", default=None, help="Customer email for context-aware rules.")
    quote_p.add_argument("--gold", action="store_true", help="Treat the customer as a gold member.")
    _add_pricing_args(quote_p)

    # checkout
    checkout_p = sub.add_parser("checkout", help="Price a cart file (cart.yaml / cart.json).")
    checkout_p.add_argument("cart", help="Cart file path.")
    _add_pricing_args(checkout_p)

    # rules
    rules_p = sub.add_parser("rules", help="List the assembled rule chain.")
    rules_p.add_argument("--rules", action="append", default=None, help="Rules file path (repeatable).")
    rules_p.add_argument("--format", choices=["text", "json"], default="text", help="Output format.")

    # demo
    sub.add_parser("demo", help="Run the console sample.")

    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(json=args.log_json, level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.cmd == "quote":
            return quote.run(
                amount=args.amount,
                rules=tuple(args.rules) if args.rules is not None else None,
                config=args.config,
                email=args.email,
                gold=args.gold,
                fmt=args.format,
                explain=args.explain,
            )

        if args.cmd == "checkout":
            return checkout.run(
                cart=args.cart,
                rules=tuple(args.rules) if args.rules is not None else None,
                config=args.config,
                fmt=args.format,
                explain=args.explain,
            )

        if args.cmd == "rules":
            return rules.show(
                rules=tuple(args.rules) if args.rules is not None else None,
                fmt=args.format,
            )

        if args.cmd == "demo":
            return demo.run()

        print("Unknown command.", file=sys.stderr)
        return EXIT_ENGINE_ERROR

    except PricingError as e:
        print(f"pricechain: error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except Exception as e:
        print(f"pricechain: error: {e}", file=sys.stderr)
        return EXIT_ENGINE_ERROR


if __name__ == "__main__":
    sys.exit(main())
