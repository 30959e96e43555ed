from pricechain.cli._io import default_rules_files
from pricechain.cli.exitcodes import EXIT_OK
from pricechain.core.composition import compose
from pricechain.core.config import AppConfig
from pricechain.reporting._json import dumps_deterministic
from pricechain.rules.explain import explain_rule


def show(*, rules: tuple[str, ...] | None, fmt: str) -> int:
    """
    Print the assembled rule chain in application order.

    Only rule sources are read; the application config plays no part in
    which rules are assembled.
    """
    rules_files = rules if rules is not None else default_rules_files()
    entries = compose(AppConfig(), rules_files=rules_files).registry.entries()

    if fmt == "json":
        payload = [{"position": i + 1, "rule": explain_rule(e.rule), "source": e.source} for i, e in enumerate(entries)]
        print(dumps_deterministic(payload, indent=2))
        return EXIT_OK

    if not entries:
        print("No rules configured (pipeline is the identity).")
        return EXIT_OK

    for i, e in enumerate(entries, start=1):
        print(f"{i}. {explain_rule(e.rule)}  [{e.source}]")
    return EXIT_OK
