from pathlib import Path

DEFAULT_RULES_FILES = ("pricing.rules.yaml", "pricing.rules.yml", "pricing.rules.json")
DEFAULT_CONFIG_FILES = ("pricechain.yaml", "pricechain.yml", "pricechain.json")


def _first_existing(root: Path, names: tuple[str, ...]) -> Path | None:
    for name in names:
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


def default_rules_files(cwd: str = ".") -> tuple[str, ...]:
    found = _first_existing(Path(cwd), DEFAULT_RULES_FILES)
    return (str(found),) if found is not None else ()


def default_config_file(cwd: str = ".") -> str | None:
    found = _first_existing(Path(cwd), DEFAULT_CONFIG_FILES)
    return str(found) if found is not None else None
