from importlib.metadata import PackageNotFoundError, version


def _detect_version() -> str:
    """
    Detect pricechain version.

    Falls back to a development placeholder if the package metadata
    is not available.
    """
    try:
        return version("pricechain")
    except PackageNotFoundError:
        return "0.0.0-dev"
