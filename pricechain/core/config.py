import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from pricechain.errors import ConfigError
from pricechain.model.loader import read_document

DEFAULT_API_BASE_URL = "https://api.example.com"

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


def parse_bool(value: Any, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        v = value.strip().lower()
        if v in _TRUE:
            return True
        if v in _FALSE:
            return False
    raise ConfigError(f"'{key}' must be a boolean, got {value!r}", code="invalid_flag", details={key: repr(value)})


@dataclass(frozen=True)
class AppConfig:
    """
    Read-only application settings consumed by the composition root and
    the services. The pricing pipeline never sees this object.
    """

    api_base_url: str = DEFAULT_API_BASE_URL
    discounts_enabled: bool = True
    extra: Mapping[str, Any] = field(default_factory=dict)  # passthrough, not interpreted here

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, source: str | None = None) -> "AppConfig":
        """
        Build from a loaded document. Feature flags may be given either flat
        (`discounts_enabled: false`) or nested (`feature_flags: {discounts: false}`).
        """
        data = dict(data)
        api_base_url = data.pop("api_base_url", DEFAULT_API_BASE_URL)
        if not isinstance(api_base_url, str) or not api_base_url.strip():
            raise ConfigError("'api_base_url' must be a non-empty string.", code="invalid_api_base_url", source=source)

        flags = data.pop("feature_flags", None) or {}
        if not isinstance(flags, dict):
            raise ConfigError("'feature_flags' must be a mapping/object.", code="invalid_feature_flags", source=source)

        if "discounts_enabled" in data:
            discounts = parse_bool(data.pop("discounts_enabled"), key="discounts_enabled")
        else:
            discounts = parse_bool(flags.get("discounts", True), key="feature_flags.discounts")

        return cls(api_base_url=api_base_url.strip(), discounts_enabled=discounts, extra=data)

    def with_env(self, environ: Mapping[str, str] | None = None, prefix: str = "PRICECHAIN_") -> "AppConfig":
        """
        Overlay PRICECHAIN_API_BASE_URL / PRICECHAIN_DISCOUNTS_ENABLED from the environment.
        """
        env = os.environ if environ is None else environ
        out = self
        url = env.get(f"{prefix}API_BASE_URL")
        if url:
            out = replace(out, api_base_url=url.strip())
        flag = env.get(f"{prefix}DISCOUNTS_ENABLED")
        if flag is not None:
            out = replace(out, discounts_enabled=parse_bool(flag, key=f"{prefix}DISCOUNTS_ENABLED"))
        return out

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, prefix: str = "PRICECHAIN_") -> "AppConfig":
        return cls().with_env(environ, prefix=prefix)


def load_config(path: str | Path) -> AppConfig:
    """
    Load AppConfig from config.yaml / config.yml / config.json.
    """
    path = Path(path)
    data = read_document(path, error_cls=ConfigError)
    if data is None:
        return AppConfig()
    if not isinstance(data, dict):
        raise ConfigError("Config root must be a mapping/object.", code="invalid_config", source=str(path))
    return AppConfig.from_mapping(data, source=str(path))
