# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Pricechain Contributors
#
# This file is part of Pricechain.
#
# Pricechain is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Pricechain is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pricechain.errors import InvalidInputError, RuleConfigError
from pricechain.model.loader import read_document
from pricechain.rules.builtins import BUILTIN_RULE_KINDS, RuleKinds
from pricechain.rules.registry import RuleRegistry

SUPPORTED_VERSIONS = (1,)

# keys every entry may carry besides its kind-specific configuration
_COMMON_KEYS = frozenset({"kind", "name", "factor", "percent"})


@dataclass(frozen=True, slots=True)
class RuleSpec:
    """
    One declarative rule entry, before instantiation.
    """

    kind: str
    source: str
    name: str | None = None
    factor: Any = None
    percent: Any = None
    options: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class DefaultRuleFileLoader:
    """
    Loads a rules document (rules.yaml / rules.yml / rules.json) into a registry.

        version: 1
        rules:
          - kind: campaign
            name: oem
            percent: 10
            active: true
          - kind: surcharge
            name: gst
            factor: "1.18"

    Responsibilities:
      - Read and validate the document
      - Register one provider per entry, in document order
      - Report problems as RuleConfigError with a stable code
    """

    kinds: RuleKinds = field(default_factory=lambda: dict(BUILTIN_RULE_KINDS))

    def load_specs(self, path: str | Path) -> tuple[RuleSpec, ...]:
        path = Path(path) if not isinstance(path, Path) else path
        data = read_document(path, error_cls=RuleConfigError)

        if isinstance(data, list):
            # bare list form: no version header
            raw_rules: Any = data
        elif isinstance(data, dict):
            version = data.get("version", 1)
            if version not in SUPPORTED_VERSIONS:
                raise RuleConfigError(
                    f"Unsupported rules document version: {version!r}",
                    code="invalid_version",
                    source=str(path),
                    details={"supported": list(SUPPORTED_VERSIONS)},
                )
            raw_rules = data.get("rules") or []
        else:
            raise RuleConfigError(
                "Rules document root must be a mapping or a list.",
                code="invalid_rules_document",
                source=str(path),
            )

        if not isinstance(raw_rules, list):
            raise RuleConfigError("'rules' must be a list.", code="invalid_rules", source=str(path))

        return tuple(self._parse_entry(raw, f"{path}#{idx}") for idx, raw in enumerate(raw_rules))

    def load_into(self, registry: RuleRegistry, path: str | Path) -> int:
        """
        Register every rule of the document into `registry`. Returns the number registered.
        """
        specs = self.load_specs(path)
        # instantiate everything first so a bad entry leaves the registry untouched
        rules = [self.instantiate(spec) for spec in specs]
        for spec, rule in zip(specs, rules):
            registry.register(rule, source=spec.source)
        return len(specs)

    def load_many(self, registry: RuleRegistry, paths: Sequence[str | Path]) -> int:
        return sum(self.load_into(registry, p) for p in paths)

    def instantiate(self, spec: RuleSpec) -> Any:
        cls = self.kinds.get(spec.kind)
        if cls is None:
            raise RuleConfigError(
                f"Unknown rule kind '{spec.kind}'. Available: {sorted(self.kinds)}.",
                code="unknown_rule_kind",
                source=spec.source,
                details={"kind": spec.kind, "available": sorted(self.kinds)},
            )

        try:
            if spec.percent is not None:
                return cls.from_percent(spec.percent, name=spec.name, **spec.options)
            return cls(spec.factor, name=spec.name, **spec.options)
        except InvalidInputError as e:
            raise RuleConfigError(
                f"Invalid configuration for rule '{spec.name or spec.kind}': {e.message}",
                code="invalid_rule_config",
                source=spec.source,
                details={"kind": spec.kind, "error": e.code},
            ) from e
        except TypeError as e:
            raise RuleConfigError(
                f"Unexpected options for rule kind '{spec.kind}': {sorted(spec.options)}",
                code="invalid_rule_options",
                source=spec.source,
                details={"kind": spec.kind, "error": str(e)},
            ) from e

    def _parse_entry(self, raw: Any, source: str) -> RuleSpec:
        if not isinstance(raw, dict):
            raise RuleConfigError("Rule entry must be an object.", code="invalid_rule_entry", source=source)

        kind = raw.get("kind")
        if not isinstance(kind, str) or not kind.strip():
            raise RuleConfigError("Rule entry requires a 'kind'.", code="missing_rule_kind", source=source)

        has_factor = raw.get("factor") is not None
        has_percent = raw.get("percent") is not None
        if has_factor == has_percent:
            raise RuleConfigError(
                "Rule entry requires exactly one of 'factor' or 'percent'.",
                code="invalid_rule_entry",
                source=source,
            )

        name = raw.get("name")
        return RuleSpec(
            kind=kind.strip(),
            source=source,
            name=str(name) if name is not None else None,
            # YAML floats would lose precision as binary; keep them as their text form
            factor=str(raw["factor"]) if has_factor else None,
            percent=str(raw["percent"]) if has_percent else None,
            options={k: v for k, v in raw.items() if k not in _COMMON_KEYS},
        )
