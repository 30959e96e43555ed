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

from collections.abc import Mapping
from typing import Any


class PricingError(Exception):
    """
    Base class for all pricechain errors.

    Carries a stable machine-readable `code` next to the human message so the
    CLI and callers can branch on the kind of failure without parsing text.

    Exceptions raised by a rule's `apply` are NOT converted into this type:
    they reach the caller exactly as the rule raised them.
    """

    code: str
    message: str
    source: str | None = None
    details: Mapping[str, Any] | None = None

    def __init__(
        self,
        message: str,
        code: str = "pricing_error",
        source: str | None = None,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.source = source
        self.details = details

    def __str__(self) -> str:
        if self.source:
            return f"{self.source}: {self.message}"
        return self.message


class InvalidInputError(PricingError, ValueError):
    """Raised for negative prices, non-positive quantities, negative bases and similar bad input."""

    def __init__(self, message: str, code: str = "invalid_input", **kwargs: Any) -> None:
        super().__init__(message, code=code, **kwargs)


class RuleConfigError(PricingError):
    """Raised when a rule set cannot be assembled (bad rules file, unknown kind, frozen registry)."""

    def __init__(self, message: str, code: str = "rule_config_error", **kwargs: Any) -> None:
        super().__init__(message, code=code, **kwargs)


class ConfigError(PricingError):
    """Raised when the application configuration cannot be loaded."""

    def __init__(self, message: str, code: str = "config_error", **kwargs: Any) -> None:
        super().__init__(message, code=code, **kwargs)
