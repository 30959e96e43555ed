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

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, getcontext
from typing import Any, Final

from pricechain.errors import InvalidInputError

ZERO: Final[Decimal] = Decimal("0")
CENT: Final[Decimal] = Decimal("0.01")


def to_money(value: Any, *, field: str = "amount") -> Decimal:
    """
    Coerce a user-supplied amount into a Decimal.

    Accepts Decimal, int and numeric strings. Floats go through str() so that
    0.9 becomes Decimal("0.9") rather than its binary expansion.
    """
    if isinstance(value, bool):
        raise InvalidInputError(f"{field} must be a number, got a boolean", details={field: value})

    if isinstance(value, Decimal):
        out = value
    elif isinstance(value, (int, float, str)):
        try:
            out = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise InvalidInputError(f"{field} is not a valid decimal: {value!r}", details={field: value}) from e
    else:
        raise InvalidInputError(
            f"{field} must be a decimal, int or numeric string, got {type(value).__name__}",
            details={field: repr(value)},
        )

    if not out.is_finite():
        raise InvalidInputError(f"{field} must be finite: {value!r}", details={field: str(value)})
    # half the exponent range: the product of two in-range amounts still fits the context
    if out and out.adjusted() > getcontext().Emax // 2:
        raise InvalidInputError(
            f"{field} is out of range: {value!r}",
            code="amount_out_of_range",
            details={field: str(value)},
        )
    return out


def to_non_negative_money(value: Any, *, field: str = "amount") -> Decimal:
    out = to_money(value, field=field)
    if out < ZERO:
        raise InvalidInputError(
            f"{field} must not be negative: {out}",
            code="negative_amount",
            details={field: str(out)},
        )
    # Decimal("-0") compares equal to zero but renders as "-0.00"
    return out.copy_abs() if out == ZERO else out


def quantize_money(value: Decimal, exp: Decimal = CENT) -> Decimal:
    """Round for display only. Pricing arithmetic itself never rounds."""
    ctx = getcontext().copy()
    # enough digits for every integer place plus the requested fraction
    ctx.prec = max(ctx.prec, value.adjusted() - exp.adjusted() + 1)
    return value.quantize(exp, rounding=ROUND_HALF_UP, context=ctx)
