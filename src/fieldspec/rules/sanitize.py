# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Built-in sanitize rules.

Sanitize rules repair the value in place and report whether the field now
complies. Between clamps into a range and therefore always succeeds once
the value is a comparable scalar.
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import Any

from fieldspec.core.subject import Subject

from .rule import RuleFactory

__all__ = ("SCALAR_TYPES", "Between", "default_sanitize_factories", "is_scalar")

SCALAR_TYPES: tuple[type, ...] = (bool, int, float, Decimal, Fraction, str)


def is_scalar(value: Any) -> bool:
    """True for single primitive values. None and containers are not scalar."""
    return isinstance(value, SCALAR_TYPES)


class Between:
    """Clamp a value into [low, high].

    Below low becomes low, above high becomes high, anything in range is left
    alone. Non-scalar values, and scalars that cannot be ordered against the
    bounds (a str against int bounds), fail without mutation.
    """

    def __call__(self, subject: Subject, field: str, low: Any, high: Any) -> bool:
        value = subject.get(field, None)
        if not is_scalar(value):
            return False
        try:
            below, above = value < low, value > high
        except TypeError:
            return False
        if below:
            subject.set(field, low)
        if above:
            subject.set(field, high)
        return True

    def __repr__(self) -> str:
        return "Between()"


def default_sanitize_factories() -> dict[str, RuleFactory]:
    return {"between": Between}
