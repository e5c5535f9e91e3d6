# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Rules module: rule contract, name-based locator, built-in sanitize rules.

Core exports:
- Rule, RuleFactory: Callable contract and lazy factory type
- RuleLocator: Name -> rule resolver
- RuleNotFoundError: Unknown rule name (configuration error)
- Between: Range clamp sanitizer
"""

from fieldspec.errors import RuleNotFoundError

from .locator import RuleLocator
from .rule import Rule, RuleFactory
from .sanitize import Between, default_sanitize_factories, is_scalar

__all__ = (
    # Contract
    "Rule",
    "RuleFactory",
    "RuleNotFoundError",
    # Locator
    "RuleLocator",
    # Sanitize rules
    "Between",
    "default_sanitize_factories",
    "is_scalar",
)
