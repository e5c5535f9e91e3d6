# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""fieldspec - Per-field validation and sanitization rule specifications.

Top-level re-exports for convenient imports:
- RuleSpecification, ValidateSpec, SanitizeSpec, FailureMode, SpecBinding
- RuleLocator, Rule, Between
- FieldSpecError, ConfigurationError, RuleNotFoundError, SpecFrozenError
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Lazy import mapping
_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    # spec
    "FailureMode": ("fieldspec.spec.binding", "FailureMode"),
    "SpecBinding": ("fieldspec.spec.binding", "SpecBinding"),
    "load_bindings": ("fieldspec.spec.binding", "load_bindings"),
    "RuleSpecification": ("fieldspec.spec.spec", "RuleSpecification"),
    "SanitizeSpec": ("fieldspec.spec.validate", "SanitizeSpec"),
    "ValidateSpec": ("fieldspec.spec.validate", "ValidateSpec"),
    # rules
    "Between": ("fieldspec.rules.sanitize", "Between"),
    "Rule": ("fieldspec.rules.rule", "Rule"),
    "RuleLocator": ("fieldspec.rules.locator", "RuleLocator"),
    # subject
    "as_subject": ("fieldspec.core.subject", "as_subject"),
    # errors
    "ConfigurationError": ("fieldspec.errors", "ConfigurationError"),
    "FieldSpecError": ("fieldspec.errors", "FieldSpecError"),
    "RuleNotFoundError": ("fieldspec.errors", "RuleNotFoundError"),
    "SpecFrozenError": ("fieldspec.errors", "SpecFrozenError"),
}

_LOADED: dict[str, object] = {}


def __getattr__(name: str) -> object:
    """Lazy import attributes on first access."""
    if name in _LOADED:
        return _LOADED[name]

    if name in _LAZY_IMPORTS:
        from importlib import import_module

        module_name, attr_name = _LAZY_IMPORTS[name]
        module = import_module(module_name)
        value = getattr(module, attr_name)
        _LOADED[name] = value
        return value

    raise AttributeError(f"module 'fieldspec' has no attribute {name!r}")


def __dir__() -> list[str]:
    """Return all available attributes for autocomplete."""
    return list(__all__)


if TYPE_CHECKING:
    from fieldspec.core.subject import as_subject
    from fieldspec.errors import (
        ConfigurationError,
        FieldSpecError,
        RuleNotFoundError,
        SpecFrozenError,
    )
    from fieldspec.rules.locator import RuleLocator
    from fieldspec.rules.rule import Rule
    from fieldspec.rules.sanitize import Between
    from fieldspec.spec.binding import FailureMode, SpecBinding, load_bindings
    from fieldspec.spec.spec import RuleSpecification
    from fieldspec.spec.validate import SanitizeSpec, ValidateSpec

__all__ = [
    "Between",
    "ConfigurationError",
    "FailureMode",
    "FieldSpecError",
    "Rule",
    "RuleLocator",
    "RuleNotFoundError",
    "RuleSpecification",
    "SanitizeSpec",
    "SpecBinding",
    "SpecFrozenError",
    "ValidateSpec",
    "as_subject",
    "load_bindings",
]
