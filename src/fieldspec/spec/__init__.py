# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Rule specifications: field + rule + args + blank policy + failure mode."""

from .binding import FailureMode, SpecBinding, load_binding, load_bindings
from .spec import RuleSpecification
from .validate import SanitizeSpec, ValidateSpec

__all__ = (
    "FailureMode",
    "RuleSpecification",
    "SanitizeSpec",
    "SpecBinding",
    "ValidateSpec",
    "load_binding",
    "load_bindings",
)
