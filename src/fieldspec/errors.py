# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Error taxonomy for rule specifications.

Validation failures are never raised: a rule that rejects a value returns
False. Exceptions here signal configuration problems (unknown rule names,
missing fields, mutating a finalized spec) that must not be confused with
"field is invalid".
"""

from __future__ import annotations

from typing import Any

__all__ = (
    "ConfigurationError",
    "FieldSpecError",
    "RuleNotFoundError",
    "SpecFrozenError",
)


class FieldSpecError(Exception):
    """Base error carrying a message and structured details."""

    default_message: str = "fieldspec error"

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": type(self).__name__,
            "message": self.message,
            "details": dict(self.details),
        }

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class ConfigurationError(FieldSpecError):
    """Specification or resolver is set up incorrectly."""

    default_message = "Invalid configuration"


class RuleNotFoundError(ConfigurationError, KeyError):
    """Rule name has no registration in the locator."""

    default_message = "Rule not found"


class SpecFrozenError(ConfigurationError):
    """Configuration call on a specification that has already been evaluated."""

    default_message = "Specification is frozen"
