# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Rule contract.

A rule is any callable taking (subject, field, *args) and returning bool.
True means the field, after the call, satisfies the rule. A validate rule
leaves the value alone; a sanitize rule may rewrite it through
subject.set() before answering. False means the value could not be brought
into compliance.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from fieldspec.core.subject import Subject

__all__ = ("Rule", "RuleFactory")


@runtime_checkable
class Rule(Protocol):
    def __call__(self, subject: Subject, field: str, *args: Any) -> bool: ...


RuleFactory = Callable[[], Rule]
"""Zero-argument callable building a Rule on first lookup."""
