# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures: locators and recording rules."""

from __future__ import annotations

from typing import Any

import pytest

from fieldspec.rules import Between, RuleLocator


class RecordingRule:
    """Rule returning a fixed answer and recording every call."""

    def __init__(self, result: bool = True):
        self.result = result
        self.calls: list[tuple[Any, str, tuple[Any, ...]]] = []

    def __call__(self, subject, field, *args):
        self.calls.append((subject, field, args))
        return self.result


@pytest.fixture
def locator() -> RuleLocator:
    loc = RuleLocator()
    loc.register("between", Between())
    return loc


@pytest.fixture
def failing_rule() -> RecordingRule:
    return RecordingRule(result=False)


@pytest.fixture
def passing_rule() -> RecordingRule:
    return RecordingRule(result=True)


@pytest.fixture
def make_rule():
    """Factory for RecordingRule instances with a chosen answer."""
    return RecordingRule
