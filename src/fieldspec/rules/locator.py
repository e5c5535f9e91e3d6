# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Rule locator: maps rule names to rule instances.

Rules are registered either as ready instances or as factories that build
the rule on first lookup. Specifications hold a locator and resolve their
rule by name at evaluation time, so a rule registered after a spec was
configured is still found.

Example:
    locator = RuleLocator()
    locator.register("between", Between())
    locator.register_factory("slow", build_slow_rule)

    rule = locator.get("between")
    rule(subject, "age", 1, 10)
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping

from fieldspec.errors import RuleNotFoundError

from .rule import Rule, RuleFactory

logger = logging.getLogger(__name__)

__all__ = ("RuleLocator",)


class RuleLocator:
    """Name -> Rule registry with lazy factory construction.

    Lookups are read-mostly and safe from several threads. Factory
    construction runs under a reentrant lock so each name builds exactly
    one rule, and a factory may itself resolve other rules from the
    same locator.
    """

    def __init__(
        self,
        rules: Mapping[str, Rule] | None = None,
        factories: Mapping[str, RuleFactory] | None = None,
    ):
        self._rules: dict[str, Rule] = {}
        self._factories: dict[str, RuleFactory] = {}
        self._lock = threading.RLock()

        for name, rule in (rules or {}).items():
            self.register(name, rule)
        for name, factory in (factories or {}).items():
            self.register_factory(name, factory)

    @classmethod
    def with_defaults(cls) -> RuleLocator:
        """Locator pre-loaded with the built-in sanitize rules."""
        from .sanitize import default_sanitize_factories

        return cls(factories=default_sanitize_factories())

    def register(self, name: str, rule: Rule, *, override: bool = False) -> None:
        """Register a rule instance under name.

        Args:
            name: Lookup key used by specifications.
            rule: Callable (subject, field, *args) -> bool.
            override: Allow replacing an existing registration.

        Raises:
            ValueError: If name exists and override=False.
            TypeError: If rule is not callable.
        """
        if not callable(rule):
            raise TypeError(f"Rule '{name}' must be callable, got {type(rule).__name__}")
        with self._lock:
            self._check_override(name, override)
            self._factories.pop(name, None)
            self._rules[name] = rule
        logger.debug("Registered rule '%s'", name)

    def register_factory(
        self, name: str, factory: RuleFactory, *, override: bool = False
    ) -> None:
        """Register a zero-arg factory; the rule is built on first get()."""
        if not callable(factory):
            raise TypeError(
                f"Factory for rule '{name}' must be callable, got {type(factory).__name__}"
            )
        with self._lock:
            self._check_override(name, override)
            self._rules.pop(name, None)
            self._factories[name] = factory
        logger.debug("Registered rule factory '%s'", name)

    def _check_override(self, name: str, override: bool) -> None:
        if name in self._rules or name in self._factories:
            if not override:
                raise ValueError(
                    f"Rule '{name}' already registered. Use override=True to replace."
                )
            logger.warning("Overriding rule registration '%s'", name)

    def get(self, name: str) -> Rule:
        """Resolve rule by name, building it from its factory if needed.

        Raises:
            RuleNotFoundError: If name has no registration.
        """
        rule = self._rules.get(name)
        if rule is not None:
            return rule

        with self._lock:
            # another thread may have built it while we waited
            if name in self._rules:
                return self._rules[name]
            factory = self._factories.get(name)
            if factory is None:
                raise RuleNotFoundError(
                    f"Rule '{name}' not registered",
                    details={"rule": name, "available": self._names()},
                )
            rule = factory()
            self._rules[name] = rule
            del self._factories[name]

        logger.debug("Constructed rule '%s' from factory", name)
        return rule

    def has(self, name: str) -> bool:
        return name in self._rules or name in self._factories

    def unregister(self, name: str) -> bool:
        """Remove registration. Returns True if existed."""
        with self._lock:
            found = self._rules.pop(name, None) is not None
            found = self._factories.pop(name, None) is not None or found
        return found

    def list_names(self) -> list[str]:
        """Return all registered rule names, built or not."""
        with self._lock:
            return self._names()

    def _names(self) -> list[str]:
        return sorted({*self._rules, *self._factories})

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    def __len__(self) -> int:
        return len(self._rules) + len(self._factories)

    def __repr__(self) -> str:
        return f"RuleLocator(rules={self.list_names()})"
