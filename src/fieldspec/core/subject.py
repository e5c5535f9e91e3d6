# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Subject accessors: uniform get/set by field name over any record shape.

Specifications and rules never touch the record directly. They go through
a Subject, so a dict, a dataclass, a pydantic model or a plain object are
all valid subjects without a closed schema.

Example:
    >>> subject = as_subject({"age": 15})
    >>> subject.get("age")
    15
    >>> subject.set("age", 10)
    >>> subject.raw
    {'age': 10}
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, Protocol, runtime_checkable

from .types import Unset

__all__ = (
    "AttributeSubject",
    "MappingSubject",
    "Subject",
    "as_subject",
)


@runtime_checkable
class Subject(Protocol):
    """Key-value view over the record being filtered."""

    raw: Any

    def has(self, field: str) -> bool: ...

    def get(self, field: str, default: Any = Unset) -> Any: ...

    def set(self, field: str, value: Any) -> None: ...


class MappingSubject:
    """Subject backed by a mutable mapping; fields are keys."""

    __slots__ = ("raw",)

    def __init__(self, raw: MutableMapping[str, Any]) -> None:
        self.raw = raw

    def has(self, field: str) -> bool:
        return field in self.raw

    def get(self, field: str, default: Any = Unset) -> Any:
        return self.raw.get(field, default)

    def set(self, field: str, value: Any) -> None:
        self.raw[field] = value

    def __repr__(self) -> str:
        return f"MappingSubject({self.raw!r})"


class AttributeSubject:
    """Subject backed by object attributes."""

    __slots__ = ("raw",)

    def __init__(self, raw: Any) -> None:
        self.raw = raw

    def has(self, field: str) -> bool:
        return hasattr(self.raw, field)

    def get(self, field: str, default: Any = Unset) -> Any:
        return getattr(self.raw, field, default)

    def set(self, field: str, value: Any) -> None:
        setattr(self.raw, field, value)

    def __repr__(self) -> str:
        return f"AttributeSubject({self.raw!r})"


def as_subject(obj: Any) -> Subject:
    """Wrap obj in the matching accessor. Existing accessors pass through.

    Raises:
        TypeError: If obj is a read-only mapping.
    """
    if isinstance(obj, (MappingSubject, AttributeSubject)):
        return obj
    if isinstance(obj, MutableMapping):
        return MappingSubject(obj)
    if isinstance(obj, Mapping):
        raise TypeError(
            f"Subject mapping must be mutable, got {type(obj).__name__}"
        )
    if isinstance(obj, Subject):
        return obj
    return AttributeSubject(obj)
