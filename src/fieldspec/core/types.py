# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Base types: Enum with lookup helpers, Unset sentinel, HashableModel."""

from __future__ import annotations

from enum import Enum as _Enum
from typing import Any, Final, TypeGuard

from pydantic import BaseModel, ConfigDict

__all__ = (
    "Enum",
    "HashableModel",
    "Unset",
    "UnsetType",
    "is_sentinel",
    "not_sentinel",
)


class Enum(_Enum):
    """Enum with name/value lookup used by configuration parsing."""

    @classmethod
    def allowed(cls) -> tuple[str, ...]:
        return tuple(str(m.value) for m in cls)

    @classmethod
    def coerce(cls, value: Any) -> Enum:
        """Resolve a member from itself, its value, or its name.

        Raises:
            ValueError: If nothing matches.
        """
        if isinstance(value, cls):
            return value
        for member in cls:
            if value == member.value or value == member.name:
                return member
        raise ValueError(
            f"{value!r} is not a valid {cls.__name__}; allowed: {cls.allowed()}"
        )


class UnsetType:
    """Marker for "no value at all", distinct from None."""

    __slots__ = ()
    _instance: UnsetType | None = None

    def __new__(cls) -> UnsetType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Unset"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "Unset"


Unset: Final = UnsetType()


def is_sentinel(value: Any) -> TypeGuard[UnsetType]:
    return value is Unset


def not_sentinel(value: Any) -> bool:
    return value is not Unset


class HashableModel(BaseModel):
    """Frozen pydantic model usable as a dict key or set member."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        use_enum_values=False,
        populate_by_name=True,
    )

    def __hash__(self) -> int:
        return hash((type(self), tuple(self._hash_items())))

    def _hash_items(self):
        for key, value in self.model_dump().items():
            yield key, _freeze(value)


def _freeze(value: Any) -> Any:
    if isinstance(value, dict):
        return tuple(sorted((k, _freeze(v)) for k, v in value.items()))
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value
