# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Core primitives: sentinels, base types and subject accessors."""

from .subject import AttributeSubject, MappingSubject, Subject, as_subject
from .types import (
    Enum,
    HashableModel,
    Unset,
    UnsetType,
    is_sentinel,
    not_sentinel,
)

__all__ = (
    "AttributeSubject",
    "Enum",
    "HashableModel",
    "MappingSubject",
    "Subject",
    "Unset",
    "UnsetType",
    "as_subject",
    "is_sentinel",
    "not_sentinel",
)
