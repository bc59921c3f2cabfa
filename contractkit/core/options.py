"""Helpers for closed, enumerated feature options."""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

from .errors import UnknownEnumValue

E = TypeVar("E", bound=Enum)


def parse_enum(enum_cls: type[E], option: str, value: Any, disabled: E | None = None) -> E:
    """Coerce *value* into a member of *enum_cls*.

    ``None``, ``False`` and ``""`` map to *disabled* when one is given, so
    callers may switch a feature off the way option payloads usually do.

    Raises:
        UnknownEnumValue: If *value* is not one of the declared variants.
    """
    if isinstance(value, enum_cls):
        return value
    if disabled is not None and (value is None or value is False or value == ""):
        return disabled
    try:
        return enum_cls(value)
    except ValueError:
        raise UnknownEnumValue(option, value, [member.value for member in enum_cls]) from None
