"""
clamped_value

A value holder that clamps every assignment into a fixed range.

Public API:
- ClampedValue: Holds a value within normalized inclusive bounds.
- ClampedAttribute: Descriptor declaring a clamped attribute on a class.
- clamp: Plain clamp of a value between two bounds.
- ClosedRange, HalfOpenRange, RangeFrom, RangeUpTo, RangeThrough: Range specifications.
- FloatKind, IntegerKind, GenericKind, resolve_kind: Value kinds.
- configure_logging: Package log level and optional log file.
"""

from __future__ import annotations

from clamped_value.clamping import ClampedValue, clamp
from clamped_value.descriptor import ClampedAttribute
from clamped_value.errors import ClampingError, InvalidRangeError, UnsupportedRangeError
from clamped_value.kinds import FloatKind, GenericKind, IntegerKind, ValueKind, resolve_kind
from clamped_value.logger import configure_logging, get_logger
from clamped_value.ranges import ClosedRange, HalfOpenRange, RangeFrom, RangeThrough, RangeUpTo, normalize_range

__all__ = [
    "ClampedValue",
    "ClampedAttribute",
    "clamp",
    "ClosedRange",
    "HalfOpenRange",
    "RangeFrom",
    "RangeUpTo",
    "RangeThrough",
    "normalize_range",
    "ValueKind",
    "FloatKind",
    "IntegerKind",
    "GenericKind",
    "resolve_kind",
    "ClampingError",
    "InvalidRangeError",
    "UnsupportedRangeError",
    "configure_logging",
]

_logger = get_logger("clamped_value")
