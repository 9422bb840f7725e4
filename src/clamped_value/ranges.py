"""
Range specifications.

Every form normalizes to a closed pair ``(low, high)`` for a given value kind.
One-sided forms borrow the missing bound from the kind's extremes. An
exclusive "up to" bound becomes the kind's predecessor of that bound; half-open
ranges do so only for fixed-width integers and are inclusive otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from clamped_value.errors import InvalidRangeError, UnsupportedRangeError
from clamped_value.kinds import ValueKind
from clamped_value.logger import get_logger

_logger = get_logger("clamped_value.ranges")


@dataclass(frozen=True)
class ClosedRange:
    """Inclusive on both ends: ``[low, high]``."""

    low: Any
    high: Any


@dataclass(frozen=True)
class HalfOpenRange:
    """Inclusive lower bound, exclusive upper bound: ``[low, high)``."""

    low: Any
    high: Any


@dataclass(frozen=True)
class RangeFrom:
    """``>= low``, unbounded above."""

    low: Any


@dataclass(frozen=True)
class RangeUpTo:
    """``< high``, unbounded below."""

    high: Any


@dataclass(frozen=True)
class RangeThrough:
    """``<= high``, unbounded below."""

    high: Any


RangeSpec = ClosedRange | HalfOpenRange | RangeFrom | RangeUpTo | RangeThrough | tuple[Any, Any]


def given_bounds(spec: RangeSpec) -> tuple[Any, ...]:
    """Return the bounds written in *spec*, lower first."""
    if isinstance(spec, tuple):
        return spec
    return tuple(getattr(spec, field) for field in ("low", "high") if hasattr(spec, field))


def _require_extremes(spec: object, kind: ValueKind) -> None:
    if not kind.has_extremes:
        msg = f"{type(spec).__name__} needs a kind with extreme values; '{kind.name}' has none"
        raise UnsupportedRangeError(msg)


def normalize_range(spec: RangeSpec, kind: ValueKind) -> tuple[Any, Any]:
    """
    Turn a range specification into an inclusive ``(low, high)`` pair.

    Args:
        spec: One of the range dataclasses, or a ``(low, high)`` tuple for a closed range.
        kind: Value kind deciding sentinels, predecessor and bound representation.

    Returns:
        The inclusive bounds, as plain Python values of the kind.

    Raises:
        InvalidRangeError: If the normalized range is empty (low > high) or a bound is unusable.
        UnsupportedRangeError: If a one-sided form is used with a kind that has no extremes.
        TypeError: If *spec* is not a range specification.
    """
    if isinstance(spec, tuple):
        if len(spec) != 2:
            msg = f"A range tuple needs exactly two bounds, got {len(spec)}"
            raise TypeError(msg)
        spec = ClosedRange(*spec)

    if isinstance(spec, ClosedRange):
        low, high = kind.bound(spec.low), kind.bound(spec.high)
    elif isinstance(spec, HalfOpenRange):
        low, high = kind.bound(spec.low), kind.bound(spec.high)
        if kind.excludes_half_open_bound:
            high = kind.predecessor(high)
    elif isinstance(spec, RangeFrom):
        _require_extremes(spec, kind)
        low, high = kind.bound(spec.low), kind.maximum
    elif isinstance(spec, RangeUpTo):
        _require_extremes(spec, kind)
        low, high = kind.minimum, kind.predecessor(kind.bound(spec.high))
    elif isinstance(spec, RangeThrough):
        _require_extremes(spec, kind)
        low, high = kind.minimum, kind.bound(spec.high)
    else:
        msg = f"Unsupported range specification: {spec!r}"
        raise TypeError(msg)

    if low > high:
        msg = f"Empty range {spec!r} for kind '{kind.name}': lower bound {low!r} > upper bound {high!r}"
        raise InvalidRangeError(msg)

    _logger.debug("Normalized %r for kind %s to [%r, %r]", spec, kind.name, low, high)
    return low, high
