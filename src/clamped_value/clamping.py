from __future__ import annotations

from typing import Any, Generic, TypeVar

import numpy as np

from clamped_value.kinds import ValueKind, resolve_kind
from clamped_value.logger import get_logger
from clamped_value.ranges import RangeSpec, given_bounds, normalize_range

_logger = get_logger("clamped_value.clamping")

T = TypeVar("T")


def clamp(value: Any, low: Any, high: Any) -> Any:
    """Clamp a value between lower and upper bounds. A NaN value saturates to *low*."""
    return min(max(low, value), high)


class ClampedValue(Generic[T]):
    """
    Holds a value that always lies within a fixed inclusive range.

    The range is given once at construction (closed, half-open or one-sided, see
    clamped_value.ranges) and cannot change afterwards. Every write, including the
    initial value, is clamped into the range; writes never fail.

    Instances do no locking. Share one between threads only under external
    synchronization.

    Example:
        >>> level = ClampedValue(1.0, to=ClosedRange(1.0, 5.0))
        >>> level.value = 7.0
        >>> float(level.value)
        5.0
    """

    __slots__ = ("_kind", "_low", "_high", "_value")

    def __init__(self, initial: T, to: RangeSpec, kind: ValueKind | str | np.dtype | type | None = None) -> None:
        self._kind = resolve_kind(kind, initial, *given_bounds(to))
        self._low, self._high = normalize_range(to, self._kind)
        self._value: T = self._clamped(initial)
        _logger.debug("Created %r", self)

    def _clamped(self, candidate: Any) -> T:
        return self._kind.coerce(clamp(self._kind.to_python(candidate), self._low, self._high))

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, candidate: T) -> None:
        self._value = self._clamped(candidate)

    def get(self) -> T:
        """Return the stored value."""
        return self._value

    def set(self, candidate: T) -> T:
        """Store *candidate* clamped into the range and return the stored value."""
        self._value = self._clamped(candidate)
        return self._value

    @property
    def lower_bound(self) -> T:
        return self._kind.coerce(self._low)

    @property
    def upper_bound(self) -> T:
        return self._kind.coerce(self._high)

    @property
    def bounds(self) -> tuple[T, T]:
        return self.lower_bound, self.upper_bound

    @property
    def kind(self) -> ValueKind:
        return self._kind

    def __repr__(self) -> str:
        return f"ClampedValue({self._value!r}, bounds=[{self._low!r}, {self._high!r}], kind={self._kind.name})"
