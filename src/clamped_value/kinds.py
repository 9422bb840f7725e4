"""
Value kinds.

A kind bundles what a value type can do for range normalization: whether it has
extreme sentinels (infinities, fixed-width limits), whether it can produce the
representable predecessor of a value, and how a clamped value is stored.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from clamped_value.errors import InvalidRangeError


class ValueKind:
    """Generic ordered values: no sentinels, no predecessor, stored as given."""

    name = "generic"
    has_extremes = False
    has_predecessor = False
    # Half-open ranges end at predecessor(high) instead of high.
    excludes_half_open_bound = False

    @property
    def minimum(self) -> Any:
        msg = f"Value kind '{self.name}' has no minimum representable value"
        raise AttributeError(msg)

    @property
    def maximum(self) -> Any:
        msg = f"Value kind '{self.name}' has no maximum representable value"
        raise AttributeError(msg)

    def predecessor(self, value: Any) -> Any:
        msg = f"Value kind '{self.name}' has no predecessor operation"
        raise AttributeError(msg)

    def bound(self, value: Any) -> Any:
        """Return *value* as a range bound of this kind."""
        return self.to_python(value)

    def to_python(self, value: Any) -> Any:
        """Unwrap numpy scalars so comparisons never overflow a fixed-width type."""
        if isinstance(value, np.generic):
            return value.item()
        return value

    def coerce(self, value: Any) -> Any:
        """Convert an already clamped value into the stored scalar type."""
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.name == getattr(other, "name", None)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name))


class GenericKind(ValueKind):
    def __repr__(self) -> str:
        return "GenericKind()"


class FloatKind(ValueKind):
    """Floating-point values of a numpy dtype; sentinels are the infinities."""

    has_extremes = True
    has_predecessor = True

    def __init__(self, dtype: str | np.dtype | type = "float64") -> None:
        self.dtype = np.dtype(dtype)
        if self.dtype.kind != "f":
            msg = f"FloatKind requires a floating-point dtype, got {self.dtype.name}"
            raise ValueError(msg)
        self.name = self.dtype.name

    @property
    def minimum(self) -> float:
        return -math.inf

    @property
    def maximum(self) -> float:
        return math.inf

    def predecessor(self, value: Any) -> float:
        """Largest value of this dtype strictly less than *value*."""
        scalar = self.dtype.type(value)
        if scalar == -np.inf:
            msg = "No value is less than -inf"
            raise InvalidRangeError(msg)
        return float(np.nextafter(scalar, self.dtype.type(-np.inf)))

    def bound(self, value: Any) -> float:
        result = float(self.dtype.type(self.to_python(value)))
        if math.isnan(result):
            msg = "Range bounds must not be NaN"
            raise InvalidRangeError(msg)
        return result

    def to_python(self, value: Any) -> float:
        raw = super().to_python(value)
        try:
            return float(raw)
        except OverflowError:
            # Integers beyond the float range saturate like any other out-of-range value.
            return math.inf if raw > 0 else -math.inf

    def coerce(self, value: Any) -> np.floating:
        return self.dtype.type(value)


class IntegerKind(ValueKind):
    """Fixed-width integers of a numpy dtype; sentinels come from ``numpy.iinfo``."""

    has_extremes = True
    has_predecessor = True
    excludes_half_open_bound = True

    def __init__(self, dtype: str | np.dtype | type = "int64") -> None:
        self.dtype = np.dtype(dtype)
        if self.dtype.kind not in ("i", "u"):
            msg = f"IntegerKind requires an integer dtype, got {self.dtype.name}"
            raise ValueError(msg)
        self.name = self.dtype.name
        info = np.iinfo(self.dtype)
        self._min = int(info.min)
        self._max = int(info.max)

    @property
    def minimum(self) -> int:
        return self._min

    @property
    def maximum(self) -> int:
        return self._max

    def predecessor(self, value: Any) -> int:
        return int(self.to_python(value)) - 1

    def bound(self, value: Any) -> int:
        raw = self.to_python(value)
        if isinstance(raw, float) and not raw.is_integer():
            msg = f"Bound {raw!r} is not an integer"
            raise InvalidRangeError(msg)
        result = int(raw)
        if not self._min <= result <= self._max:
            msg = f"Bound {result} is not representable as {self.name} [{self._min}, {self._max}]"
            raise InvalidRangeError(msg)
        return result

    def coerce(self, value: Any) -> np.integer:
        # Truncation toward zero keeps an in-range fractional value inside integer bounds.
        return self.dtype.type(int(value))


def kind_for_dtype(dtype: str | np.dtype | type) -> ValueKind:
    """Return the kind for a numpy dtype, dtype name or scalar type."""
    if isinstance(dtype, str) and dtype.strip().lower() == "generic":
        return GenericKind()
    try:
        resolved = np.dtype(dtype)
    except TypeError as exc:
        msg = f"Unknown value kind {dtype!r}"
        raise ValueError(msg) from exc

    if resolved.kind == "f":
        return FloatKind(resolved)
    if resolved.kind in ("i", "u"):
        return IntegerKind(resolved)
    msg = f"Unsupported value kind {resolved.name!r}. Supported: float*, int*, uint*, generic."
    raise ValueError(msg)


def _numeric(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))


def _infer_kind(samples: tuple[Any, ...]) -> ValueKind:
    if not samples or not all(_numeric(sample) for sample in samples):
        return GenericKind()

    if any(isinstance(sample, (float, np.floating)) for sample in samples):
        dtypes = [sample.dtype for sample in samples if isinstance(sample, np.floating)]
        return FloatKind(np.result_type(*dtypes) if dtypes else "float64")

    first = samples[0]
    if isinstance(first, np.integer):
        return IntegerKind(first.dtype)
    dtypes = [sample.dtype for sample in samples if isinstance(sample, np.integer)]
    return IntegerKind(np.result_type(*dtypes) if dtypes else "int64")


def resolve_kind(kind: ValueKind | str | np.dtype | type | None, *samples: Any) -> ValueKind:
    """
    Resolve an explicit kind, or infer one from *samples* when *kind* is None.

    The samples are the initial value followed by the bounds given in the range.
    Inference: any float among them gives a float kind (the numpy float dtype if
    one is present, otherwise float64); all integers give an integer kind (the
    initial value's numpy dtype, otherwise int64). Bools, or any non-numeric
    sample, give a generic kind.
    """
    if isinstance(kind, ValueKind):
        return kind
    if kind is not None:
        return kind_for_dtype(kind)
    return _infer_kind(samples)
