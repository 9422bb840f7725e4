from __future__ import annotations

import math
import sys
from pathlib import Path

import numpy as np
import pytest

# Ensure 'src' is importable without installing the package
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from clamped_value.errors import InvalidRangeError  # noqa: E402
from clamped_value.kinds import FloatKind, GenericKind, IntegerKind, kind_for_dtype, resolve_kind  # noqa: E402


def test_infer_kind_from_sample() -> None:
    assert resolve_kind(None, 1.0) == FloatKind("float64")
    assert resolve_kind(None, 1) == IntegerKind("int64")
    assert resolve_kind(None, np.float32(1.0)) == FloatKind("float32")
    assert resolve_kind(None, np.uint16(1)) == IntegerKind("uint16")
    assert isinstance(resolve_kind(None, True), GenericKind)
    assert isinstance(resolve_kind(None, "text"), GenericKind)


def test_explicit_kind_wins_over_sample() -> None:
    assert resolve_kind("int8", 1.5) == IntegerKind("int8")
    assert resolve_kind(np.float16, 1) == FloatKind("float16")
    assert resolve_kind(np.dtype("uint32")) == IntegerKind("uint32")
    assert isinstance(resolve_kind("generic", 1), GenericKind)

    kind = IntegerKind("int16")
    assert resolve_kind(kind, 1.0) is kind


def test_unknown_kinds_raise() -> None:
    with pytest.raises(ValueError):
        resolve_kind("banana")
    with pytest.raises(ValueError):
        kind_for_dtype("U")
    with pytest.raises(ValueError):
        FloatKind("int8")
    with pytest.raises(ValueError):
        IntegerKind("float32")


def test_integer_extremes() -> None:
    assert IntegerKind("int8").minimum == -128
    assert IntegerKind("int8").maximum == 127
    assert IntegerKind("uint8").minimum == 0
    assert IntegerKind("uint8").maximum == 255
    assert IntegerKind("int64").maximum == 2**63 - 1


def test_float_extremes_are_infinities() -> None:
    kind = FloatKind("float32")
    assert kind.minimum == -math.inf
    assert kind.maximum == math.inf


def test_float_predecessor_is_exact() -> None:
    assert FloatKind().predecessor(1.0) == np.nextafter(1.0, -np.inf)
    assert FloatKind("float16").predecessor(1.0) == 0.99951171875
    assert FloatKind().predecessor(0.0) < 0.0


def test_integer_predecessor() -> None:
    assert IntegerKind().predecessor(10) == 9
    assert IntegerKind().predecessor(np.int8(-5)) == -6


def test_generic_kind_has_no_capabilities() -> None:
    kind = GenericKind()
    assert not kind.has_extremes
    assert not kind.has_predecessor
    with pytest.raises(AttributeError):
        _ = kind.minimum
    with pytest.raises(AttributeError):
        kind.predecessor("b")


def test_bounds_are_checked_for_the_kind() -> None:
    assert IntegerKind("int8").bound(2.0) == 2
    assert FloatKind("float32").bound(0.1) == float(np.float32(0.1))
    with pytest.raises(InvalidRangeError):
        IntegerKind("int8").bound(128)
    with pytest.raises(InvalidRangeError):
        IntegerKind().bound(2.5)


def test_coerce_returns_numpy_scalars() -> None:
    assert isinstance(IntegerKind("int8").coerce(5), np.int8)
    assert isinstance(FloatKind("float32").coerce(5), np.float32)
    assert GenericKind().coerce("x") == "x"


def test_inference_considers_range_bounds() -> None:
    assert resolve_kind(None, 0, 5.0) == FloatKind("float64")
    assert resolve_kind(None, 0, 0.5, 2.5) == FloatKind("float64")
    assert resolve_kind(None, 0, np.float16(1.0)) == FloatKind("float16")
    assert resolve_kind(None, 0, 0, 10) == IntegerKind("int64")
    assert resolve_kind(None, 1, np.int16(0), np.int16(9)) == IntegerKind("int16")
    assert isinstance(resolve_kind(None, 1, "a"), GenericKind)
    assert isinstance(resolve_kind(None), GenericKind)


def test_float_to_python_saturates_huge_integers() -> None:
    kind = FloatKind()
    assert kind.to_python(2**2000) == math.inf
    assert kind.to_python(-(2**2000)) == -math.inf
    assert kind.to_python(np.float32(0.5)) == 0.5


def test_float_has_no_predecessor_below_negative_infinity() -> None:
    with pytest.raises(InvalidRangeError):
        FloatKind().predecessor(-math.inf)
    assert FloatKind().predecessor(math.inf) == np.finfo(np.float64).max
