from __future__ import annotations

from typing import Any

import numpy as np

from clamped_value.clamping import ClampedValue
from clamped_value.kinds import ValueKind, resolve_kind
from clamped_value.ranges import RangeSpec, given_bounds, normalize_range


class ClampedAttribute:
    """
    Class-level declaration of a clamped attribute.

        class Mixer:
            volume = ClampedAttribute(5, to=HalfOpenRange(0, 11), kind="int8")

    Reading ``mixer.volume`` returns the stored value and assigning to it clamps.
    Each owner instance keeps its own ClampedValue, created from *default* on first
    access; the range is validated once, when the class body is executed.
    """

    def __init__(self, default: Any, to: RangeSpec, kind: ValueKind | str | np.dtype | type | None = None) -> None:
        self.default = default
        self.range = to
        self.kind = resolve_kind(kind, default, *given_bounds(to))
        normalize_range(to, self.kind)
        self.name = ""
        self._storage = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self._storage = f"_clamped_{name}"

    def cell(self, instance: object) -> ClampedValue:
        """Return the ClampedValue backing this attribute on *instance*."""
        cell = instance.__dict__.get(self._storage)
        if cell is None:
            cell = ClampedValue(self.default, to=self.range, kind=self.kind)
            instance.__dict__[self._storage] = cell
        return cell

    def __get__(self, instance: object | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return self.cell(instance).value

    def __set__(self, instance: object, value: Any) -> None:
        self.cell(instance).value = value
