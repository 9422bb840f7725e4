from __future__ import annotations


class ClampingError(Exception):
    """Base class for errors raised while setting up a clamped value."""


class InvalidRangeError(ClampingError, ValueError):
    """Raised when a range normalizes to lower > upper or has unusable bounds."""


class UnsupportedRangeError(ClampingError, TypeError):
    """Raised when a range form is not available for a value kind."""
