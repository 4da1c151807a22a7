from __future__ import annotations
from typing import Optional


class OctDecodeError(ValueError):
    """Base class for failures while decoding oct-encoded vectors."""


class RangeViolation(OctDecodeError):
    """A quantized coordinate lies outside ``[0, range_max]``."""

    def __init__(self, x, y, range_max: int, index: Optional[int] = None):
        self.x = x
        self.y = y
        self.range_max = range_max
        self.index = index
        where = "" if index is None else f" (row {index})"
        super().__init__(
            f"x and y must be unsigned normalized integers between 0 and {range_max}, "
            f"got x={x}, y={y}{where}"
        )


class PackedRangeViolation(RangeViolation):
    """A packed 16 bit oct value lies outside ``[0, range_max]``."""

    def __init__(self, value, range_max: int):
        self.value = value
        self.x = None
        self.y = None
        self.range_max = range_max
        self.index = None
        OctDecodeError.__init__(
            self, f"packed oct value must be an unsigned integer between 0 and {range_max}, got {value}"
        )


class DegenerateNormalization(OctDecodeError):
    """The reconstructed vector has no usable length and cannot be normalized."""

    def __init__(self, components, index: Optional[int] = None):
        self.components = tuple(components)
        self.index = index
        where = "" if index is None else f" (row {index})"
        super().__init__(f"Cannot normalize degenerate vector {self.components}{where}")
