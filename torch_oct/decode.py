from __future__ import annotations
import logging
from typing import NamedTuple
import numpy as np
from .typing import Optional
from .errors import RangeViolation, PackedRangeViolation, DegenerateNormalization
from .snorm import DEFAULT_RANGE_MAX, resolve_range_max, denormalize_snorm, sign_or_positive

logger = logging.getLogger(__name__)

EPSILON = 1e-12
_PACKED_MAX = (DEFAULT_RANGE_MAX + 1) ** 2 - 1


class UnitVector(NamedTuple):
    x: float
    y: float
    z: float


def check_quantized_range(x, y, range_max: int) -> Optional[RangeViolation]:
    """
    Checks that both quantized coordinates lie in [0, range_max].

    Returns the violation instead of raising it, so the caller decides whether to
    abort, clamp or substitute a default vector. NaN is never in range.
    """
    range_max = resolve_range_max(range_max)
    if 0 <= x <= range_max and 0 <= y <= range_max:
        return None
    return RangeViolation(x, y, range_max)


def decode_unit_vector(x, y, range_max: int, strict: bool = True) -> UnitVector:
    """
    Decodes a unit-length vector in 'oct' encoding to a normalized 3-component vector.

    Parameters
    ----------
    x : int
        The x component of the oct-encoded unit length vector.
    y : int
        The y component of the oct-encoded unit length vector.
    range_max : int
        The maximum value of the SNORM range. The encoded vector is stored in
        log2(range_max + 1) bits per component.
    strict : bool
        When True, coordinates outside [0, range_max] raise a ``RangeViolation``.
        When False they are clamped and decoding continues.

    Returns
    -------
    vector : UnitVector
        The decoded and normalized vector.
    """
    if range_max is None:
        raise ValueError("range_max is required to decode oct encoded vectors")
    violation = check_quantized_range(x, y, range_max)
    if violation is not None:
        if strict:
            raise violation
        logger.debug("Clamping out of range oct coordinates: %s", violation)

    vx = denormalize_snorm(x, range_max)
    vy = denormalize_snorm(y, range_max)
    vz = 1.0 - (abs(vx) + abs(vy))

    # the point lies on the lower half of the octahedron, mirror it back
    if vz < 0.0:
        vx, vy = (1.0 - abs(vy)) * sign_or_positive(vx), (1.0 - abs(vx)) * sign_or_positive(vy)

    vec = np.array([vx, vy, vz], dtype=np.float64)
    norm = np.linalg.norm(vec)
    if not norm > EPSILON:
        raise DegenerateNormalization(vec.tolist())
    return UnitVector(*(vec / norm).tolist())


def oct_decode_packed(value, strict: bool = True) -> UnitVector:
    """Decodes two 8 bit oct coordinates packed into a single 16 bit value."""
    if not 0 <= value <= _PACKED_MAX:
        if strict:
            raise PackedRangeViolation(value, _PACKED_MAX)
        logger.debug("Clamping out of range packed oct value %s", value)
        value = min(max(value, 0), _PACKED_MAX)
    x = value // (DEFAULT_RANGE_MAX + 1)
    y = value - x * (DEFAULT_RANGE_MAX + 1)
    return decode_unit_vector(x, y, DEFAULT_RANGE_MAX, strict=strict)
