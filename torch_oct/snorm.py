from __future__ import annotations
import numpy as np
from .typing import Optional

DEFAULT_RANGE_MAX = 255


def range_max_from_bits(bits: int) -> int:
    """Maximum quantized value for coordinates stored in ``bits`` bits."""
    if bits < 1:
        raise ValueError(f"bits must be a positive integer, got {bits}")
    return (1 << bits) - 1


def resolve_range_max(range_max: Optional[int] = None) -> int:
    """
    Resolves the SNORM range maximum.

    ``None`` means the range was not provided and selects the 8 bit default.
    An explicit value must be positive.
    """
    if range_max is None:
        return DEFAULT_RANGE_MAX
    if range_max <= 0:
        raise ValueError(f"range_max must be positive, got {range_max}")
    return range_max


def denormalize_snorm(value: float, range_max: Optional[int] = None) -> float:
    """
    Converts a SNORM value in the range [0, range_max] to a scalar in the range [-1.0, 1.0].

    Values outside of [0, range_max] are clamped.

    Parameters
    ----------
    value : number
        Quantized value.
    range_max : int, optional
        The maximum value in the SNORM range, 255 if not provided. An explicit
        value must be positive, passing 0 raises a ``ValueError`` instead of
        selecting the default.

    Returns
    -------
    scalar : float
        The denormalized value.
    """
    range_max = resolve_range_max(range_max)
    return float(np.clip(value, 0.0, range_max)) / range_max * 2.0 - 1.0


def sign_or_positive(value: float) -> float:
    """Like ``np.sign`` but returns 1.0 for both 0.0 and -0.0."""
    return -1.0 if value < 0.0 else 1.0
