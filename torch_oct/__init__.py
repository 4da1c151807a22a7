"""torch-oct: Decoding of oct-encoded unit vectors for PyTorch."""

from .snorm import denormalize_snorm, sign_or_positive, range_max_from_bits, DEFAULT_RANGE_MAX
from .decode import decode_unit_vector, check_quantized_range, oct_decode_packed, UnitVector
from .octahedral import oct_decode, oct_decode_torch, oct_decode_warp
from .errors import OctDecodeError, RangeViolation, PackedRangeViolation, DegenerateNormalization

# Import version from setuptools-scm generated file
try:
    from ._version import version as __version__
except ImportError:  # pragma: no cover
    # Fallback for development/installation when _version.py doesn't exist yet
    __version__ = "0.0.0.dev0"

__author__ = "Felix Igelbrink"
__email__ = "felix.igelbrink@gmail.com"
__license__ = "MIT"
__all__ = ["denormalize_snorm", "sign_or_positive", "range_max_from_bits", "DEFAULT_RANGE_MAX",
           "decode_unit_vector", "check_quantized_range", "oct_decode_packed", "UnitVector",
           "oct_decode", "oct_decode_torch", "oct_decode_warp",
           "OctDecodeError", "RangeViolation", "PackedRangeViolation", "DegenerateNormalization",
           "__version__", "__author__", "__email__", "__license__"]
