from __future__ import annotations
import logging
import torch
from .typing import Tensor, Optional
from .errors import RangeViolation, DegenerateNormalization
from .snorm import resolve_range_max
from .util import prepare_encoded, out_of_range_rows

logger = logging.getLogger(__name__)

EPSILON = 1e-6


def oct_decode_torch(encoded: Tensor,
                     range_max: Optional[int] = None,
                     strict: bool = True,
                     device: Optional[str] = None) -> Tensor:
    return oct_decode(encoded, range_max=range_max, strict=strict, method="torch", device=device)


def oct_decode_warp(encoded: Tensor,
                    range_max: Optional[int] = None,
                    strict: bool = True,
                    device: Optional[str] = None) -> Tensor:
    return oct_decode(encoded, range_max=range_max, strict=strict, method="warp", device=device)


def oct_decode(
    encoded: Tensor,
    range_max: Optional[int] = None,
    strict: bool = True,
    method: str = "torch",
    device: Optional[str] = None,
) -> Tensor:
    """Decode a batch of oct-encoded unit vectors.

    Parameters
    ----------
    encoded : array-like, shape (N, 2)
        Quantized octahedral coordinates in [0, range_max].
    range_max : int, optional
        The maximum value of the SNORM range, 255 if not provided.
    strict : bool
        When True, coordinates outside [0, range_max] raise a ``RangeViolation``.
        When False they are clamped.
    method : str
        "torch" for the pure torch implementation, "warp" for the warp kernel.
    device : str or Device, optional
        The device to use for computation. If not provided, will be inferred from input.

    Returns
    -------
    vectors : array-like, shape (N, 3)
        The decoded unit vectors. A numpy array if the input was not a torch tensor.
    """
    range_max = resolve_range_max(range_max)
    encoded_t = prepare_encoded(encoded, device)

    invalid_t = out_of_range_rows(encoded_t, range_max)
    if invalid_t.any():
        index = int(invalid_t.nonzero()[0, 0])
        if strict:
            x, y = encoded_t[index].tolist()
            raise RangeViolation(x, y, range_max, index=index)
        logger.debug("Clamping %d oct encoded rows outside [0, %d]", int(invalid_t.sum()), range_max)

    # NaN survives clamping on some backends, reject it before dispatching
    nan_t = torch.isnan(encoded_t).any(dim=-1)
    if nan_t.any():
        index = int(nan_t.nonzero()[0, 0])
        raise DegenerateNormalization(encoded_t[index].tolist(), index=index)

    if encoded_t.shape[0] == 0:
        vectors_t = torch.empty((0, 3), dtype=encoded_t.dtype, device=encoded_t.device)
    else:
        if method == "torch":
            from .kernels.decode_torch import oct_decode as oct_decode_impl
        elif method == "warp":
            from .kernels.decode_warp import oct_decode as oct_decode_impl
        else:
            raise ValueError(f"Invalid method: {method}")
        vectors_t, norms_t = oct_decode_impl(encoded_t, range_max)

        degenerate_t = ~(norms_t > EPSILON)
        if degenerate_t.any():
            index = int(degenerate_t.nonzero()[0, 0])
            raise DegenerateNormalization(vectors_t[index].tolist(), index=index)

    if not isinstance(encoded, torch.Tensor):
        vectors_t = vectors_t.cpu().numpy()

    return vectors_t
