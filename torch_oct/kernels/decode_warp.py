from __future__ import annotations
import warp as wp
import torch
from ..typing import Tuple
from .util import ensure_warp_available
from .warp_math import sign_or_positive, denormalize_snorm

EPSILON = 1e-6


@wp.kernel(enable_backward=False)
def oct_decode_kernel(
    encoded: wp.array(dtype=wp.float32, ndim=2),  # (N, 2)
    range_max: wp.float32,
    vectors_out: wp.array(dtype=wp.vec3, ndim=1),  # (N)
    norms_out: wp.array(dtype=wp.float32, ndim=1),  # (N)
):
    i = wp.tid()
    n = encoded.shape[0]
    if i >= n:
        return

    vx = denormalize_snorm(encoded[i, 0], range_max)
    vy = denormalize_snorm(encoded[i, 1], range_max)
    vz = wp.float32(1.0) - (wp.abs(vx) + wp.abs(vy))
    v = wp.vec3(vx, vy, vz)
    if vz < wp.float32(0.0):
        # lower half of the octahedron, mirror across the diagonal
        v = wp.vec3((wp.float32(1.0) - wp.abs(vy)) * sign_or_positive(vx),
                    (wp.float32(1.0) - wp.abs(vx)) * sign_or_positive(vy),
                    vz)

    length = wp.length(v)
    norms_out[i] = length
    if length > EPSILON:
        vectors_out[i] = v / length


def oct_decode(
    encoded_t: torch.Tensor,
    range_max: int,
) -> Tuple[torch.Tensor, torch.Tensor]:
    ensure_warp_available()
    device_wp = wp.device_from_torch(encoded_t.device)
    num_vectors = encoded_t.shape[0]

    encoded_wp = wp.from_torch(encoded_t.contiguous(), dtype=wp.float32)
    vectors_wp = wp.zeros(num_vectors, dtype=wp.vec3, device=device_wp)
    norms_wp = wp.zeros(num_vectors, dtype=wp.float32, device=device_wp)

    wp.launch(oct_decode_kernel,
              dim=num_vectors,
              inputs=[encoded_wp, float(range_max), vectors_wp, norms_wp],
              device=device_wp)
    return wp.to_torch(vectors_wp), wp.to_torch(norms_wp)
