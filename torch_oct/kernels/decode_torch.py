import torch
from ..typing import Tuple
EPSILON = 1e-6


def sign_or_positive(values_t: torch.Tensor) -> torch.Tensor:
    # unlike torch.sign, zeros (including -0.0) map to 1.0
    return 1.0 - 2.0 * (values_t < 0.0).to(values_t.dtype)


def oct_decode(
    encoded_t: torch.Tensor,
    range_max: int,
) -> Tuple[torch.Tensor, torch.Tensor]:
    # pure torch implementation, every row is decoded independently
    v_t = torch.clamp(encoded_t, 0.0, float(range_max)) / range_max * 2.0 - 1.0
    vx_t, vy_t = v_t.unbind(dim=-1)
    vz_t = 1.0 - (vx_t.abs() + vy_t.abs())

    # rows on the lower half of the octahedron are mirrored back across the diagonals
    folded_t = vz_t < 0.0
    folded_x_t = (1.0 - vy_t.abs()) * sign_or_positive(vx_t)
    folded_y_t = (1.0 - vx_t.abs()) * sign_or_positive(vy_t)
    vx_t = torch.where(folded_t, folded_x_t, vx_t)
    vy_t = torch.where(folded_t, folded_y_t, vy_t)

    vectors_t = torch.stack([vx_t, vy_t, vz_t], dim=-1)
    norms_t = torch.linalg.vector_norm(vectors_t, dim=-1)
    vectors_t = vectors_t / norms_t.clamp_min(EPSILON).unsqueeze(-1)
    return vectors_t, norms_t
