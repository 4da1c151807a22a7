from __future__ import annotations
import numpy as np
import torch
from .typing import Tensor, Optional


# helper functions
def check_batch_dim(tensor: Tensor, ndim: int) -> Tensor:
    if tensor.ndim != ndim:
        tensor = tensor[None]
    return tensor


def prepare_encoded(encoded: Tensor, device: Optional[str] = None) -> torch.Tensor:
    """Converts oct encoded coordinates into a float32 torch tensor of shape (N, 2)."""
    if not isinstance(encoded, torch.Tensor):
        encoded = torch.from_numpy(np.asarray(encoded))
    if device is None:
        device = encoded.device
    encoded = check_batch_dim(encoded.to(device=device, dtype=torch.float32), 2)
    if encoded.ndim != 2 or encoded.shape[1] != 2:
        raise ValueError(f"Oct encoded vectors must be of shape (N, 2), got {tuple(encoded.shape)}")
    return encoded


def out_of_range_rows(encoded_t: torch.Tensor, range_max: int) -> torch.Tensor:
    """Boolean mask of the rows with a coordinate outside [0, range_max]. NaN counts as outside."""
    return ~((encoded_t >= 0) & (encoded_t <= range_max)).all(dim=-1)
