from __future__ import annotations
from typing import Optional, Tuple, Union
import numpy as np
import torch

Tensor = Union[np.ndarray, torch.Tensor]

__all__ = ["Tensor", "Optional", "Tuple", "Union"]
