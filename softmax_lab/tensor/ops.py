from __future__ import annotations

import math
from typing import Optional

import torch

from ..numeric.sampling import check_count


def softmax_tensor(logits: torch.Tensor, *, temperature: float = 1.0, dim: int = -1) -> torch.Tensor:
    """
    Temperature softmax along `dim`, with max-subtraction for stability.

    Same semantics as `softmax_lab.numeric.softmax`: the temperature is not
    validated (zero gives inf/nan), and an empty slice returns an empty tensor.
    """
    if logits.numel() == 0:
        return logits.clone()
    scaled = logits / temperature
    # A nan anywhere in a slice makes the whole slice nan.
    m = scaled.amax(dim=dim, keepdim=True)
    has_nan = torch.isnan(scaled).any(dim=dim, keepdim=True)
    m = torch.where(has_nan, torch.full_like(m, float("nan")), m)
    exps = torch.exp(scaled - m)
    return exps / exps.sum(dim=dim, keepdim=True)


def uniform_tensor(
    count: int = 5,
    *,
    low: float = -5.0,
    high: float = 10.0,
    generator: Optional[torch.Generator] = None,
    dtype: torch.dtype = torch.float64,
) -> torch.Tensor:
    count = check_count(count)
    u = torch.rand((count,), generator=generator, dtype=dtype)
    return u * (high - low) + low


def gaussian_tensor(
    count: int = 5,
    *,
    mean: float = 0.0,
    std_dev: float = 3.0,
    generator: Optional[torch.Generator] = None,
    dtype: torch.dtype = torch.float64,
) -> torch.Tensor:
    """
    Box-Muller samples:
        z0 = sqrt(-2 ln u1) * cos(2 pi u2),  value = z0 * std_dev + mean
    """
    count = check_count(count)
    # torch.rand is in [0, 1); flip u1 into (0, 1] so log(u1) is finite.
    u1 = 1.0 - torch.rand((count,), generator=generator, dtype=dtype)
    u2 = torch.rand((count,), generator=generator, dtype=dtype)
    z0 = torch.sqrt(-2.0 * torch.log(u1)) * torch.cos(2.0 * math.pi * u2)
    return z0 * std_dev + mean
