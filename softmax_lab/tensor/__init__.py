"""
Torch renditions of the softmax and sample generators.

This subpackage requires torch. It is not imported from `softmax_lab/__init__.py`
so the pure-Python functions stay usable without heavy deps.
"""

from .ops import gaussian_tensor, softmax_tensor, uniform_tensor

__all__ = ["gaussian_tensor", "softmax_tensor", "uniform_tensor"]
