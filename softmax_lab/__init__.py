"""
Temperature-scaled softmax and random sample generators.

Keep this module lightweight: importing the package root must not require torch.
The tensor backend lives in `softmax_lab.tensor` and is imported explicitly.
"""

from .errors import InvalidArgumentError
from .numeric import (
    Gaussian,
    Uniform,
    generate,
    generate_gaussian,
    generate_uniform,
    make_rng,
    softmax,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidArgumentError",
    "Gaussian",
    "Uniform",
    "generate",
    "generate_gaussian",
    "generate_uniform",
    "make_rng",
    "softmax",
]
