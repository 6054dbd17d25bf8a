"""
Pure-Python numeric helpers: softmax, sample generators and distribution stats.
"""

from .softmax import softmax
from .sampling import Gaussian, Uniform, generate, generate_gaussian, generate_uniform, make_rng
from .stats import argmax, entropy, mean_std, sample_categorical

__all__ = [
    "softmax",
    "Gaussian",
    "Uniform",
    "generate",
    "generate_gaussian",
    "generate_uniform",
    "make_rng",
    "argmax",
    "entropy",
    "mean_std",
    "sample_categorical",
]
