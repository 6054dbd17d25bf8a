"""
Random sample generators.

Two strategies share the `(count) -> List[float]` shape:
- Uniform: `rng.random() * (high - low) + low`, i.e. values in [low, high)
- Gaussian: Box-Muller transform on two uniform draws

Randomness always comes from an explicit `random.Random` handle. When none is
passed a fresh private generator is created, so the module-level `random` state
is never used. Share one handle across threads only if reproducibility does not
matter; otherwise give each thread its own seeded handle.
"""

import math
import random
from dataclasses import dataclass
from typing import List, Optional, Union

from ..errors import InvalidArgumentError


def make_rng(seed: Optional[int] = None) -> random.Random:
    return random.Random(seed)


@dataclass(frozen=True)
class Uniform:
    low: float = -5.0
    high: float = 10.0

    def draw(self, rng: random.Random) -> float:
        # No range validation: low > high simply inverts the interval.
        return rng.random() * (self.high - self.low) + self.low


@dataclass(frozen=True)
class Gaussian:
    mean: float = 0.0
    std_dev: float = 3.0

    def draw(self, rng: random.Random) -> float:
        # random() is in [0, 1), so u1 is in (0, 1] and log(u1) stays finite.
        u1 = 1.0 - rng.random()
        u2 = rng.random()
        z0 = math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)
        return z0 * self.std_dev + self.mean


Distribution = Union[Uniform, Gaussian]


def check_count(count: int) -> int:
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidArgumentError(f"count must be an integer, got {count!r}")
    if count < 0:
        raise InvalidArgumentError(f"count must be >= 0, got {count}")
    return count


def generate(distribution: Distribution, count: int = 5, *, rng: Optional[random.Random] = None) -> List[float]:
    """Draw `count` independent samples from `distribution`."""
    count = check_count(count)
    if not isinstance(distribution, (Uniform, Gaussian)):
        raise InvalidArgumentError(f"unsupported distribution: {distribution!r}")
    if rng is None:
        rng = make_rng()
    return [distribution.draw(rng) for _ in range(count)]


def generate_uniform(
    count: int = 5,
    min: float = -5.0,
    max: float = 10.0,
    *,
    rng: Optional[random.Random] = None,
) -> List[float]:
    return generate(Uniform(low=min, high=max), count, rng=rng)


def generate_gaussian(
    count: int = 5,
    mean: float = 0.0,
    std_dev: float = 3.0,
    *,
    rng: Optional[random.Random] = None,
) -> List[float]:
    return generate(Gaussian(mean=mean, std_dev=std_dev), count, rng=rng)
