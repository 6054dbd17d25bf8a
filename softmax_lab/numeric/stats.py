import math
import random
import statistics
from typing import Sequence, Tuple

from ..errors import InvalidArgumentError


def sample_categorical(probs: Sequence[float], rng: random.Random) -> int:
    if not probs:
        raise InvalidArgumentError("empty probability list")
    total = sum(probs)
    if not total > 0:
        raise InvalidArgumentError("probabilities must sum to > 0")
    r = rng.random() * total
    acc = 0.0
    for i, p in enumerate(probs):
        acc += p
        if r < acc:
            return i
    return len(probs) - 1


def mean_std(values: Sequence[float]) -> Tuple[float, float]:
    if not values:
        return 0.0, 0.0
    if len(values) == 1:
        return float(values[0]), 0.0
    mean = statistics.fmean(values)
    std = statistics.pstdev(values)
    return float(mean), float(std)


def entropy(probs: Sequence[float]) -> float:
    """Shannon entropy in nats; zero-probability terms contribute nothing."""
    return float(-sum(p * math.log(p) for p in probs if p > 0))


def argmax(values: Sequence[float]) -> int:
    if not values:
        raise InvalidArgumentError("argmax of an empty sequence")
    best = 0
    for i in range(1, len(values)):
        if values[i] > values[best]:
            best = i
    return best

