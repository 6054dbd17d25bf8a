import math
from typing import List, Sequence


def _scale(x: float, temperature: float) -> float:
    # IEEE-754 division: a zero temperature gives +-inf (or nan for 0/0) instead of raising.
    if temperature == 0:
        if x == 0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, temperature)
    return x / temperature


def _nan_max(values: List[float]) -> float:
    if any(math.isnan(v) for v in values):
        return math.nan
    return max(values)


def softmax(values: Sequence[float], temperature: float = 1.0) -> List[float]:
    """
    Map scores to a probability distribution:
        probs[i] = exp(v[i]/T - m) / sum_j exp(v[j]/T - m),  m = max_j v[j]/T

    Lower temperature sharpens the output toward the arg-max, higher temperature
    flattens it toward uniform. The temperature is not validated: zero or negative
    values let inf/nan propagate into the result.

    An empty input returns an empty list.
    """
    if not values:
        return []

    scaled = [_scale(float(x), temperature) for x in values]
    m = _nan_max(scaled)
    exps = [math.exp(x - m) for x in scaled]
    denom = sum(exps)
    return [v / denom for v in exps]
