"""Running statistics for the sampling loop."""
from __future__ import annotations

import math
from typing import List

# Upper bounds on degrees of freedom and the matching one-sided t critical values.
_T_TABLE = (
    (4, 3.747),
    (8, 2.896),
    (16, 2.583),
    (32, 2.457),
    (64, 2.390),
    (128, 2.358),
)
_T_LIMIT = 2.326


def t_value(df: int) -> float:
    """Bucketed t critical value for df degrees of freedom."""
    for bound, t in _T_TABLE:
        if df <= bound:
            return t
    return _T_LIMIT


class RunningStats:
    """
    Samples, their running means, and the spread of those running means.

    std_dev is the population standard deviation of the sequence of running
    means, maintained with Welford's update so each trial costs O(1).
    """

    def __init__(self) -> None:
        self.samples: List[float] = []
        self.means: List[float] = []
        self.std_devs: List[float] = []
        self._sum = 0.0
        self._m_mean = 0.0
        self._m_m2 = 0.0

    @property
    def step(self) -> int:
        return len(self.samples)

    @property
    def mean(self) -> float:
        if not self.samples:
            raise ValueError("no samples recorded yet")
        return self.means[-1]

    @property
    def std_dev(self) -> float:
        if not self.samples:
            raise ValueError("no samples recorded yet")
        return self.std_devs[-1]

    def push(self, x: float) -> None:
        self.samples.append(x)
        self._sum += x
        mean = self._sum / len(self.samples)
        self.means.append(mean)

        n = len(self.means)
        delta = mean - self._m_mean
        self._m_mean += delta / n
        self._m_m2 += delta * (mean - self._m_mean)
        self.std_devs.append(math.sqrt(max(self._m_m2, 0.0) / n))

    def confident(self, epsilon: float) -> bool:
        """mean - t * std_dev / sqrt(step) > (1 - epsilon) * mean, for step >= 2."""
        step = self.step
        if step < 2:
            return False
        lower = self.mean - t_value(step - 1) * self.std_dev / math.sqrt(step)
        return lower > (1.0 - epsilon) * self.mean
