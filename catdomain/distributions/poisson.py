"""
catdomain/distributions/poisson.py

Poisson distribution over non-negative integer values.

    P(k; lam) = lam^k e^{-lam} / k!

estimate() sets lam to its maximum-likelihood value, the sample mean.
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

import numpy as np
from scipy import stats


class Poisson:
    """
    Poisson distribution with rate `lam`.

    Attributes:
        lam: Rate parameter (mean and variance), >= 0
    """

    def __init__(self, lam: float):
        if lam < 0:
            raise ValueError(f"Poisson rate must be non-negative, got {lam}")
        self.lam = float(lam)

    @property
    def mean(self) -> float:
        return self.lam

    @property
    def variance(self) -> float:
        return self.lam

    def pr(self, k: Union[int, np.ndarray]) -> Union[float, np.ndarray]:
        """Probability of observing `k`."""
        p = stats.poisson.pmf(k, self.lam)
        return float(p) if np.ndim(p) == 0 else p

    def log_pr(self, k: Union[int, np.ndarray]) -> Union[float, np.ndarray]:
        lp = stats.poisson.logpmf(k, self.lam)
        return float(lp) if np.ndim(lp) == 0 else lp

    def sample(self, rng: Optional[np.random.Generator] = None, size: Optional[int] = None) -> Union[int, np.ndarray]:
        """Draw one value, or an array of `size` values."""
        if rng is None:
            rng = np.random.default_rng()
        if size is None:
            return int(rng.poisson(self.lam))
        return rng.poisson(self.lam, size=size)

    def estimate(self, samples: Sequence[int]) -> None:
        """
        Set `lam` to the maximum-likelihood estimate from `samples`.

        Raises:
            ValueError: If `samples` is empty or contains negative values
        """
        x = np.asarray(samples, dtype=np.int64)
        if x.size == 0:
            raise ValueError("No samples from which to estimate")
        if np.any(x < 0):
            raise ValueError("Poisson samples must be non-negative")
        self.lam = float(x.mean())

    def __repr__(self) -> str:
        return f"Poisson(lam={self.lam})"
