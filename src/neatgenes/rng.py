"""
NEAT Genes Random Source Module

Every stochastic operation in this package receives its random source
explicitly; nothing reads global generator state. This module provides
the default implementation, backed by a numpy Generator.

Classes:
    RandomSource: Protocol describing what a random source must offer
    RNG:          numpy-backed random source
"""

import numpy as np
from typing import Protocol, Sequence

class RandomSource(Protocol):
    """
    The capabilities the trait engine draws on.
    """

    def rand_float(self) -> float: ...

    def rand_float_signed(self) -> float: ...

    def rand_int(self, low: int, high: int) -> int: ...

    def roulette(self, weights: Sequence[float]) -> int: ...

class RNG:
    """
    Random source wrapping a 'numpy.random.Generator'.

    Two instances created with the same seed produce the same sequence,
    so gene operations are replayable given a fixed seed and call order.
    An instance must not be shared between threads.

    Public Methods:
        rand_float():        Uniform float in [0, 1)
        rand_float_signed(): Uniform float in [-1, 1)
        rand_int():          Uniform integer in an inclusive range
        roulette():          Index drawn proportionally to a sequence of weights
    """

    def __init__(self, seed: int | None = None):
        """
        Parameters:
            seed: Seed for the underlying generator (None for OS entropy)
        """
        self.seed : int | None       = seed
        self._gen : np.random.Generator = np.random.default_rng(seed)

    def rand_float(self) -> float:
        return float(self._gen.random())

    def rand_float_signed(self) -> float:
        return 2.0 * float(self._gen.random()) - 1.0

    def rand_int(self, low: int, high: int) -> int:
        """
        Draw a uniform integer in [low, high], both ends included.
        """
        if low > high:
            raise ValueError(f"Empty integer range [{low}, {high}]")
        return int(self._gen.integers(low, high, endpoint=True))

    def roulette(self, weights: Sequence[float]) -> int:
        """
        Roulette-wheel selection.

        Parameters:
            weights: Non-negative weights, at least one of them positive

        Returns:
            index 'i' with probability weights[i] / sum(weights)
        """
        w = np.asarray(weights, dtype=float)
        if w.size == 0:
            raise ValueError("Cannot select from an empty set of weights")
        if np.any(w < 0):
            raise ValueError("Roulette weights must be non-negative")
        total = w.sum()
        if total <= 0:
            raise ValueError("At least one roulette weight must be positive")

        marble = self.rand_float() * total
        cumulative = np.cumsum(w)
        idx = int(np.searchsorted(cumulative, marble, side='right'))

        # Guard against round-off past the last bucket and land on a positive weight
        idx = min(idx, w.size - 1)
        while w[idx] == 0:
            idx -= 1
        return idx

    def __repr__(self):
        return f"RNG(seed={self.seed})"
