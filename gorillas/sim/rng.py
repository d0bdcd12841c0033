from __future__ import annotations

from typing import Any, Protocol

import numpy as np


class RandomSource(Protocol):
    """Uniform integer / real generator consumed by world generation.

    ``numpy.random.Generator`` satisfies this protocol, so seeded generators from
    ``np.random.default_rng`` are the usual implementation. Tests may pass any
    object with the same two methods.
    """

    def integers(self, low: int, high: int) -> Any:
        """Return an integer N such that low <= N < high."""
        ...

    def random(self) -> float:
        """Return a float in [0.0, 1.0)."""
        ...


def make_rng(seed: int | None = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def randint(rng: RandomSource, low: int, high: int) -> int:
    """Inclusive integer draw in [low, high]."""
    return int(rng.integers(low, high + 1))
