"""Process-wide random number helpers.

All helpers draw from one shared ``numpy.random.Generator`` so that a single
``rnd_seed`` call makes every subsequent draw reproducible.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..errors import InvalidArgumentError


_rng: np.random.Generator = np.random.default_rng()


def rnd_seed(seed: Optional[int]) -> None:
    """Reseed the shared generator. ``None`` draws fresh OS entropy."""
    global _rng
    _rng = np.random.default_rng(seed)


def rnd_uniform() -> float:
    """Real number distributed uniformly on [0, 1)."""
    return float(_rng.random())


def rnd_stdnormal() -> float:
    return float(_rng.standard_normal())


def rnd_int(min_value: int, max_value: int) -> int:
    """Random integer in the closed interval [min_value, max_value]."""
    if min_value > max_value:
        raise InvalidArgumentError(f"empty range [{min_value}, {max_value}]")
    return int(_rng.integers(min_value, max_value, endpoint=True))


def rnd(n: int) -> int:
    """Random integer in the half-open interval [0, n)."""
    return rnd_int(0, n - 1)
