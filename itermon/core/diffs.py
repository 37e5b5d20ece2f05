from __future__ import annotations

import logging
import math
from typing import List, Tuple

from ..errors import InvalidArgumentError


logger = logging.getLogger(__name__)


def _rank(x: float) -> Tuple[int, float]:
    # NaN ranks below every number, -inf included.
    return (0, 0.0) if math.isnan(x) else (1, x)


class ConvergenceMonitor:
    """Fixed-capacity history of the differences produced by an iterative algorithm.

    Reports the maximum over the trailing window of the last ``capacity``
    pushed values, or ``default`` while fewer than ``capacity`` values have
    been seen. Storage is allocated once; the buffer fills left to right and
    is then overwritten circularly at the write cursor.

    ``push`` is O(1) except when the slot about to be overwritten holds the
    current maximum, in which case the whole window is rescanned.

    Ordering with NaN: NaN ranks below every number, ``-inf`` included, and a
    value only displaces the current maximum when it ranks strictly higher.
    So NaN is reported only when every value in the window is NaN.

    Not thread-safe. Callers sharing a monitor must serialize access.
    """

    def __init__(self, capacity: int, default: float) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidArgumentError(f"capacity must be an integer, got {capacity!r}")
        if capacity < 1:
            raise InvalidArgumentError(f"capacity must be >= 1, got {capacity}")
        self._capacity: int = capacity
        self._default: float = float(default)
        self._history: List[float] = [0.0] * capacity
        self._size: int = 0
        self._pos: int = 0
        self._maxpos: int = 0
        self.rescans: int = 0

    def capacity(self) -> int:
        return self._capacity

    @property
    def default(self) -> float:
        return self._default

    def __len__(self) -> int:
        return self._size

    def is_full(self) -> bool:
        return self._size == self._capacity

    def max_diff(self) -> float:
        """Return the maximum over the window, or ``default`` until the window is full."""
        if self._size < self._capacity:
            return self._default
        return self._history[self._maxpos]

    def converged(self, tolerance: float) -> bool:
        """True when every value in a full window is below ``tolerance``."""
        return self.max_diff() < tolerance

    def push(self, x: float) -> None:
        """Register a new difference ``x``."""
        x = float(x)
        history = self._history
        if self._size < self._capacity:
            history[self._size] = x
            if self._size == 0:
                self._maxpos = 0
            elif _rank(x) > _rank(history[self._maxpos]):
                self._maxpos = self._size
            self._size += 1
            return

        target = self._pos
        if target == self._maxpos:
            history[target] = x
            self._pos = (target + 1) % self._capacity
            self._rescan()
        else:
            if _rank(x) > _rank(history[self._maxpos]):
                self._maxpos = target
            history[target] = x
            self._pos = (target + 1) % self._capacity

    def _rescan(self) -> None:
        history = self._history
        best = 0
        best_rank = _rank(history[0])
        for i in range(1, self._capacity):
            r = _rank(history[i])
            if r > best_rank:
                best = i
                best_rank = r
        self._maxpos = best
        self.rescans += 1
        logger.debug(
            "max evicted, rescanned window",
            extra={"capacity": self._capacity, "max_index": best, "max_value": history[best]},
        )

    def values(self) -> List[float]:
        """Snapshot of the window, oldest first."""
        if self._size < self._capacity:
            return self._history[: self._size]
        return self._history[self._pos :] + self._history[: self._pos]

    def __repr__(self) -> str:
        return (
            f"ConvergenceMonitor(capacity={self._capacity}, default={self._default!r}, "
            f"size={self._size}, max_diff={self.max_diff()!r})"
        )


Diffs = ConvergenceMonitor
