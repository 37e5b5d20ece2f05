"""Core primitives for tracking the progress of iterative algorithms.

The convergence monitor keeps the last N per-iteration differences and
answers the maximum over that window in constant time.
"""

from .diffs import ConvergenceMonitor, Diffs

__all__ = ["ConvergenceMonitor", "Diffs"]
