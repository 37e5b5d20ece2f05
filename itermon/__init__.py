"""Progress tracking helpers for iterative numerical algorithms.

The centrepiece is ConvergenceMonitor (alias Diffs): a fixed-capacity window
of per-iteration differences that reports its maximum in O(1), so a solver
loop can stop once every change over the last N iterations is small. Around
it sit the small utilities such loops tend to need: a shared random number
generator, container formatting, a tokenizer and JSON logging.
"""

from .core.diffs import ConvergenceMonitor, Diffs
from .errors import ConfigError, InvalidArgumentError, ItermonError

__version__ = "0.1.0"

__all__ = [
    "ConvergenceMonitor",
    "Diffs",
    "ItermonError",
    "InvalidArgumentError",
    "ConfigError",
    "config",
    "core",
    "utils",
]
