"""Exception hierarchy for itermon.

ItermonError is the root so callers can catch everything the package raises
with a single clause.
"""


class ItermonError(Exception):
    """Root exception for the package."""


class InvalidArgumentError(ItermonError, ValueError):
    """An argument is outside its valid domain (e.g. a window capacity below 1)."""


class ConfigError(ItermonError):
    """Configuration file could not be parsed or validated."""
