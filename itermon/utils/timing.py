from __future__ import annotations

from datetime import datetime, timezone


def toc() -> float:
    """Wall clock time in seconds."""
    return datetime.now(timezone.utc).timestamp()
