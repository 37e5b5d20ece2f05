"""Plain-text rendering of containers in the ``(a, b)`` / ``{a, b}`` / ``{k->v}`` style."""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Sequence, Tuple, TypeVar


T = TypeVar("T")


def _join(items: Iterable[Any]) -> str:
    return ", ".join(format_value(x) for x in items)


def format_sequence(xs: Sequence[Any]) -> str:
    return f"({_join(xs)})"


def format_set(xs: Iterable[Any]) -> str:
    # Sorted to match the ordering of an ordered set; falls back to iteration order
    try:
        items = sorted(xs)
    except TypeError:
        items = list(xs)
    return "{" + _join(items) + "}"


def format_mapping(m: Mapping[Any, Any], sort_keys: bool = False) -> str:
    keys = sorted(m) if sort_keys else list(m)
    body = ", ".join(f"{format_value(k)}->{format_value(m[k])}" for k in keys)
    return "{" + body + "}"


def format_pair(p: Tuple[Any, Any]) -> str:
    first, second = p
    return f"({format_value(first)}, {format_value(second)})"


def format_value(x: Any) -> str:
    """Render ``x``, recursing into lists, tuples, sets and mappings."""
    if isinstance(x, Mapping):
        return format_mapping(x)
    if isinstance(x, (set, frozenset)):
        return format_set(x)
    if isinstance(x, (list, tuple)):
        return format_sequence(x)
    return str(x)


def concat(u: Sequence[T], v: Sequence[T]) -> List[T]:
    """New list holding the elements of ``u`` followed by those of ``v``."""
    w: List[T] = list(u)
    w.extend(v)
    return w
