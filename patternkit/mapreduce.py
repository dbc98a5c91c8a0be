"""Small map and reduce helpers over lists of strings."""

from __future__ import annotations

from typing import Callable, Iterable


def map_str_to_str(arr: Iterable[str], fn: Callable[[str], str]) -> list[str]:
    """Apply ``fn`` to every string and return the results."""
    return [fn(item) for item in arr]


def map_str_to_int(arr: Iterable[str], fn: Callable[[str], int]) -> list[int]:
    """Apply ``fn`` to every string and return the integer results."""
    return [fn(item) for item in arr]


def reduce(arr: Iterable[str], fn: Callable[[str], int]) -> int:
    """Return the sum of ``fn`` over every string."""
    return sum(fn(item) for item in arr)