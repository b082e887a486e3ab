"""Summary statistics over sequences of integers."""

from __future__ import annotations

from collections.abc import Iterable


def _require_values(values: Iterable[int]) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError("at least one value is required")
    return items


def maximum(values: Iterable[int]) -> int:
    """Return the largest value; raise ValueError when there are none."""
    return max(_require_values(values))


def minimum(values: Iterable[int]) -> int:
    """Return the smallest value; raise ValueError when there are none."""
    return min(_require_values(values))


def count_values(values: Iterable[int], value: int) -> int:
    """Return how many times value occurs among values."""
    return sum(1 for item in values if item == value)