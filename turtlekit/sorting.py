"""In-place bubble sort for mutable sequences of integers."""

from __future__ import annotations

from collections.abc import MutableSequence


def bubble_sort(values: MutableSequence[int]) -> None:
    """Sort values into ascending order in place using bubble sort."""
    end = len(values) - 1
    swapped = True
    while swapped and end > 0:
        swapped = False
        for i in range(end):
            if values[i] > values[i + 1]:
                values[i], values[i + 1] = values[i + 1], values[i]
                swapped = True
        end -= 1