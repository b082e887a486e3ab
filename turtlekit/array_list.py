"""A list of integers kept in contiguous storage."""

from __future__ import annotations

from collections.abc import Iterator


class ArrayList:
    """An ordered list of integers with front, end and positional access.

    Positions start at 0. Reading or removing at a position outside the
    list raises IndexError.
    """

    def __init__(self) -> None:
        self._items: list[int] = []

    def clear(self) -> None:
        """Remove every element, returning the list to its initial state."""
        self._items = []

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Whether the list holds no elements."""
        return not self._items

    def insert_front(self, value: int) -> None:
        """Insert value at the beginning of the list."""
        self._items.insert(0, value)

    def insert_end(self, value: int) -> None:
        """Insert value at the end of the list."""
        self._items.append(value)

    def insert(self, value: int, pos: int) -> None:
        """Insert value so that it ends up at index pos (0 <= pos <= len)."""
        if not 0 <= pos <= len(self._items):
            raise IndexError(f"insert position {pos} out of range")
        self._items.insert(pos, value)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def _check_index(self, pos: int) -> None:
        if not 0 <= pos < len(self._items):
            raise IndexError(f"position {pos} out of range")

    def get(self, pos: int) -> int:
        """Return the element at index pos."""
        self._check_index(pos)
        return self._items[pos]

    def remove_front(self) -> int:
        """Remove and return the first element."""
        if not self._items:
            raise IndexError("remove from empty list")
        return self._items.pop(0)

    def remove_end(self) -> int:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("remove from empty list")
        return self._items.pop()

    def remove(self, pos: int) -> int:
        """Remove and return the element at index pos."""
        self._check_index(pos)
        return self._items.pop(pos)

    def bubble_sort(self) -> None:
        """Sort the elements into ascending order with bubble sort."""
        items = self._items
        end = len(items) - 1
        swapped = True
        while swapped and end > 0:
            swapped = False
            for i in range(end):
                if items[i] > items[i + 1]:
                    items[i], items[i + 1] = items[i + 1], items[i]
                    swapped = True
            end -= 1

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __str__(self) -> str:
        return "{" + ",".join(str(item) for item in self._items) + "}"