"""A list of integers stored as a doubly linked chain of nodes."""

from __future__ import annotations

from collections.abc import Iterator


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(
        self, value: int, prev: _Node | None = None, next: _Node | None = None
    ) -> None:
        self.value = value
        self.prev = prev
        self.next = next


class LinkedList:
    """An ordered list of integers with front, end and positional access.

    Positions start at 0. Reading or removing at a position outside the
    list raises IndexError.
    """

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def clear(self) -> None:
        """Remove every element, returning the list to its initial state."""
        self._head = None
        self._tail = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        """Whether the list holds no elements."""
        return self._size == 0

    def insert_front(self, value: int) -> None:
        """Insert value at the beginning of the list."""
        node = _Node(value, None, self._head)
        if self._head is not None:
            self._head.prev = node
        else:
            self._tail = node
        self._head = node
        self._size += 1

    def insert_end(self, value: int) -> None:
        """Insert value at the end of the list."""
        node = _Node(value, self._tail, None)
        if self._tail is not None:
            self._tail.next = node
        else:
            self._head = node
        self._tail = node
        self._size += 1

    def insert(self, value: int, pos: int) -> None:
        """Insert value so that it ends up at index pos (0 <= pos <= len)."""
        if not 0 <= pos <= self._size:
            raise IndexError(f"insert position {pos} out of range")
        if pos == 0:
            self.insert_front(value)
            return
        if pos == self._size:
            self.insert_end(value)
            return
        after = self._node_at(pos)
        before = after.prev
        node = _Node(value, before, after)
        # before is not None here since pos > 0
        assert before is not None
        before.next = node
        after.prev = node
        self._size += 1

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def _node_at(self, pos: int) -> _Node:
        if not 0 <= pos < self._size:
            raise IndexError(f"position {pos} out of range")
        if pos < self._size // 2:
            node = self._head
            for _ in range(pos):
                assert node is not None
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - pos):
                assert node is not None
                node = node.prev
        assert node is not None
        return node

    def get(self, pos: int) -> int:
        """Return the element at index pos."""
        return self._node_at(pos).value

    def _unlink(self, node: _Node) -> int:
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.value

    def remove_front(self) -> int:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("remove from empty list")
        return self._unlink(self._head)

    def remove_end(self) -> int:
        """Remove and return the last element."""
        if self._tail is None:
            raise IndexError("remove from empty list")
        return self._unlink(self._tail)

    def remove(self, pos: int) -> int:
        """Remove and return the element at index pos."""
        return self._unlink(self._node_at(pos))

    def bubble_sort(self) -> None:
        """Sort the elements into ascending order by swapping node values."""
        swapped = True
        while swapped:
            swapped = False
            node = self._head
            while node is not None and node.next is not None:
                following = node.next
                if node.value > following.value:
                    node.value, following.value = following.value, node.value
                    swapped = True
                node = following

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __str__(self) -> str:
        return "{" + ", ".join(str(item) for item in self) + "}"