"""A growable sequence with explicit capacity management."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class Vector:
    """An ordered container that tracks its capacity the way a dynamic array does.

    Capacity grows only when an insertion needs more room. It then doubles,
    or grows to exactly the size required if doubling is not enough.
    """

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._items: list[Any] = []
        self._capacity = 0
        if items is not None:
            initial = list(items)
            if initial:
                self.push_back(initial)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vector):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"

    @property
    def capacity(self) -> int:
        """Number of elements the vector can hold before it must grow."""
        return self._capacity

    def at(self, pos: int) -> Any:
        """Return the element at ``pos``; negative positions are not accepted."""
        if pos < 0 or pos >= len(self._items):
            raise IndexError(f"position {pos} out of range for vector of length {len(self._items)}")
        return self._items[pos]

    def reserve(self, num: int) -> bool:
        """Ensure room for ``num`` more elements.

        Returns True if the capacity was increased and False if it already sufficed.
        """
        if num < 0:
            raise ValueError("cannot reserve a negative number of elements")
        needed = len(self._items) + num
        if needed <= self._capacity:
            return False
        self._capacity = needed
        return True

    def insert(self, position: int, items: Iterable[Any]) -> int:
        """Insert ``items`` before ``position`` and return that position."""
        new_items = list(items)
        if not new_items:
            raise ValueError("nothing to insert")
        if position < 0 or position > len(self._items):
            raise IndexError(f"insert position {position} out of range for vector of length {len(self._items)}")

        needed = len(self._items) + len(new_items)
        if self._capacity == 0:
            self._capacity = len(new_items)
        elif self._capacity < needed:
            self._capacity *= 2
            if self._capacity < needed:
                self._capacity = needed

        self._items[position:position] = new_items
        return position

    def push_back(self, items: Iterable[Any]) -> int:
        """Append ``items`` and return the position of the first one."""
        return self.insert(len(self._items), items)

    def delete(self, position: int, num: int) -> None:
        """Remove ``num`` elements starting at ``position``.

        Deleting as many elements as the vector holds empties it entirely.
        """
        length = len(self._items)
        if num < 0:
            raise ValueError("cannot delete a negative number of elements")
        if num > length or position < 0 or position >= length:
            raise IndexError(f"cannot delete {num} element(s) at {position} from vector of length {length}")
        if num == length:
            self.clear()
            return
        if position + num > length:
            raise IndexError(f"cannot delete {num} element(s) at {position} from vector of length {length}")
        del self._items[position:position + num]

    def shrink_to_fit(self) -> None:
        """Reduce the capacity to the current length."""
        self._capacity = len(self._items)

    def release(self) -> list[Any]:
        """Hand over the stored elements and reset to an empty vector with no capacity."""
        items = self._items
        self._items = []
        self._capacity = 0
        return items

    def clear(self) -> None:
        """Remove every element while keeping the capacity."""
        self._items.clear()