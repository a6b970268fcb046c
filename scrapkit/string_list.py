"""A growable list of strings whose capacity doubles when it is exceeded."""

from __future__ import annotations

from collections.abc import Iterator


class StringList:
    """Ordered collection of strings with an explicit, doubling capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be greater than 0, got {capacity}")
        self._capacity = capacity
        self._items: list[str] = []

    @property
    def capacity(self) -> int:
        """Number of strings the list can hold before it grows again."""
        return self._capacity

    def add(self, text: str) -> None:
        """Append a string, doubling the capacity when the list is full."""
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(str(text))

    def get(self, index: int) -> str:
        """Return the string at ``index``; negative indexes are rejected."""
        if index < 0 or index >= len(self._items):
            raise IndexError(
                f"index {index} is out of range; expected 0 to {len(self._items) - 1}"
            )
        return self._items[index]

    def drain(self) -> list[str]:
        """Return all strings in order and leave the list empty."""
        items = self._items
        self._items = []
        return items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"StringList(capacity={self._capacity}, items={self._items!r})"