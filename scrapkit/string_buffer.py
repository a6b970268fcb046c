"""An expandable text buffer that grows its capacity by a multiplier."""

from __future__ import annotations


class StringBuffer:
    """Accumulates text, multiplying its capacity when more room is needed.

    The capacity counts characters plus one slot for a terminator, so it is
    always greater than the length of the content.
    """

    def __init__(self, capacity: int, mul: float) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be greater than 0, got {capacity}")
        if mul <= 1:
            raise ValueError(f"multiplier must be greater than 1, got {mul}")
        self._capacity = capacity
        self._mul = mul
        self._parts: list[str] = []
        self._count = 0

    @property
    def capacity(self) -> int:
        """Current capacity, terminator slot included."""
        return self._capacity

    @property
    def mul(self) -> float:
        """Factor by which the capacity grows."""
        return self._mul

    def add(self, text: str) -> None:
        """Append ``text``, expanding the capacity until it fits."""
        length = len(text)
        while self._capacity < self._count + length + 1:
            self._capacity = max(int(self._capacity * self._mul), self._capacity + 1)
        if text:
            self._parts.append(text)
            self._count += length

    def __str__(self) -> str:
        content = "".join(self._parts)
        self._parts = [content] if content else []
        return content

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"StringBuffer(capacity={self._capacity}, mul={self._mul}, content={str(self)!r})"