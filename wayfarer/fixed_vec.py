"""A bounded list that keeps only unique, most recent entries."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class FixedVec(Generic[T]):
    """A list of unique values that drops its oldest entry when it grows too large."""

    def __init__(self, size: int = 0) -> None:
        self._items: list[T] = []
        self.size = size

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedVec):
            return NotImplemented
        return self._items == other._items and self.size == other.size

    def __repr__(self) -> str:
        return f"FixedVec({self._items!r}, size={self.size})"

    def push_unique(self, value: T) -> None:
        """Append ``value`` unless present, dropping the oldest entry if over size."""
        if value in self._items:
            return
        self._items.append(value)
        if len(self._items) > self.size:
            del self._items[0]

    def remove_where(self, predicate: Callable[[T], bool]) -> T | None:
        """Remove and return the first entry matching ``predicate``."""
        for i, item in enumerate(self._items):
            if predicate(item):
                return self._items.pop(i)
        return None

    def is_full(self) -> bool:
        return len(self._items) >= self.size

    def resize(self, size: int) -> None:
        """Change the size limit; existing entries are kept."""
        self.size = size