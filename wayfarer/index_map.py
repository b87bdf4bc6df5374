"""A collection whose keys stay stable while items come and go."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

_EMPTY = object()


class IndexMap(Generic[T]):
    """Holds values under integer keys that never shift when others are removed.

    Keys of removed values are reused, most recently removed first, so the
    position of a newly added value is not necessarily at the end.
    """

    def __init__(self, values: Iterable[T] | None = None) -> None:
        self._values: list = list(values) if values is not None else []
        self._removed: list[int] = []

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[int, T]]) -> IndexMap[T]:
        """Build a map placing each value under its given key."""
        pairs = list(pairs)
        max_key = max((key for key, _ in pairs), default=0)
        slots: list = [_EMPTY] * (max_key + 1)
        for key, value in pairs:
            slots[key] = value
        result = cls()
        result._values = slots
        result._removed = [key for key, value in enumerate(slots) if value is _EMPTY]
        return result

    def values(self) -> Iterator[T]:
        return (value for value in self._values if value is not _EMPTY)

    def items(self) -> Iterator[tuple[int, T]]:
        return ((key, value) for key, value in enumerate(self._values) if value is not _EMPTY)

    def keys(self) -> Iterator[int]:
        return (key for key, _ in self.items())

    def add(self, value: T) -> int:
        """Store ``value`` and return its key."""
        if self._removed:
            key = self._removed.pop()
            self._values[key] = value
            return key
        self._values.append(value)
        return len(self._values) - 1

    def remove(self, key: int) -> T | None:
        """Remove and return the value under ``key``, or ``None`` if there is none."""
        if not 0 <= key < len(self._values):
            return None
        value = self._values[key]
        if value is _EMPTY:
            return None
        self._values[key] = _EMPTY
        self._removed.append(key)
        return value

    def get(self, key: int, default: T | None = None) -> T | None:
        if 0 <= key < len(self._values) and self._values[key] is not _EMPTY:
            return self._values[key]
        return default

    def position(self, predicate: Callable[[T], bool]) -> int | None:
        """Key of the first value satisfying ``predicate``."""
        return next((key for key, value in self.items() if predicate(value)), None)

    def __getitem__(self, key: int) -> T:
        if key not in self:
            raise KeyError(key)
        return self._values[key]

    def __setitem__(self, key: int, value: T) -> None:
        if key not in self:
            raise KeyError(key)
        self._values[key] = value

    def __len__(self) -> int:
        return len(self._values) - len(self._removed)

    def __iter__(self) -> Iterator[int]:
        return self.keys()

    def __contains__(self, key: object) -> bool:
        return (
            isinstance(key, int)
            and 0 <= key < len(self._values)
            and self._values[key] is not _EMPTY
        )

    def __repr__(self) -> str:
        return f"IndexMap({dict(self.items())!r})"