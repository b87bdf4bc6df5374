"""Small general-purpose helpers and a seeded random number generator."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from itertools import chain
from typing import Any, TypeVar

T = TypeVar("T")

_MASK64 = (1 << 64) - 1
_WY_INCREMENT = 0xA0761D6478BD642F
_WY_XOR = 0xE7037ED1A0B428DB


def add_operator(value: int) -> str:
    """Format ``value`` with a leading ``+`` when it is not negative."""
    return f"+{value}" if value > -1 else str(value)


def concat_if(
    predicate: Callable[[], bool],
    base: Any,
    if_true: Any,
    if_false: Any,
) -> Callable[[], str]:
    """Return a function joining ``base`` with one of two suffixes, chosen by ``predicate``."""

    def render() -> str:
        return f"{base} {if_true}" if predicate() else f"{base} {if_false}"

    return render


def array_len(groups: Sequence[Sequence[Any]]) -> int:
    """Total number of elements across all ``groups``."""
    return sum(len(group) for group in groups)


def flatten_array(groups: Sequence[Sequence[T]], count: int, default: T) -> list[T]:
    """Flatten ``groups`` into a list of exactly ``count`` items, padded with ``default``."""
    flat = list(chain.from_iterable(groups))
    if len(flat) > count:
        raise ValueError(f"{len(flat)} items do not fit into an array of {count}")
    return flat + [default] * (count - len(flat))


class Rand:
    """A small WyRand generator used to pick random elements."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = int(random.random() * 10**10)
        self._state = seed & _MASK64

    def next_u64(self) -> int:
        """Produce the next 64-bit random value."""
        self._state = (self._state + _WY_INCREMENT) & _MASK64
        product = self._state * (self._state ^ _WY_XOR)
        return ((product >> 64) ^ product) & _MASK64

    def _below(self, upper: int) -> int:
        value = self.next_u64() * upper
        low = value & _MASK64
        if low < upper:
            threshold = ((-upper) & _MASK64) % upper
            while low < threshold:
                value = self.next_u64() * upper
                low = value & _MASK64
        return value >> 64

    def pick(self, items: Sequence[T]) -> T:
        """Pick one element of ``items`` at random."""
        if not items:
            raise IndexError("cannot pick from an empty sequence")
        return items[self._below(len(items))]