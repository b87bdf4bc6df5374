"""A name-sorted inventory with slot weights, stacks and fatigue."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Protocol, TypeVar

from wayfarer.counter import Counter
from wayfarer.index_map import IndexMap

MAX_BACKPACK = 10


class Stowable(Protocol):
    """What an inventory needs to know about an item."""

    name: str

    def is_bulky(self) -> bool: ...

    def find_counter(self) -> Counter | None: ...


I = TypeVar("I", bound=Stowable)


class _SlotKind(Enum):
    SINGLE = "single"
    DOUBLE = "double"
    ENCUMBERED = "encumbered"


@dataclass(frozen=True)
class SlotRange:
    """The inventory slots an item occupies, or encumbrance."""

    kind: _SlotKind = _SlotKind.SINGLE
    last: int = 0

    @classmethod
    def single(cls, last: int) -> SlotRange:
        return cls(_SlotKind.SINGLE, last)

    @classmethod
    def double(cls, last: int) -> SlotRange:
        return cls(_SlotKind.DOUBLE, last)

    @classmethod
    def encumbered(cls) -> SlotRange:
        return cls(_SlotKind.ENCUMBERED, 0)

    @property
    def is_encumbered(self) -> bool:
        return self.kind is _SlotKind.ENCUMBERED

    def largest(self) -> int | None:
        """The highest slot used, or ``None`` if encumbered."""
        return None if self.is_encumbered else self.last

    def __str__(self) -> str:
        if self.kind is _SlotKind.SINGLE:
            return str(self.last)
        if self.kind is _SlotKind.DOUBLE:
            return f"{self.last - 1} - {self.last}"
        return "encumbered"


class Inventory(Generic[I]):
    """Items kept in name order, each taking one slot or two if bulky."""

    def __init__(self, max_size: int = 0) -> None:
        self._items: IndexMap[I] = IndexMap()
        self._sorted: list[int] = []
        self._weight: dict[int, SlotRange] = {}
        self._max_size = max_size

    @classmethod
    def from_items(cls, items: Iterable[I]) -> Inventory[I]:
        """An inventory of the default size holding ``items``."""
        inventory: Inventory[I] = cls(MAX_BACKPACK)
        for item in items:
            inventory.add(item)
        return inventory

    @property
    def max_size(self) -> int:
        return self._max_size

    def add(self, item: I) -> int:
        """Add ``item`` and return its key."""
        key = self._items.add(item)
        self._add_sorted(key, item.name)
        self._calc_weight()
        return key

    def remove(self, key: int) -> I | None:
        """Remove and return the item under ``key``, if any."""
        if key in self._sorted:
            self._sorted.remove(key)
        self._calc_weight()
        return self._items.remove(key)

    def use_item(self, key: int) -> I | None:
        """Use one of the item's stack; return the item if it was used up."""
        item = self._items.get(key)
        if item is None:
            raise KeyError(key)
        counter = item.find_counter()
        if counter is None:
            return self.remove(key)
        counter.curr -= 1
        return self.remove(key) if counter.is_empty() else None

    def get(self, key: int) -> I | None:
        return self._items.get(key)

    def values(self) -> Iterator[I]:
        """Items sorted by name."""
        return (item for _, item in self.items())

    def items(self) -> Iterator[tuple[int, I]]:
        """Keys and items sorted by name."""
        for key in self._sorted:
            item = self._items.get(key)
            if item is not None:
                yield key, item

    def keys(self) -> Iterator[int]:
        return iter(list(self._sorted))

    def __len__(self) -> int:
        return len(self._sorted)

    def vacancy(self) -> int | None:
        """Free slots left, or ``None`` if encumbered."""
        size = self.size()
        return None if size is None else max(self._max_size - size, 0)

    def size(self) -> int | None:
        """Slots in use, or ``None`` if encumbered."""
        if not self._sorted:
            return 0
        return self._weight.get(self._sorted[-1], SlotRange()).largest()

    def resize(self, max_size: int) -> None:
        """Change the number of slots and recompute slot ranges."""
        self._max_size = max_size
        self._calc_weight()

    def get_slot(self, key: int) -> SlotRange:
        return self._weight.get(key, SlotRange())

    def _calc_weight(self) -> None:
        weight: dict[int, SlotRange] = {}
        last = 0
        for key in self._sorted:
            item = self._items.get(key)
            used = 0 if item is None else int(item.is_bulky()) + 1
            last += used
            if last > self._max_size:
                weight[key] = SlotRange.encumbered()
            elif used > 1:
                weight[key] = SlotRange.double(last)
            else:
                weight[key] = SlotRange.single(last)
        self._weight = weight

    def _add_sorted(self, key: int, name: str) -> None:
        position = next(
            (i for i, item in enumerate(self.values()) if item.name > name),
            len(self._sorted),
        )
        self._sorted.insert(position, key)


def change_stack(inventory: Inventory, key: int, by: int) -> Counter | None:
    """Change the stack count of the item under ``key``; return its counter."""
    item = inventory.get(key)
    counter = item.find_counter() if item is not None else None
    if counter is not None:
        counter.curr += by
    return counter


def can_grow_stack(counter: Counter) -> bool:
    return counter.curr < counter.max


def can_shrink_stack(counter: Counter) -> bool:
    return counter.curr >= 2


def fatigue(inventory: Inventory) -> int:
    """Fatigue points: slots lost from a full backpack."""
    return MAX_BACKPACK - inventory.max_size


def add_fatigue(inventory: Inventory) -> None:
    """Take one slot away, never going below zero."""
    inventory.resize(max(inventory.max_size - 1, 0))


def remove_fatigue(inventory: Inventory) -> None:
    """Give one slot back, never beyond a full backpack."""
    inventory.resize(min(inventory.max_size + 1, MAX_BACKPACK))