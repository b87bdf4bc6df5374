"""Actions taken on items: deleting, copying, using, equipping and restoring."""

from __future__ import annotations

import copy

from wayfarer.fixed_vec import FixedVec
from wayfarer.inventory import Inventory


def delete_item(inventory: Inventory, removed: FixedVec, key: int):
    """Remove an item, remembering it among recently removed ones."""
    item = inventory.remove(key)
    if item is not None:
        removed.push_unique(item)
    return item


def copy_item(inventory: Inventory, key: int) -> int | None:
    """Add a copy of an item; return the copy's key."""
    item = inventory.get(key)
    if item is None:
        return None
    return inventory.add(copy.deepcopy(item))


def consume_item(inventory: Inventory, removed: FixedVec, key: int):
    """Use an item; if it was used up, remember it and return it."""
    item = inventory.use_item(key)
    if item is not None:
        removed.push_unique(item)
    return item


def _move(source: Inventory, target: Inventory, key: int) -> int | None:
    item = source.remove(key)
    return None if item is None else target.add(item)


def equip(backpack: Inventory, equipment: Inventory, key: int) -> int | None:
    """Move an item from the backpack to the equipment; return its new key."""
    return _move(backpack, equipment, key)


def unequip(equipment: Inventory, backpack: Inventory, key: int) -> int | None:
    """Move an item from the equipment to the backpack; return its new key."""
    return _move(equipment, backpack, key)


def can_equip(equipment: Inventory) -> bool:
    vacancy = equipment.vacancy()
    return vacancy is not None and vacancy > 0


def restore_item(removed: FixedVec, backpack: Inventory, item) -> int:
    """Put a removed item back in the backpack with a full stack."""
    item = copy.deepcopy(item)
    counter = item.find_counter()
    if counter is not None:
        counter.curr = counter.max
    removed.remove_where(lambda entry: entry == item)
    return backpack.add(item)


def replace_item(inventory: Inventory, key: int, item) -> int:
    """Swap the item under ``key`` for ``item``; return the new key."""
    inventory.remove(key)
    return inventory.add(item)


def empty_slots(inventory: Inventory) -> list[int]:
    """Slot numbers not yet used; none when encumbered."""
    size = inventory.size()
    if size is None:
        return []
    return list(range(size + 1, inventory.max_size + 1))