# wayfarer

This package holds the rules and state behind a tabletop role-playing
character sheet. It is plain Python and needs no third-party libraries.

## Modules

- **`wayfarer.inventory`**: `Inventory` keeps items sorted by name. An item
  takes one slot, or two if `is_bulky()` is true. `SlotRange` reports the
  slots each item uses, or that the inventory is encumbered, and `vacancy()`
  and `size()` return `None` in that case. `use_item` uses up one item from a
  stack. The module also has helpers for stacks (`change_stack`,
  `can_grow_stack`, `can_shrink_stack`) and for fatigue (`fatigue`,
  `add_fatigue`, `remove_fatigue`); a full backpack has 10 slots. An item needs
  a `name`, `is_bulky()` and `find_counter()` (see `Stowable`).
- **`wayfarer.inventory_actions`**: these functions act on inventories.
  `delete_item`, `copy_item`, `consume_item`, `equip` and `unequip` move or
  remove items. `can_equip` checks whether the equipment has room.
  `restore_item` brings back a removed item with a full stack. `replace_item`
  swaps an item for another, and `empty_slots` lists the unused slot numbers.
- **`wayfarer.wealth`**: copper totals as gold/silver/copper.
  `split_into_coinage` and `join_coinage` convert between the two forms.
  `set_coin` changes one coin within a total, and `parse_coin_input` reads a
  typed amount with a cap. `visible_coins` lists the coins with a non-zero
  amount. `spend` and `earn` stop at zero and at 2³²−1.
- **`wayfarer.vitals`**: `Vitals` records guard and health damage. Damage goes
  to guard first and the rest spills into health. Raw damage goes straight to
  health. `parse_amount_input` reads an amount and caps it at 50.
- **`wayfarer.level`**: `ClassExp` holds experience, capped at 16000, and
  `ClassLevel` gives the experience range of each level.
- **`wayfarer.journal`**: `Journal` stores `Note`s under stable keys.
  `toggle_note` opens or closes a note in a list of open notes.
- **`wayfarer.ui_state`**: plain state objects for an interface:
  - `Context` holds one shared value per type.
  - `ModalState` and `Revealer` track what is open.
  - `Toast` holds a notification.
  - `DeleteModal` asks before it runs a delete.
  - `ConfirmButton` runs its action on the second press.
  - `checkbox_class` builds the class string for a checkbox.
- **`wayfarer.routes`**: `resolve` maps a path to a `Route` and its
  parameters and follows the redirects. There are also helpers for the
  character id (`pc_id`), the highlighted tab (`selected_tab`), `main_url`,
  `journal_url` and `parse_id`.
- **Utilities**:
  - `wayfarer.index_map.IndexMap` keeps keys stable while items are added and
    removed.
  - `wayfarer.fixed_vec.FixedVec` is a bounded list of unique entries.
  - `wayfarer.counter.Counter` holds a current count against a maximum.
  - `wayfarer.search.search` returns up to three matches, shortest name
    first.
  - `wayfarer.helpers` has `add_operator`, `concat_if`, `array_len`,
    `flatten_array` and a seeded `Rand`.

## Example

```python
from wayfarer.index_map import IndexMap
from wayfarer.wealth import split_into_coinage
from wayfarer.vitals import Vitals

notes = IndexMap(["first", "second"])
notes.remove(0)
print(notes.add("third"))          # 0, the freed key is reused

print(split_into_coinage(12345))   # (12, 34, 5)

vitals = Vitals()
vitals.damage(8, max_guard=6, max_health=5, is_raw=False)
print(vitals.guard_dmg, vitals.health_dmg)  # 6 2
```

## What it does not do

This is a library with no command, no screens and no storage. It does not save
characters or journals anywhere, and it does not draw a user interface. It
also has no item catalogue, shops or selling, no rest or rally rules, no
character classes, no turn counting and no collation of ability scores. Code
that uses the package supplies these itself.

## Running the tests

```
pip install -e ".[test]"
pytest
```