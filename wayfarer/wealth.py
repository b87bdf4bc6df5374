"""Coinage arithmetic: copper totals split into gold, silver and copper."""

from __future__ import annotations

import re
from enum import Enum

MAX_WEALTH = 2**32 - 1
COPPER_PER_GOLD = 1000
COPPER_PER_SILVER = 10

_UNSIGNED = re.compile(r"\+?[0-9]+")


class Coin(Enum):
    """The three coin kinds, largest first."""

    GOLD = 0
    SILVER = 1
    COPPER = 2

    @property
    def colour(self) -> str:
        return ("fill-yellow-500", "fill-stone-300", "fill-orange-800")[self.value]


def split_into_coinage(cp: int) -> tuple[int, int, int]:
    """Split a copper total into ``(gold, silver, copper)``."""
    copper = cp % 10
    rest = cp // 10
    silver = rest % 100
    gold = rest // 100
    return gold, silver, copper


def join_coinage(gold: int, silver: int, copper: int) -> int:
    """Combine coins into a copper total."""
    return gold * COPPER_PER_GOLD + silver * COPPER_PER_SILVER + copper


def set_coin(total: int, coin: Coin | int, value: int) -> int:
    """Replace one coin's amount within ``total`` and return the new total."""
    index = coin.value if isinstance(coin, Coin) else coin
    coinage = list(split_into_coinage(total))
    coinage[index] = value
    return join_coinage(*coinage)


def parse_coin_input(text: str, maximum: int) -> int:
    """Read a non-negative whole number from ``text``, capped at ``maximum``.

    Anything that is not such a number reads as zero.
    """
    if not _UNSIGNED.fullmatch(text):
        return 0
    number = int(text)
    if number > MAX_WEALTH:
        return 0
    return min(number, maximum)


def visible_coins(cp: int) -> list[tuple[Coin, int]]:
    """The coins worth showing for ``cp``: only those with a non-zero amount."""
    if cp <= 0:
        return []
    return [(coin, amount) for coin, amount in zip(Coin, split_into_coinage(cp)) if amount]


def spend(wealth: int, amount: int) -> int:
    """Take ``amount`` from ``wealth``, stopping at zero."""
    return max(wealth - amount, 0)


def earn(wealth: int, amount: int) -> int:
    """Add ``amount`` to ``wealth``, stopping at the largest storable value."""
    return min(wealth + amount, MAX_WEALTH)