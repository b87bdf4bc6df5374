"""Guard and health damage tracking."""

from __future__ import annotations

from dataclasses import dataclass

from wayfarer.wealth import parse_coin_input

MAX_INPUT = 50


@dataclass
class Vitals:
    """Damage taken to guard and to health."""

    guard_dmg: int = 0
    health_dmg: int = 0

    def guard_left(self, max_guard: int) -> int:
        return max(max_guard - self.guard_dmg, 0)

    def health_left(self, max_health: int) -> int:
        return max(max_health - self.health_dmg, 0)

    def _hurt_health(self, amount: int, max_health: int) -> None:
        self.health_dmg = min(self.health_dmg + amount, max_health)

    def damage(self, amount: int, max_guard: int, max_health: int, is_raw: bool) -> None:
        """Apply damage to guard first, spilling the rest into health.

        Raw damage, or damage when guard is already broken, goes straight to health.
        """
        if self.guard_dmg >= max_guard or is_raw:
            self._hurt_health(amount, max_health)
        elif self.guard_dmg + amount > max_guard:
            self._hurt_health(amount - (max_guard - self.guard_dmg), max_health)
            self.guard_dmg = max_guard
        else:
            self.guard_dmg += amount

    def heal(self, amount: int, is_raw: bool) -> None:
        """Heal health when raw, otherwise guard; never below zero damage."""
        if is_raw:
            self.health_dmg = max(self.health_dmg - amount, 0)
        else:
            self.guard_dmg = max(self.guard_dmg - amount, 0)


def parse_amount_input(text: str) -> int:
    """Read a damage or healing amount, capped at 50; invalid input reads as zero."""
    return parse_coin_input(text, MAX_INPUT)