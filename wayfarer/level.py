"""Class experience and the levels it grants."""

from __future__ import annotations

from dataclasses import dataclass

EXP = (0, 500, 1500, 3000, 5500, 9500, 16000)


@dataclass(frozen=True)
class ClassLevel:
    """A class level, starting at 1."""

    value: int = 1

    def min_exp(self) -> int:
        """Experience at which this level begins."""
        index = max(self.value - 1, 0)
        return EXP[index] if index < len(EXP) else EXP[0]

    def max_exp(self) -> int:
        """Experience at which this level ends."""
        return EXP[self.value] if self.value < len(EXP) else EXP[-1]


@dataclass
class ClassExp:
    """Accumulated class experience, capped at the final threshold."""

    value: int = 0

    def change(self, by: int) -> None:
        """Adjust experience by ``by``, staying between zero and the cap."""
        self.value = min(max(self.value + by, 0), EXP[-1])

    def level(self) -> ClassLevel:
        for i, (low, high) in enumerate(zip(EXP, EXP[1:])):
            if low <= self.value < high:
                return ClassLevel(i + 1)
        return ClassLevel(len(EXP) - 1)