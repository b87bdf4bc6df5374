"""A simple current/maximum counter."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Counter:
    """Tracks a current count against a maximum."""

    curr: int = 0
    max: int = 0

    @classmethod
    def of(cls, count: int) -> Counter:
        """A full counter holding ``count``."""
        return cls(curr=count, max=count)

    def is_empty(self) -> bool:
        return self.curr == 0