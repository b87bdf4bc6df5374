"""Fuzzy-free name search returning the three shortest matches."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from itertools import chain
from typing import TypeVar

T = TypeVar("T")

_IGNORED = set("(),\".;:'")


def search(
    groups: Iterable[Iterable[T]],
    pattern: Callable[[T], str],
    query: str,
) -> list[T]:
    """Find up to three elements whose text contains ``query``, shortest first.

    Punctuation is stripped from each element's text before matching; the
    query is lower-cased. Among equally long matches, earlier ones win.
    """
    query = query.lower()
    best: list[T] = []
    for element in chain.from_iterable(groups):
        text = pattern(element)
        stripped = "".join(c for c in text if c not in _IGNORED)
        if query not in stripped:
            continue
        length = len(text)
        slot = next(
            (i for i, held in enumerate(best) if length < len(pattern(held))),
            len(best),
        )
        if slot < 3:
            best.insert(slot, element)
            del best[3:]
    return best