"""Page routing and path helpers."""

from __future__ import annotations

import re
from enum import Enum

_USIZE = re.compile(r"\+?[0-9]+")
_USIZE_MAX = 2**64 - 1

_TABS = {"realm": 0, "followers": 1, "main": 2, "journal": 3}
_OTHER_TAB = 4


class Route(Enum):
    """The pages of the application."""

    SETTINGS = "settings"
    LOBBY = "lobby"
    PC_MAIN = "main"
    EDIT_ITEM = "edit_item"
    JOURNAL = "journal"
    EDIT_NOTE = "edit_note"
    REALM = "realm"
    SHOP = "shop"
    SELL = "sell"


def parse_id(value: str) -> int | None:
    """Read a non-negative id, or ``None`` if ``value`` is not one."""
    if not _USIZE.fullmatch(value):
        return None
    number = int(value)
    return number if number <= _USIZE_MAX else None


def resolve(path: str) -> tuple[Route, dict[str, str]]:
    """The page shown for ``path`` and its parameters, following redirects."""
    segments = [segment for segment in path.split("/") if segment]
    match segments:
        case []:
            return Route.LOBBY, {}
        case ["settings"]:
            return Route.SETTINGS, {}
        case ["pc", pc, *rest]:
            params = {"pc": pc}
            match rest:
                case ["main"]:
                    return Route.PC_MAIN, params
                case ["edit_item", key]:
                    return Route.EDIT_ITEM, {**params, "id": key}
                case ["journal"]:
                    return Route.JOURNAL, params
                case ["edit_note", key]:
                    return Route.EDIT_NOTE, {**params, "id": key}
                case ["realm"]:
                    return Route.REALM, params
                case ["realm", "buy", repr_]:
                    return Route.SHOP, {**params, "repr": repr_}
                case ["realm", "sell"]:
                    return Route.SELL, params
                case _:
                    return Route.PC_MAIN, params
        case _:
            return Route.LOBBY, {}


def pc_id(path: str) -> int | None:
    """The character id held in ``path``, if any."""
    parts = path.split("/")
    return parse_id(parts[2]) if len(parts) > 2 else None


def selected_tab(path: str) -> int:
    """Index of the navigation tab highlighted for ``path``."""
    return _TABS.get(path.split("/")[-1], _OTHER_TAB)


def main_url(path: str) -> str:
    """The main page of the character whose page ``path`` is."""
    return "/".join(path.split("/")[:3]) + "/main"


def journal_url(pc: int) -> str:
    """The journal page of character ``pc``."""
    return f"pc/{pc}/journal"