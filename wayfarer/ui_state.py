"""Shared interface state: context, modals, revealers, toasts and confirmations."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, TypeVar

T = TypeVar("T")

UNCHECKED_COLOUR = "border-zinc-700 fill-zinc-500 text-zinc-500"


class Context:
    """Holds one shared value per type."""

    def __init__(self) -> None:
        self._values: dict[type, Any] = {}

    def provide(self, value: T) -> T:
        """Share ``value`` under its own type and return it."""
        self._values[type(value)] = value
        return value

    def expect(self, kind: type[T]) -> T:
        """The value shared for ``kind``."""
        try:
            return self._values[kind]
        except KeyError:
            raise LookupError(f"no {kind.__name__} has been provided") from None


class ModalLocation(Enum):
    CREATE_PC = auto()
    CLASS_OPTIONAL_BUFF = auto()
    ADD_ITEM_PROP = auto()
    SHOP_ITEM_DETAILS = auto()
    DELETE_CONFIRM = auto()
    RECENTLY_REMOVED = auto()


@dataclass
class ModalState:
    """Which modal, if any, is open; page scrolling is locked while one is."""

    location: ModalLocation | None = None

    @property
    def scroll_locked(self) -> bool:
        return self.location is not None

    def show(self, location: ModalLocation) -> None:
        self.location = location

    def hide(self) -> None:
        self.location = None

    def is_open(self, location: ModalLocation | None = None) -> bool:
        """Whether ``location`` is open, or any modal when no location is given."""
        if location is None:
            return self.location is not None
        return self.location == location


class RevLocation(Enum):
    BACKPACK_MORE = auto()
    COUNT_BUTTON = auto()
    SELL_CONFIRM = auto()
    RALLY_CONFIRM = auto()
    SHOP_BUY = auto()
    REST_CONFIRM = auto()
    SETTING_DATABASE = auto()


@dataclass
class Revealer:
    """A single revealed element, identified by location and key; scrolling hides it."""

    current: tuple[RevLocation, int] | None = None

    def show(self, location: RevLocation, key: int) -> None:
        self.current = (location, key)

    def hide(self) -> None:
        self.current = None

    def on_scroll(self) -> None:
        self.hide()

    def is_shown(self, location: RevLocation, key: int) -> bool:
        return self.current == (location, key)

    def is_hidden(self, location: RevLocation, key: int) -> bool:
        return not self.is_shown(location, key)


@dataclass
class Toast:
    """A dismissable notification."""

    is_shown: bool = False
    title: str = ""
    body: str = ""

    def show(self, title: Any, body: Any) -> None:
        self.is_shown = True
        self.title = str(title)
        self.body = str(body)

    def hide(self) -> None:
        self.is_shown = False
        self.title = ""
        self.body = ""

    def message(self) -> tuple[str, str]:
        """The title and the body as a sentence."""
        return self.title, f"{self.body}."


@dataclass
class DeleteModal:
    """Asks before running a delete effect on a chosen key."""

    modal: ModalState = field(default_factory=ModalState)
    key: int = 0
    effect: Callable[[int], Any] = lambda _key: None

    def show(self, key: int) -> None:
        self.key = key
        self.modal.show(ModalLocation.DELETE_CONFIRM)

    def set_effect(self, effect: Callable[[int], Any]) -> None:
        self.effect = effect

    def confirm(self) -> None:
        """Run the effect on the chosen key and close the modal."""
        self.effect(self.key)
        self.modal.hide()

    def cancel(self) -> None:
        self.modal.hide()


@dataclass
class ConfirmButton:
    """An action that needs a second press to run."""

    location: RevLocation
    on_click: Callable[[], Any]
    revealer: Revealer = field(default_factory=Revealer)
    disabled: bool = False

    def request(self) -> bool:
        """First press: ask for confirmation unless disabled."""
        if self.disabled:
            return False
        self.revealer.show(self.location, 0)
        return True

    def confirm(self) -> bool:
        """Second press: run the action if confirmation was asked for."""
        if not self.awaiting_confirmation():
            return False
        self.revealer.hide()
        self.on_click()
        return True

    def awaiting_confirmation(self) -> bool:
        return self.revealer.is_shown(self.location, 0)


def checkbox_class(
    checked: bool,
    extra: str = "",
    checked_colour: str = "",
    unchecked_colour: str = UNCHECKED_COLOUR,
) -> str:
    """CSS classes for a checkbox button in its current state."""
    colours = checked_colour if checked else unchecked_colour
    return f"border-2 rounded font-tight p-2 {extra} {colours}"