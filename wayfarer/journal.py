"""A character's journal of named notes."""

from __future__ import annotations

import copy
from dataclasses import dataclass

from wayfarer.index_map import IndexMap


@dataclass
class Note:
    """A journal entry with a title and free text."""

    name: str = ""
    body: str = ""


class Journal(IndexMap[Note]):
    """Notes kept under stable keys."""

    def add_note(self, name: str) -> int:
        """Start a new, empty note called ``name`` and return its key."""
        if not name:
            raise ValueError("a note needs a name")
        return self.add(Note(name))

    def note_or_default(self, key: int) -> Note:
        """A copy of the note under ``key``, or an empty note if there is none."""
        note = self.get(key)
        return copy.copy(note) if note is not None else Note()

    def save_note(self, key: int, note: Note) -> bool:
        """Replace the note under ``key``; return whether a note was there to replace."""
        if not note.name:
            raise ValueError("a note needs a name")
        if key not in self:
            return False
        self[key] = note
        return True

    def delete_note(self, key: int) -> Note | None:
        """Remove and return the note under ``key``, if any."""
        return self.remove(key)


def toggle_note(open_notes: list[int], key: int) -> bool:
    """Open a closed note or close an open one; return whether it is now open."""
    if key in open_notes:
        open_notes.remove(key)
        return False
    open_notes.append(key)
    return True