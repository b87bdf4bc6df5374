import pytest

from wayfarer.journal import Journal, Note, toggle_note


def test_add_note_starts_with_empty_body():
    journal = Journal()
    key = journal.add_note("Dragons")
    assert journal[key] == Note("Dragons", "")


def test_add_note_rejects_empty_name():
    journal = Journal()
    with pytest.raises(ValueError):
        journal.add_note("")
    assert len(journal) == 0


def test_keys_are_reused_after_delete():
    journal = Journal()
    first = journal.add_note("a")
    second = journal.add_note("b")
    assert journal.delete_note(first) == Note("a")
    assert journal.add_note("c") == first
    assert journal[second].name == "b"


def test_delete_missing_note_returns_none():
    journal = Journal()
    assert journal.delete_note(7) is None


def test_note_or_default_missing():
    journal = Journal()
    assert journal.note_or_default(3) == Note()


def test_note_or_default_is_a_copy():
    journal = Journal()
    key = journal.add_note("Town")
    note = journal.note_or_default(key)
    note.body = "changed"
    assert journal[key].body == ""


def test_save_note_replaces_existing():
    journal = Journal()
    key = journal.add_note("Town")
    edited = journal.note_or_default(key)
    edited.body = "The mayor is lying."
    assert journal.save_note(key, edited) is True
    assert journal[key] == Note("Town", "The mayor is lying.")


def test_save_note_on_missing_key():
    journal = Journal()
    assert journal.save_note(4, Note("x")) is False
    assert 4 not in journal


def test_save_note_rejects_empty_name():
    journal = Journal()
    key = journal.add_note("Town")
    with pytest.raises(ValueError):
        journal.save_note(key, Note("", "body"))
    assert journal[key].name == "Town"


def test_toggle_note_round_trip():
    open_notes = []
    assert toggle_note(open_notes, 2) is True
    assert open_notes == [2]
    assert toggle_note(open_notes, 2) is False
    assert open_notes == []