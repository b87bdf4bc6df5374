import pytest

from wayfarer.index_map import IndexMap


def test_add_assigns_sequential_keys():
    imap = IndexMap()
    assert [imap.add(v) for v in "abc"] == [0, 1, 2]
    assert len(imap) == 3


def test_init_from_values():
    imap = IndexMap(["x", "y"])
    assert list(imap.items()) == [(0, "x"), (1, "y")]


def test_remove_keeps_other_keys_stable():
    imap = IndexMap(["a", "b", "c"])
    assert imap.remove(1) == "b"
    assert list(imap.items()) == [(0, "a"), (2, "c")]
    assert len(imap) == 2


def test_removed_key_is_reused():
    imap = IndexMap(["a", "b", "c"])
    imap.remove(1)
    assert imap.add("d") == 1
    assert imap[1] == "d"


def test_remove_missing_returns_none():
    imap = IndexMap(["a"])
    assert imap.remove(5) is None
    imap.remove(0)
    assert imap.remove(0) is None
    assert len(imap) == 0
    assert imap.is_empty() if hasattr(imap, "is_empty") else len(imap) == 0


def test_get_and_getitem():
    imap = IndexMap(["a"])
    assert imap.get(0) == "a"
    assert imap.get(3, "fallback") == "fallback"
    with pytest.raises(KeyError):
        imap[3]


def test_setitem_only_existing():
    imap = IndexMap(["a"])
    imap[0] = "z"
    assert imap[0] == "z"
    with pytest.raises(KeyError):
        imap[1] = "q"


def test_from_pairs_leaves_gaps():
    imap = IndexMap.from_pairs([(0, "a"), (3, "d")])
    assert list(imap.keys()) == [0, 3]
    assert len(imap) == 2
    assert 1 not in imap
    assert imap.add("new") in (1, 2)


def test_from_pairs_empty():
    imap = IndexMap.from_pairs([])
    assert len(imap) == 0
    assert imap.add("a") == 0


def test_position_and_iteration():
    imap = IndexMap(["apple", "bean", "carrot"])
    imap.remove(0)
    assert imap.position(lambda v: v.startswith("c")) == 2
    assert imap.position(lambda v: v == "apple") is None
    assert list(imap) == [1, 2]
    assert list(imap.values()) == ["bean", "carrot"]