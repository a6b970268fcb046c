import pytest

from scrapkit.string_list import StringList


def test_init_list_array():
    items = StringList(5)
    assert items.capacity == 5
    assert len(items) == 0


def test_add_string_in_list_array():
    items = StringList(5)
    items.add("toto")
    assert len(items) == 1
    assert items.get(0) == "toto"


def test_exceed_capacity_grows():
    items = StringList(1)
    items.add("toto")
    items.add("tata")
    items.add("tonton")
    assert len(items) == 3
    assert items.get(1) == "tata"
    assert items.get(2) == "tonton"
    assert len(items) <= items.capacity
    assert items.get(0) == "toto"


def test_get_string_by_index():
    items = StringList(5)
    for word in ("tata", "tonton", "testons", "testez"):
        items.add(word)
    assert items.get(3) == "testez"
    assert items.get(1) == "tonton"
    assert items.get(0) == "tata"
    assert items.get(2) == "testons"

    for word in ("tonton", "testons", "testez"):
        items.add(word)
    assert items.capacity > 5
    assert items.capacity >= len(items)


def test_zero_capacity_is_rejected():
    with pytest.raises(ValueError):
        StringList(0)


def test_negative_capacity_is_rejected():
    with pytest.raises(ValueError):
        StringList(-3)


def test_get_out_of_range_raises():
    items = StringList(1)
    items.add("toto")
    with pytest.raises(IndexError):
        items.get(100)


def test_get_negative_index_raises():
    items = StringList(1)
    items.add("toto")
    with pytest.raises(IndexError):
        items.get(-1)


def test_drain_returns_all_strings_in_order():
    words = [
        "toto",
        "tata",
        "titi",
        "tete",
        "tutu",
        "tonton",
        "tuctuc",
        "toulouctoulouctoulouc",
        "doudadada",
    ]
    items = StringList(3)
    for word in words:
        items.add(word)

    drained = items.drain()
    assert len(drained) == 9
    assert drained == words
    assert len(items) == 0


def test_iteration_matches_get():
    items = StringList(2)
    for word in ("a", "b", "c"):
        items.add(word)
    assert list(items) == [items.get(i) for i in range(len(items))]


def test_capacity_doubles_when_full():
    items = StringList(2)
    items.add("x")
    items.add("y")
    assert items.capacity == 2
    items.add("z")
    assert items.capacity == 4