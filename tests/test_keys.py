import pytest

from metricfacade.keys import Key, KeyName
from metricfacade.labels import Label

BORROWED_NAME = "name"
FOOBAR_NAME = "foobar"
LABELS = [Label("key", "value")]


def test_key_ord_and_partialord():
    expected = [Key.from_name("aaaa"), Key.from_name("bbbb"), Key.from_name("cccc")]
    unsorted = [Key.from_name("bbbb"), Key.from_name("cccc"), Key.from_name("aaaa")]
    assert sorted(unsorted) == expected
    assert Key.from_name("aaaa") < Key.from_name("bbbb")
    assert Key.from_name("cccc") > Key.from_name("bbbb")


def test_key_eq_and_hash():
    keys = {}
    borrowed_basic = Key.from_static_name(BORROWED_NAME)
    owned_basic = Key.from_name("name")
    assert owned_basic == borrowed_basic

    assert owned_basic not in keys
    keys[owned_basic] = 42
    assert keys.get(borrowed_basic) == 42

    borrowed_labels = Key.from_static_parts(BORROWED_NAME, LABELS)
    owned_labels = Key.from_parts(BORROWED_NAME, list(LABELS))
    assert owned_labels == borrowed_labels

    assert owned_labels not in keys
    keys[owned_labels] = 43
    assert keys.get(borrowed_labels) == 43

    basic = Key("constant_key")
    cloned = Key(basic.key_name, basic.labels)
    assert basic == cloned


def test_key_data_proper_display():
    assert str(Key.from_name("foobar")) == "Key(foobar)"

    key2 = Key.from_parts(FOOBAR_NAME, [Label("system", "http")])
    assert str(key2) == "Key(foobar, [system = http])"

    key3 = Key.from_parts(FOOBAR_NAME, [Label("system", "http"), Label("user", "joe")])
    assert str(key3) == "Key(foobar, [system = http, user = joe])"

    key4 = Key.from_parts(
        FOOBAR_NAME,
        [Label("black", "black"), Label("lives", "lives"), Label("matter", "matter")],
    )
    assert str(key4) == "Key(foobar, [black = black, lives = lives, matter = matter])"


def test_label_order_matters_for_equality():
    a = Key.from_parts("n", [("a", "1"), ("b", "2")])
    b = Key.from_parts("n", [("b", "2"), ("a", "1")])
    assert a != b


def test_get_hash_equal_for_equal_keys_and_in_u64_range():
    a = Key.from_parts("n", {"x": "y"})
    b = Key.from_static_labels(KeyName("n"), [Label("x", "y")])
    assert a.get_hash() == b.get_hash()
    assert 0 <= a.get_hash() < 2**64


def test_into_parts():
    key = Key.from_parts("svc", [("a", "b")])
    name, labels = key.into_parts()
    assert name == KeyName("svc")
    assert name.as_str() == "svc"
    assert labels == [Label("a", "b")]


def test_with_extra_labels_appends():
    key = Key.from_parts("svc", [("a", "b")])
    extended = key.with_extra_labels([Label("c", "d")])
    assert extended.labels == (Label("a", "b"), Label("c", "d"))
    assert key.labels == (Label("a", "b"),)
    assert extended.name == "svc"


def test_with_extra_labels_empty_is_equal_copy():
    key = Key.from_parts("svc", [("a", "b")])
    same = key.with_extra_labels([])
    assert same == key
    assert same.get_hash() == key.get_hash()


def test_name_property_and_iteration():
    key = Key.from_parts("svc", [("a", "b"), ("c", "d")])
    assert key.name == "svc"
    assert [label.key for label in key] == ["a", "c"]


def test_invalid_name_type():
    with pytest.raises(TypeError):
        Key.from_name(12)