import pytest

from metricfacade.labels import Label, into_labels


def test_label_fields_and_parts():
    label = Label("service", "http")
    assert label.key == "service"
    assert label.value == "http"
    assert label.into_parts() == ("service", "http")


def test_label_equality_and_hash():
    assert Label("a", "b") == Label("a", "b")
    assert len({Label("a", "b"), Label("a", "b"), Label("a", "c")}) == 2


def test_label_ordering_by_key_then_value():
    labels = [Label("b", "1"), Label("a", "2"), Label("a", "1")]
    assert sorted(labels) == [Label("a", "1"), Label("a", "2"), Label("b", "1")]


def test_label_requires_strings():
    with pytest.raises(TypeError):
        Label("key", 1)


def test_into_labels_none_is_empty():
    assert into_labels(None) == []


def test_into_labels_from_pairs_keeps_order():
    pairs = [("listener", "frontend"), ("server", "web03")]
    labels = into_labels(pairs)
    assert [label.into_parts() for label in labels] == pairs


def test_into_labels_from_mapping():
    assert into_labels({"uvw": "xyz"}) == [Label("uvw", "xyz")]


def test_into_labels_passes_labels_through():
    existing = [Label("key", "value")]
    assert into_labels(existing) == existing
    assert into_labels(Label("key", "value")) == existing


def test_into_labels_single_pair():
    assert into_labels(("foo", "bar")) == [Label("foo", "bar")]


def test_into_labels_rejects_bad_items():
    with pytest.raises(TypeError):
        into_labels([("only-one",)])
    with pytest.raises(TypeError):
        into_labels("not-labels")
    with pytest.raises(TypeError):
        into_labels(42)