import pytest

from reeks import BuilderClosedError, Multimap, MultimapBuilder, Nothing, Some


def test_builder_groups_values_in_insertion_order():
    multimap = MultimapBuilder().put("a", 1).put("b", 2).add("a", 3).build()
    assert multimap.get("a") == (1, 3)
    assert multimap.get("b") == (2,)
    assert list(multimap) == ["a", "b"]
    assert len(multimap) == 2


def test_missing_key():
    multimap = Multimap({"a": [1]})
    assert multimap.get("zzz") == ()
    assert "zzz" not in multimap
    assert multimap.get_option("zzz") == Nothing()


def test_get_option():
    assert Multimap({"a": [1, 2]}).get_option("a") == Some((1, 2))


def test_views_and_conversion():
    multimap = Multimap({0: [2, 4], 1: [1]})
    assert list(multimap.keys()) == [0, 1]
    assert dict(multimap.items()) == {0: (2, 4), 1: (1,)}
    assert multimap.to_dict() == {0: [2, 4], 1: [1]}


def test_equality():
    assert Multimap({"a": [1]}) == Multimap({"a": (1,)})
    assert Multimap({"a": [1]}) != Multimap({"a": [2]})
    assert Multimap() != {"a": [1]}


def test_builder_is_single_use():
    builder = MultimapBuilder()
    builder.build()
    with pytest.raises(BuilderClosedError):
        builder.put("a", 1)
    with pytest.raises(BuilderClosedError):
        builder.build()


def test_unhashable_keys_fail():
    with pytest.raises(TypeError):
        MultimapBuilder().put([1], "value")
