import pytest

from reeks import NoSuchElementError, Nothing, Option, Some


def test_some():
    option = Some(3)
    assert option.is_present()
    assert not option.is_empty()
    assert option.get() == 3
    assert option.get_or_else(0) == 3
    assert bool(option)
    assert list(option) == [3]


def test_some_can_hold_none():
    option = Some(None)
    assert option.is_present()
    assert option.get() is None


def test_nothing():
    option = Nothing()
    assert not option.is_present()
    assert option.is_empty()
    assert option.get_or_else("default") == "default"
    assert not option
    assert list(option) == []
    with pytest.raises(NoSuchElementError):
        option.get()


def test_map():
    assert Some(2).map(lambda x: x * 5) == Some(10)
    assert Nothing().map(lambda x: x * 5) == Nothing()


def test_if_present():
    seen = []
    Some("x").if_present(seen.append)
    Nothing().if_present(seen.append)
    assert seen == ["x"]


def test_equality():
    assert Some(1) == Some(1)
    assert Some(1) != Some(2)
    assert Some(None) != Nothing()
    assert Nothing() == Nothing()


def test_no_such_element_is_a_lookup_error():
    with pytest.raises(LookupError):
        Nothing().get()


def test_option_is_abstract():
    with pytest.raises(TypeError):
        Option()
