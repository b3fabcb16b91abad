import pytest

from reeks import (
    BuilderClosedError,
    Collection,
    EmptyCollectionError,
    InvalidArgumentError,
    NoSuchElementError,
    ReeksError,
    SourceNotResettableError,
)


class MyException(Exception):
    pass


def fail_on_two(x, *_):
    if x == 2:
        raise MyException("I failed on 2!")
    return x


# --- Taxonomy ---


@pytest.mark.parametrize(
    "error_cls",
    [
        InvalidArgumentError,
        EmptyCollectionError,
        SourceNotResettableError,
        BuilderClosedError,
        NoSuchElementError,
    ],
)
def test_library_errors_share_a_base(error_cls):
    assert issubclass(error_cls, ReeksError)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        Collection([1]).slice(-1, 1)


def test_invalid_argument_message_names_the_operation():
    with pytest.raises(InvalidArgumentError) as exc_info:
        Collection([1]).slice(0, -3)
    assert exc_info.value.operation == "slice"
    assert "length" in str(exc_info.value)


# --- User function failures propagate unwrapped ---


@pytest.mark.parametrize(
    "operation",
    [
        lambda c: c.filter_by(fail_on_two).to_list(),
        lambda c: c.map_by(fail_on_two).to_list(),
        lambda c: c.flat_map_by(fail_on_two).to_list(),
        lambda c: c.each_by(fail_on_two),
        lambda c: c.find_by(lambda x: fail_on_two(x) > 5),
        lambda c: c.fold_by(lambda acc, x: fail_on_two(x), 0),
        lambda c: c.reduce_by(lambda acc, x: fail_on_two(x)),
        lambda c: c.partition_by(fail_on_two),
        lambda c: c.group_by(fail_on_two),
        lambda c: c.sort_by(lambda a, b: fail_on_two(a) - fail_on_two(b)),
    ],
)
def test_user_errors_propagate_unmodified(operation):
    with pytest.raises(MyException, match="I failed on 2!"):
        operation(Collection([1, 2, 3]))


def test_failed_drain_leaves_source_where_it_stopped():
    collection = Collection([1, 2, 3, 4])
    with pytest.raises(MyException):
        collection.each_by(fail_on_two)
    assert collection.to_list() == [3, 4]
