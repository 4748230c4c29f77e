import pytest

from saba.errors import (
    InvalidUIError,
    NetworkError,
    OtherError,
    SabaError,
    UnexpectedInputError,
)


def test_every_kind_is_caught_as_base():
    errors = [
        NetworkError("boom"),
        UnexpectedInputError("boom"),
        InvalidUIError("boom"),
        OtherError("boom"),
    ]
    for error in errors:
        assert isinstance(error, SabaError)
        assert error.message == "boom"
        assert str(error) == "boom"
        try:
            raise error
        except SabaError as caught:
            assert caught is error
            assert caught.message == "boom"


@pytest.mark.parametrize(
    "kind",
    [
        UnexpectedInputError,
        InvalidUIError,
        OtherError,
    ],
)
def test_other_kinds_raise_as_base(kind):
    with pytest.raises(SabaError) as info:
        raise kind("boom")
    assert type(info.value) is kind
    assert str(info.value) == "boom"
    assert repr(info.value) == f"{kind.__name__}('boom')"
    assert info.value == kind("boom")
    assert not (info.value == kind("other"))


def test_network_error_is_caught_as_base():
    error = NetworkError("boom")
    assert issubclass(NetworkError, SabaError)
    assert error.message == "boom"
    assert str(error) == "boom"
    try:
        raise error
    except SabaError as caught:
        assert type(caught) is NetworkError
        assert caught.message == "boom"


def test_equal_when_kind_and_message_match():
    pairs = [
        (NetworkError("same"), NetworkError("same")),
        (UnexpectedInputError("same"), UnexpectedInputError("same")),
        (InvalidUIError("same"), InvalidUIError("same")),
        (OtherError("same"), OtherError("same")),
    ]
    for left, right in pairs:
        assert left == right
        assert hash(left) == hash(right)


def test_network_errors_with_same_message_are_equal():
    left = NetworkError("same")
    right = NetworkError("same")
    assert left.message == "same"
    assert right.message == "same"
    assert left == right
    assert hash(left) == hash(right)


def test_different_kinds_are_not_equal():
    assert not (NetworkError("x") == OtherError("x"))


def test_different_messages_are_not_equal():
    assert not (NetworkError("a") == NetworkError("b"))


def test_repr_names_the_kind():
    assert repr(UnexpectedInputError("bad")) == "UnexpectedInputError('bad')"


def test_usable_in_sets():
    errors = {NetworkError("a"), NetworkError("a"), OtherError("a")}
    assert len(errors) == 2