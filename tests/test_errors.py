import pytest

from beerscli.errors import (
    BadResponseError,
    DataUnreachableError,
    is_data_unreachable,
    new_data_unreachable,
    wrap_data_unreachable,
)


def test_bad_response_error_message_holds_file_line_and_msg():
    err = BadResponseError("boom", "repository.go", 12)
    assert str(err) == "repository.go: 12: boom"


def test_bad_response_error_keeps_fields():
    err = BadResponseError("boom", "repository.go", 12)
    assert (err.msg, err.file, err.line) == ("boom", "repository.go", 12)


def test_wrap_formats_message_and_appends_cause():
    inner = ValueError("inner")
    err = wrap_data_unreachable(inner, "error getting response to %s", "/products")
    assert str(err) == "error getting response to /products: inner"
    assert err.__cause__ is inner
    assert err.cause is inner


def test_wrapped_error_is_data_unreachable():
    err = wrap_data_unreachable(OSError("down"), "can't parsing response into beers")
    assert is_data_unreachable(err) is True


def test_new_data_unreachable_formats_arguments():
    err = new_data_unreachable("beer %d unreachable", 127)
    assert str(err) == "beer 127 unreachable"
    assert err.__cause__ is None
    assert is_data_unreachable(err) is True


def test_plain_errors_are_not_data_unreachable():
    assert is_data_unreachable(ValueError("x")) is False
    assert is_data_unreachable(None) is False


def test_error_raised_from_data_unreachable_is_detected():
    with pytest.raises(RuntimeError) as info:
        try:
            raise new_data_unreachable("gone")
        except DataUnreachableError as err:
            raise RuntimeError("outer") from err
    assert is_data_unreachable(info.value) is True


def test_implicit_context_is_not_followed():
    with pytest.raises(RuntimeError) as info:
        try:
            raise new_data_unreachable("gone")
        except DataUnreachableError:
            raise RuntimeError("outer")
    assert is_data_unreachable(info.value) is False


def test_data_unreachable_can_be_raised_and_caught():
    with pytest.raises(DataUnreachableError) as info:
        raise wrap_data_unreachable(
            OSError("reset"), "error reading the response from %s", "/products"
        )
    assert str(info.value) == "error reading the response from /products: reset"
    assert is_data_unreachable(info.value) is True