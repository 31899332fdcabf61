"""Tests for restheaders.errors — exception hierarchy and error messages."""

import pickle

import pytest

from restheaders.errors import ConfigurationError, InvalidHeaderName, RestHeadersError


class TestHierarchy:
    def test_invalid_header_name_is_restheaders_error(self) -> None:
        assert issubclass(InvalidHeaderName, RestHeadersError)

    def test_invalid_header_name_is_value_error(self) -> None:
        assert issubclass(InvalidHeaderName, ValueError)

    def test_configuration_error_is_restheaders_error(self) -> None:
        assert issubclass(ConfigurationError, RestHeadersError)


class TestInvalidHeaderName:
    def test_carries_name(self) -> None:
        err = InvalidHeaderName(name="")
        assert err.name == ""

    def test_str_empty(self) -> None:
        assert str(InvalidHeaderName(name="")) == "Header name must not be empty"

    def test_str_none(self) -> None:
        assert str(InvalidHeaderName()) == "Header name must not be None"

    def test_str_wrong_type(self) -> None:
        assert str(InvalidHeaderName(name=42)) == "Header name must be a str, got int"

    def test_frozen(self) -> None:
        err = InvalidHeaderName(name="")
        with pytest.raises(AttributeError):
            err.name = "X-Foo"  # type: ignore[misc]

    def test_pickle_keeps_name(self) -> None:
        err = pickle.loads(pickle.dumps(InvalidHeaderName(name="")))
        assert err.name == ""
        assert str(err) == "Header name must not be empty"

    def test_raisable(self) -> None:
        with pytest.raises(RestHeadersError, match="must not be empty"):
            raise InvalidHeaderName(name="")
