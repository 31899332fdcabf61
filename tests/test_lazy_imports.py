"""Tests for restheaders.__init__ — lazy exports cover all public names."""

import pytest

import restheaders


@pytest.mark.parametrize("name", restheaders.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(restheaders, name)
    assert obj is not None, f"restheaders.{name} resolved to None"


def test_top_level_names_match_modules() -> None:
    from restheaders.headers import HttpHeaders

    assert restheaders.HttpHeaders is HttpHeaders


def test_unknown_name_raises_attribute_error() -> None:
    """Accessing an unregistered name raises AttributeError."""
    with pytest.raises(AttributeError, match="no attribute"):
        restheaders.__getattr__("ThisDoesNotExist")
