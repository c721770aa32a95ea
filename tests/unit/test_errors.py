"""Test cases for the exception hierarchy."""

import pytest

from minifaker.errors import (
    EmptyInputError,
    MinifakerError,
    MissingFieldError,
    NoDefaultLocaleError,
    NotAnObjectError,
    UnknownLocaleError,
)


class TestHierarchy:
    """Every error is a MinifakerError and a matching builtin."""

    @pytest.mark.parametrize(
        "error, builtin",
        [
            (NoDefaultLocaleError(), LookupError),
            (UnknownLocaleError("fr"), LookupError),
            (MissingFieldError("fr", "firstNames"), LookupError),
            (NotAnObjectError([]), TypeError),
            (EmptyInputError(), ValueError),
        ],
    )
    def test_bases(self, error: Exception, builtin: type) -> None:
        assert isinstance(error, MinifakerError)
        assert isinstance(error, builtin)


class TestMessages:
    """Test cases for default and custom messages."""

    def test_no_default_locale_message(self) -> None:
        assert "No default locale" in str(NoDefaultLocaleError())

    def test_unknown_locale_attributes(self) -> None:
        error = UnknownLocaleError("de")
        assert error.locale == "de"
        assert str(error) == "The locale [de] is not registered or supported."

    def test_missing_field_attributes(self) -> None:
        error = MissingFieldError("fr", "jobTypes")
        assert error.locale == "fr"
        assert error.key == "jobTypes"
        assert "[fr]" in str(error)
        assert "[jobTypes]" in str(error)

    def test_not_an_object_names_type(self) -> None:
        error = NotAnObjectError([1])
        assert error.value == [1]
        assert str(error) == "Expected a mapping, got list."

    def test_custom_message(self) -> None:
        error = UnknownLocaleError("xx", "Custom error message")
        assert str(error) == "Custom error message"
        assert error.locale == "xx"
