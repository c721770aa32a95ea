"""Test cases for built-in locales."""

from unittest.mock import patch

import pytest

from minifaker import MiniFaker
from minifaker.dataset import FIELD_GENERATORS, generate_field
from minifaker.errors import MissingFieldError, UnknownLocaleError
from minifaker.locales import AVAILABLE_LOCALES, get_locale_bundle, load_locale


class TestGetLocaleBundle:
    """Test cases for get_locale_bundle."""

    def test_available_locales(self) -> None:
        assert AVAILABLE_LOCALES == ("en", "fr")

    @pytest.mark.parametrize("name", AVAILABLE_LOCALES)
    def test_bundles_hold_string_sequences(self, name: str) -> None:
        bundle = get_locale_bundle(name)
        assert bundle
        for key, values in bundle.items():
            assert values, f"{name}.{key} is empty"
            assert all(isinstance(value, str) for value in values)

    def test_unknown_locale(self) -> None:
        with pytest.raises(UnknownLocaleError) as exc_info:
            get_locale_bundle("xx")
        assert exc_info.value.locale == "xx"
        assert "en, fr" in str(exc_info.value)


class TestLoadLocale:
    """Test cases for load_locale."""

    def test_loads_into_given_faker(self) -> None:
        faker = MiniFaker()

        bundle = load_locale("fr", faker)

        assert faker.default_locale == "fr"
        assert faker.first_name() in bundle["firstNames"]

    def test_load_order_decides_default(self) -> None:
        faker = MiniFaker()
        load_locale("en", faker)
        load_locale("fr", faker)

        assert faker.default_locale == "en"
        assert faker.registry.locales == ("en", "fr")

    def test_defaults_to_process_wide_faker(self) -> None:
        faker = MiniFaker()
        with patch("minifaker.get_faker", return_value=faker) as mock_get:
            load_locale("en")

        mock_get.assert_called_once()
        assert "en" in faker.registry

    def test_builtin_data_shared_safely(self) -> None:
        """One instance cannot corrupt the built-in tables of another."""
        first = MiniFaker()
        load_locale("en", first)
        with pytest.raises(AttributeError):
            first.get_locale_data("firstNames").clear()

        second = MiniFaker()
        load_locale("en", second)

        assert second.get_locale_data("firstNames")
        assert get_locale_bundle("en")["firstNames"]

    def test_unknown_locale_registers_nothing(self) -> None:
        faker = MiniFaker()
        with pytest.raises(UnknownLocaleError):
            load_locale("xx", faker)
        assert len(faker.registry) == 0


class TestBuiltInCoverage:
    """The built-in data supports the generators."""

    @pytest.mark.parametrize("field", sorted(FIELD_GENERATORS))
    def test_en_supports_every_field(self, field: str) -> None:
        faker = MiniFaker(seed=1)
        load_locale("en", faker)
        assert generate_field(faker, field) not in (None, "")

    def test_fr_names_and_phones(self) -> None:
        faker = MiniFaker(seed=1)
        load_locale("fr", faker)

        assert faker.name(gender="female")
        assert faker.phone_number()
        assert faker.city_name()

    def test_fr_has_no_job_data(self) -> None:
        faker = MiniFaker()
        load_locale("fr", faker)
        with pytest.raises(MissingFieldError):
            faker.job_title()
