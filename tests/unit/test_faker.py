"""Test cases for the MiniFaker context object."""

import pytest
from pydantic import ValidationError

from minifaker import FakerConfig, MiniFaker
from minifaker.core.registry import LocaleRegistry
from minifaker.errors import NoDefaultLocaleError, UnknownLocaleError

FR_BUNDLE = {
    "firstNames": ["Léa", "Hugo", "Emma"],
    "lastNames": ["Martin", "Petit"],
    "phoneFormats": ["06########"],
    "freeEmails": ["mail.fr"],
}


class TestConstruction:
    """Test cases for MiniFaker initialization."""

    def test_new_instance_is_empty(self) -> None:
        faker = MiniFaker()
        assert faker.default_locale is None
        assert len(faker.registry) == 0

    def test_shared_registry(self) -> None:
        registry = LocaleRegistry()
        registry.add_locale("fr", FR_BUNDLE)

        faker = MiniFaker(registry=registry)

        assert faker.registry is registry
        assert faker.first_name() in FR_BUNDLE["firstNames"]

    def test_instances_are_isolated(self) -> None:
        a = MiniFaker()
        b = MiniFaker()
        a.add_locale("fr", FR_BUNDLE)

        assert a.default_locale == "fr"
        with pytest.raises(NoDefaultLocaleError):
            b.first_name()


class TestFromConfig:
    """Test cases for MiniFaker.from_config."""

    def test_loads_locales_in_order(self) -> None:
        faker = MiniFaker.from_config(FakerConfig(locales=["fr", "en"]))

        assert faker.registry.locales == ("fr", "en")
        assert faker.default_locale == "fr"

    def test_default_locale_applied_last(self) -> None:
        config = FakerConfig(locales=["fr", "en"], default_locale="en")
        faker = MiniFaker.from_config(config)
        assert faker.default_locale == "en"

    def test_default_locale_must_be_loaded(self) -> None:
        with pytest.raises(UnknownLocaleError):
            MiniFaker.from_config(FakerConfig(locales=["fr"], default_locale="en"))

    def test_unknown_builtin_locale(self) -> None:
        with pytest.raises(UnknownLocaleError):
            MiniFaker.from_config(FakerConfig(locales=["xx"]))

    def test_seed_is_reproducible(self) -> None:
        config = FakerConfig(locales=["en"], seed=42)
        a = MiniFaker.from_config(config)
        b = MiniFaker.from_config(config)

        assert [a.name() for _ in range(10)] == [b.name() for _ in range(10)]
        assert a.ip() == b.ip()

    def test_verbose_propagates(self) -> None:
        faker = MiniFaker.from_config(FakerConfig(verbose=True))
        assert faker.verbose is True
        assert faker.registry.verbose is True


class TestDelegation:
    """MiniFaker methods delegate to primitives and generators."""

    @pytest.fixture
    def faker(self) -> MiniFaker:
        faker = MiniFaker(seed=10)
        faker.add_locale("fr", FR_BUNDLE)
        return faker

    def test_first_registration_sets_default(self, faker: MiniFaker) -> None:
        assert faker.default_locale == "fr"
        assert faker.first_name() in FR_BUNDLE["firstNames"]

    def test_set_default_locale(self, faker: MiniFaker) -> None:
        faker.add_locale("en", {"firstNames": ["Ann"]})
        faker.set_default_locale("en")
        assert faker.first_name() == "Ann"

    def test_get_locale_data(self, faker: MiniFaker) -> None:
        assert faker.get_locale_data("lastNames") == ("Martin", "Petit")

    def test_number_validates_options(self, faker: MiniFaker) -> None:
        with pytest.raises(ValidationError):
            faker.number(min_value="low")  # type: ignore[arg-type]

    def test_number_bounds(self, faker: MiniFaker) -> None:
        for _ in range(100):
            assert 1 <= faker.number(min_value=1, max_value=6) <= 6

    def test_primitives(self, faker: MiniFaker) -> None:
        assert faker.array(3, lambda i: i * 2) == [0, 2, 4]
        assert faker.array_element(["x"]) == "x"
        assert faker.object_element({"k": "v"}) == ("k", "v")
        assert isinstance(faker.boolean(), bool)

    def test_seed_method(self, faker: MiniFaker) -> None:
        faker.seed(5)
        first = [faker.number(max_value=100) for _ in range(5)]
        faker.seed(5)
        assert [faker.number(max_value=100) for _ in range(5)] == first

    def test_generators(self, faker: MiniFaker) -> None:
        assert faker.phone_number().startswith("06")
        assert faker.last_name() in FR_BUNDLE["lastNames"]
        assert faker.username(variant=1, first_name="a", last_name="b") in {
            "a.b",
            "a_b",
        }
        assert faker.email(provider="x.fr", variant=1).endswith("@x.fr")
        assert faker.color(r=0, g=0, b=0) == "#000000"
        assert len(faker.mac_address(separator="")) == 12
        assert faker.image_url_from_placeimg(1, 2) == "https://placeimg.com/1/2/any"
        assert faker.image_url_from_placeholder(3) == "https://via.placeholder.com/3"
