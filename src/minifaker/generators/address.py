"""Address generators."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from minifaker.faker import MiniFaker


def city_name(faker: "MiniFaker", *, locale: Optional[str] = None) -> str:
    return faker.random.array_element(faker.get_locale_data("cityNames", locale=locale))


def city_prefix(faker: "MiniFaker", *, locale: Optional[str] = None) -> str:
    return faker.random.array_element(
        faker.get_locale_data("cityPrefixes", locale=locale)
    )


def city_suffix(faker: "MiniFaker", *, locale: Optional[str] = None) -> str:
    return faker.random.array_element(
        faker.get_locale_data("citySuffixes", locale=locale)
    )


def city(faker: "MiniFaker", *, locale: Optional[str] = None) -> str:
    """
    Compose a city from ``cityPrefixes``, ``cityNames`` and ``citySuffixes``.

    One of ``"{prefix} {name}"``, ``"{name}{suffix}"`` or
    ``"{prefix} {name}{suffix}"`` is chosen at random. The locale must
    provide all three tables.
    """
    prefix = city_prefix(faker, locale=locale)
    base = city_name(faker, locale=locale)
    suffix = city_suffix(faker, locale=locale)
    formats = (
        f"{prefix} {base}",
        f"{base}{suffix}",
        f"{prefix} {base}{suffix}",
    )
    return faker.random.array_element(formats)
