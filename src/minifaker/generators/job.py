"""Job title generators."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from minifaker.faker import MiniFaker


def job_type(faker: "MiniFaker", *, locale: Optional[str] = None) -> str:
    return faker.random.array_element(faker.get_locale_data("jobTypes", locale=locale))


def job_area(faker: "MiniFaker", *, locale: Optional[str] = None) -> str:
    return faker.random.array_element(faker.get_locale_data("jobAreas", locale=locale))


def job_descriptor(faker: "MiniFaker", *, locale: Optional[str] = None) -> str:
    return faker.random.array_element(
        faker.get_locale_data("jobDescriptors", locale=locale)
    )


def job_title(faker: "MiniFaker", *, locale: Optional[str] = None) -> str:
    """``"{descriptor} {area} {type}"``, e.g. ``"Senior Marketing Engineer"``."""
    return (
        f"{job_descriptor(faker, locale=locale)} "
        f"{job_area(faker, locale=locale)} "
        f"{job_type(faker, locale=locale)}"
    )
