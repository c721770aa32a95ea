"""Phone number generator."""

from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from minifaker.faker import MiniFaker

PLACEHOLDER = "#"


def phone_number(
    faker: "MiniFaker",
    *,
    locale: Optional[str] = None,
    formats: Optional[Sequence[str]] = None,
) -> str:
    """
    Fill a phone format template with random digits.

    Every ``#`` in the chosen template is replaced, left to right, by an
    independently drawn digit 0-9. Other characters are kept.

    Args:
        faker: Owning instance.
        locale: Locale whose ``phoneFormats`` are used when ``formats`` is
            not given.
        formats: Templates to choose from, e.g. ``["## ## ## ## ##"]``.

    Returns:
        The formatted phone number.
    """
    if formats is None:
        formats = faker.get_locale_data("phoneFormats", locale=locale)
    template = faker.random.array_element(formats)
    return "".join(
        str(faker.random.number(max_value=9)) if char == PLACEHOLDER else char
        for char in template
    )
