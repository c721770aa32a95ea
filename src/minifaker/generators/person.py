"""Person generators: names, usernames and email addresses."""

from typing import TYPE_CHECKING, Optional, Union

from minifaker.generators.schemas import Gender, UsernameOptions

if TYPE_CHECKING:
    from minifaker.faker import MiniFaker

_USERNAME_SEPARATORS = (".", "_")


def first_name(
    faker: "MiniFaker",
    *,
    locale: Optional[str] = None,
    gender: Optional[Union[Gender, str]] = None,
) -> str:
    """
    Pick a first name.

    Args:
        faker: Owning instance.
        locale: Locale to draw from (default locale when omitted).
        gender: Restrict to ``femaleFirstNames``/``maleFirstNames``;
            ``firstNames`` is used when omitted.
    """
    if gender is None:
        key = "firstNames"
    elif Gender(gender) is Gender.FEMALE:
        key = "femaleFirstNames"
    else:
        key = "maleFirstNames"
    return faker.random.array_element(faker.get_locale_data(key, locale=locale))


def last_name(faker: "MiniFaker", *, locale: Optional[str] = None) -> str:
    return faker.random.array_element(faker.get_locale_data("lastNames", locale=locale))


def name(
    faker: "MiniFaker",
    *,
    locale: Optional[str] = None,
    gender: Optional[Union[Gender, str]] = None,
) -> str:
    """Full name: ``"{first} {last}"``."""
    return (
        f"{first_name(faker, locale=locale, gender=gender)} "
        f"{last_name(faker, locale=locale)}"
    )


def username(
    faker: "MiniFaker",
    *,
    locale: Optional[str] = None,
    variant: Optional[int] = None,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
) -> str:
    """
    Build a username from a first and last name.

    Args:
        faker: Owning instance.
        locale: Locale used for names that are not supplied.
        variant: 0 appends a 0-99 suffix to the first name, 1 joins first
            and last name with ``.`` or ``_``, 2 does both. Drawn from 0-2
            when omitted.
        first_name: Fixed first name.
        last_name: Fixed last name.

    Raises:
        pydantic.ValidationError: If ``variant`` is outside 0-2.
    """
    options = UsernameOptions(
        variant=variant, first_name=first_name, last_name=last_name
    )
    first = options.first_name or faker.first_name(locale=locale)
    last = options.last_name or faker.last_name(locale=locale)
    chosen = (
        options.variant
        if options.variant is not None
        else faker.random.number(max_value=2)
    )

    if chosen == 0:
        return f"{first}{faker.random.number(max_value=99)}"
    separator = faker.random.array_element(_USERNAME_SEPARATORS)
    if chosen == 1:
        return f"{first}{separator}{last}"
    return f"{first}{separator}{last}{faker.random.number(max_value=99)}"


def email(
    faker: "MiniFaker",
    *,
    locale: Optional[str] = None,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    provider: Optional[str] = None,
    variant: Optional[int] = None,
) -> str:
    """
    Build ``username@provider``.

    ``freeEmails`` is resolved even when ``provider`` and both names are
    given, so an unusable locale always raises.
    """
    free_emails = faker.get_locale_data("freeEmails", locale=locale)
    if not provider:
        provider = faker.random.array_element(free_emails)
    user = username(
        faker,
        locale=locale,
        variant=variant,
        first_name=first_name,
        last_name=last_name,
    )
    return f"{user}@{provider}"
