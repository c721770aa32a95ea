"""Network generators: IP addresses, ports, MAC addresses and domains."""

from typing import TYPE_CHECKING, Optional, Union

from minifaker.generators.person import first_name
from minifaker.generators.schemas import (
    MacAddressAdministration,
    MacAddressOptions,
    MacAddressSeparator,
    MacAddressTransmission,
    WordType,
)
from minifaker.generators.word import word

if TYPE_CHECKING:
    from minifaker.faker import MiniFaker

MULTICAST_BIT = 1 << 0
LOCAL_BIT = 1 << 1


def ip(faker: "MiniFaker") -> str:
    """Dotted IPv4 address, each octet 0-255."""
    octets = faker.random.array(4, lambda _: str(faker.random.number(max_value=255)))
    return ".".join(octets)


def ipv6(faker: "MiniFaker") -> str:
    """Eight unpadded lowercase hex groups (0-ffff) joined by ``:``."""
    groups = faker.random.array(
        8, lambda _: format(faker.random.number(max_value=65535), "x")
    )
    return ":".join(groups)


def port(faker: "MiniFaker") -> int:
    return faker.random.number(max_value=65535)


def _set_bit(value: int, bit: int, enabled: bool) -> int:
    return value | bit if enabled else value & ~bit


def mac_address(
    faker: "MiniFaker",
    *,
    separator: Union[MacAddressSeparator, str] = MacAddressSeparator.COLON,
    transmission: Optional[Union[MacAddressTransmission, str]] = None,
    administration: Optional[Union[MacAddressAdministration, str]] = None,
) -> str:
    """
    Generate a MAC address.

    Bits 0 (multicast) and 1 (locally administered) of the first octet are
    forced when ``transmission``/``administration`` are given and left
    random otherwise.

    Args:
        faker: Owning instance.
        separator: ``":"`` (default), ``"-"``, ``" "`` or ``""`` join every
            octet; ``"."`` joins pairs of octets (``aabb.ccdd.eeff``).
        transmission: ``"unicast"`` or ``"multicast"``.
        administration: ``"uaa"`` (globally unique) or ``"laa"`` (local).

    Returns:
        Lowercase hex MAC address.
    """
    options = MacAddressOptions(
        separator=separator,
        transmission=transmission,
        administration=administration,
    )

    def octet(index: int) -> str:
        value = faker.random.number(max_value=255)
        if index == 0:
            if options.transmission is not None:
                value = _set_bit(
                    value,
                    MULTICAST_BIT,
                    options.transmission is MacAddressTransmission.MULTICAST,
                )
            if options.administration is not None:
                value = _set_bit(
                    value,
                    LOCAL_BIT,
                    options.administration is MacAddressAdministration.LAA,
                )
        return f"{value:02x}"

    octets = faker.random.array(6, octet)

    if options.separator is MacAddressSeparator.DOT:
        pairs = [octets[i] + octets[i + 1] for i in range(0, len(octets), 2)]
        return MacAddressSeparator.DOT.value.join(pairs)
    return options.separator.value.join(octets)


def domain_suffix(faker: "MiniFaker", *, locale: Optional[str] = None) -> str:
    return faker.random.array_element(
        faker.get_locale_data("domainSuffixes", locale=locale)
    )


def domain_name(faker: "MiniFaker", *, locale: Optional[str] = None) -> str:
    """A lowercased noun or first name followed by a domain suffix."""
    label = faker.random.array_element(
        [
            word(faker, locale=locale, word_type=WordType.NOUN),
            first_name(faker, locale=locale),
        ]
    )
    return f"{label.lower()}.{domain_suffix(faker, locale=locale)}"


def domain_url(faker: "MiniFaker", *, locale: Optional[str] = None) -> str:
    return f"https://{domain_name(faker, locale=locale)}"
