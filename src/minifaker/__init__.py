"""minifaker: small locale-driven fake data generator.

The module-level functions delegate to a lazily created process-wide
``MiniFaker``::

    import minifaker
    from minifaker.locales import load_locale

    load_locale("fr")          # first locale registered becomes the default
    minifaker.first_name()     # e.g. "Léa"
    minifaker.mac_address(separator=".")

Use ``MiniFaker`` directly for isolated registries or reproducible seeds.
"""

import functools
from typing import Any, Callable, Optional

from minifaker._version import __version__
from minifaker.config import FakerConfig, load_config
from minifaker.core.primitives import ObjectElement
from minifaker.errors import (
    EmptyInputError,
    MinifakerError,
    MissingFieldError,
    NoDefaultLocaleError,
    NotAnObjectError,
    UnknownLocaleError,
)
from minifaker.faker import MiniFaker
from minifaker.generators.schemas import (
    Gender,
    MacAddressAdministration,
    MacAddressSeparator,
    MacAddressTransmission,
    PlaceImgCategory,
    PlaceImgFilter,
    WordType,
)

_FAKER_INSTANCE: Optional[MiniFaker] = None


def get_faker() -> MiniFaker:
    """Get or create the process-wide ``MiniFaker`` instance.

    The instance is built from ``load_config()`` on first use, so
    ``MINIFAKER_*`` variables and ``[tool.minifaker]`` apply.
    """
    global _FAKER_INSTANCE

    if _FAKER_INSTANCE is None:
        _FAKER_INSTANCE = MiniFaker.from_config(load_config())
    return _FAKER_INSTANCE


def reset_faker() -> None:
    """Drop the process-wide instance; the next call rebuilds it."""
    global _FAKER_INSTANCE
    _FAKER_INSTANCE = None


def _delegate(name: str) -> Callable[..., Any]:
    method = getattr(MiniFaker, name)

    @functools.wraps(method)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return getattr(get_faker(), name)(*args, **kwargs)

    # drop __wrapped__ so inspect.signature() does not report ``self``
    del wrapper.__wrapped__
    return wrapper


add_locale = _delegate("add_locale")
set_default_locale = _delegate("set_default_locale")
get_locale_data = _delegate("get_locale_data")
seed = _delegate("seed")

number = _delegate("number")
boolean = _delegate("boolean")
array_element = _delegate("array_element")
array = _delegate("array")
object_element = _delegate("object_element")

first_name = _delegate("first_name")
last_name = _delegate("last_name")
name = _delegate("name")
username = _delegate("username")
email = _delegate("email")
city = _delegate("city")
city_name = _delegate("city_name")
city_prefix = _delegate("city_prefix")
city_suffix = _delegate("city_suffix")
job_title = _delegate("job_title")
job_descriptor = _delegate("job_descriptor")
job_area = _delegate("job_area")
job_type = _delegate("job_type")
phone_number = _delegate("phone_number")
ip = _delegate("ip")
ipv6 = _delegate("ipv6")
port = _delegate("port")
mac_address = _delegate("mac_address")
domain_suffix = _delegate("domain_suffix")
domain_name = _delegate("domain_name")
domain_url = _delegate("domain_url")
color = _delegate("color")
word = _delegate("word")
image_url_from_placeimg = _delegate("image_url_from_placeimg")
image_url_from_placeholder = _delegate("image_url_from_placeholder")
records = _delegate("records")
to_frame = _delegate("to_frame")

__all__ = [
    "__version__",
    "EmptyInputError",
    "FakerConfig",
    "Gender",
    "MacAddressAdministration",
    "MacAddressSeparator",
    "MacAddressTransmission",
    "MiniFaker",
    "MinifakerError",
    "MissingFieldError",
    "NoDefaultLocaleError",
    "NotAnObjectError",
    "ObjectElement",
    "PlaceImgCategory",
    "PlaceImgFilter",
    "UnknownLocaleError",
    "WordType",
    "add_locale",
    "array",
    "array_element",
    "boolean",
    "city",
    "city_name",
    "city_prefix",
    "city_suffix",
    "color",
    "domain_name",
    "domain_suffix",
    "domain_url",
    "email",
    "first_name",
    "get_faker",
    "get_locale_data",
    "image_url_from_placeholder",
    "image_url_from_placeimg",
    "ip",
    "ipv6",
    "job_area",
    "job_descriptor",
    "job_title",
    "job_type",
    "last_name",
    "load_config",
    "mac_address",
    "name",
    "number",
    "object_element",
    "phone_number",
    "port",
    "records",
    "reset_faker",
    "seed",
    "set_default_locale",
    "to_frame",
    "username",
    "word",
]
