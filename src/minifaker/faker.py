"""The ``MiniFaker`` context object.

A ``MiniFaker`` owns one locale registry and one random source and exposes
every primitive and field generator as a method. Several instances can
coexist with different locales and seeds.
"""

import logging
from collections.abc import Mapping
from typing import (
    Any,
    Callable,
    Dict,
    List,
    Optional,
    Sequence,
    TypeVar,
    Union,
)

from minifaker import dataset
from minifaker.config import FakerConfig
from minifaker.core.primitives import ObjectElement, RandomSource
from minifaker.core.registry import LocaleBundle, LocaleRegistry
from minifaker.generators import (
    address,
    color,
    image,
    internet,
    job,
    person,
    phone,
    word,
)
from minifaker.generators.schemas import (
    Gender,
    MacAddressAdministration,
    MacAddressSeparator,
    MacAddressTransmission,
    NumberOptions,
    PlaceImgCategory,
    PlaceImgFilter,
    WordType,
)
from minifaker.utils.logging import configure_module_logger

logger = configure_module_logger(__name__, level=logging.INFO)

T = TypeVar("T")


class MiniFaker:
    """Fake data generator bound to its own locale registry and seed.

    Example::

        from minifaker import MiniFaker

        faker = MiniFaker(seed=42)
        faker.add_locale("fr", {"firstNames": ["Léa", "Hugo"]})
        faker.first_name()  # "Léa" or "Hugo"
    """

    def __init__(
        self,
        registry: Optional[LocaleRegistry] = None,
        seed: Optional[int] = None,
        verbose: bool = False,
    ) -> None:
        """
        Args:
            registry: Registry to use; a new empty one when omitted.
            seed: Seed for reproducible output.
            verbose: Log locale registrations at INFO level.
        """
        self.registry = registry if registry is not None else LocaleRegistry(verbose)
        self.random = RandomSource(seed)
        self.verbose = verbose

    @classmethod
    def from_config(cls, config: FakerConfig) -> "MiniFaker":
        """Build an instance, loading ``config.locales`` then applying
        ``config.default_locale``."""
        from minifaker.locales import load_locale

        faker = cls(seed=config.seed, verbose=config.verbose)
        for name in config.locales:
            load_locale(name, faker)
        if config.default_locale:
            faker.set_default_locale(config.default_locale)
        if config.verbose:
            logger.info(
                f"Faker ready: locales={list(faker.registry.locales)}, "
                f"default={faker.default_locale}, seed={config.seed}"
            )
        return faker

    # -- registry -----------------------------------------------------------

    @property
    def default_locale(self) -> Optional[str]:
        return self.registry.default_locale

    def add_locale(self, name: str, bundle: LocaleBundle) -> None:
        """Register a bundle; the first one registered becomes the default."""
        self.registry.add_locale(name, bundle)

    def set_default_locale(self, name: str) -> None:
        self.registry.set_default_locale(name)

    def get_locale_data(self, key: str, locale: Optional[str] = None) -> Any:
        return self.registry.get_locale_data(key, locale=locale)

    # -- primitives ---------------------------------------------------------

    def seed(self, value: Optional[int] = None) -> None:
        self.random.seed(value)

    def number(
        self,
        min_value: float = 0,
        max_value: float = 1,
        floating: bool = False,
    ) -> Union[int, float]:
        """Uniform number in ``[min_value, max_value]``, an int unless ``floating``."""
        options = NumberOptions(
            min_value=min_value, max_value=max_value, floating=floating
        )
        return self.random.number(
            options.min_value, options.max_value, floating=options.floating
        )

    def boolean(self) -> bool:
        return self.random.boolean()

    def array_element(self, seq: Sequence[T]) -> T:
        return self.random.array_element(seq)

    def array(self, count: int, fn: Callable[[int], T]) -> List[T]:
        return self.random.array(count, fn)

    def object_element(self, mapping: Mapping) -> ObjectElement:
        return self.random.object_element(mapping)

    # -- person -------------------------------------------------------------

    def first_name(
        self,
        locale: Optional[str] = None,
        gender: Optional[Union[Gender, str]] = None,
    ) -> str:
        return person.first_name(self, locale=locale, gender=gender)

    def last_name(self, locale: Optional[str] = None) -> str:
        return person.last_name(self, locale=locale)

    def name(
        self,
        locale: Optional[str] = None,
        gender: Optional[Union[Gender, str]] = None,
    ) -> str:
        return person.name(self, locale=locale, gender=gender)

    def username(
        self,
        locale: Optional[str] = None,
        variant: Optional[int] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> str:
        return person.username(
            self,
            locale=locale,
            variant=variant,
            first_name=first_name,
            last_name=last_name,
        )

    def email(
        self,
        locale: Optional[str] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        provider: Optional[str] = None,
        variant: Optional[int] = None,
    ) -> str:
        return person.email(
            self,
            locale=locale,
            first_name=first_name,
            last_name=last_name,
            provider=provider,
            variant=variant,
        )

    # -- address, job, phone ------------------------------------------------

    def city(self, locale: Optional[str] = None) -> str:
        return address.city(self, locale=locale)

    def city_name(self, locale: Optional[str] = None) -> str:
        return address.city_name(self, locale=locale)

    def city_prefix(self, locale: Optional[str] = None) -> str:
        return address.city_prefix(self, locale=locale)

    def city_suffix(self, locale: Optional[str] = None) -> str:
        return address.city_suffix(self, locale=locale)

    def job_title(self, locale: Optional[str] = None) -> str:
        return job.job_title(self, locale=locale)

    def job_descriptor(self, locale: Optional[str] = None) -> str:
        return job.job_descriptor(self, locale=locale)

    def job_area(self, locale: Optional[str] = None) -> str:
        return job.job_area(self, locale=locale)

    def job_type(self, locale: Optional[str] = None) -> str:
        return job.job_type(self, locale=locale)

    def phone_number(
        self,
        locale: Optional[str] = None,
        formats: Optional[Sequence[str]] = None,
    ) -> str:
        return phone.phone_number(self, locale=locale, formats=formats)

    # -- internet, color, word ----------------------------------------------

    def ip(self) -> str:
        return internet.ip(self)

    def ipv6(self) -> str:
        return internet.ipv6(self)

    def port(self) -> int:
        return internet.port(self)

    def mac_address(
        self,
        separator: Union[MacAddressSeparator, str] = MacAddressSeparator.COLON,
        transmission: Optional[Union[MacAddressTransmission, str]] = None,
        administration: Optional[Union[MacAddressAdministration, str]] = None,
    ) -> str:
        return internet.mac_address(
            self,
            separator=separator,
            transmission=transmission,
            administration=administration,
        )

    def domain_suffix(self, locale: Optional[str] = None) -> str:
        return internet.domain_suffix(self, locale=locale)

    def domain_name(self, locale: Optional[str] = None) -> str:
        return internet.domain_name(self, locale=locale)

    def domain_url(self, locale: Optional[str] = None) -> str:
        return internet.domain_url(self, locale=locale)

    def color(
        self,
        r: Optional[int] = None,
        g: Optional[int] = None,
        b: Optional[int] = None,
    ) -> str:
        return color.color(self, r=r, g=g, b=b)

    def word(
        self,
        locale: Optional[str] = None,
        word_type: Optional[Union[WordType, str]] = None,
        predicate: Optional[Callable[[str], bool]] = None,
    ) -> str:
        return word.word(self, locale=locale, word_type=word_type, predicate=predicate)

    # -- images -------------------------------------------------------------

    def image_url_from_placeimg(
        self,
        width: int,
        height: int,
        category: Union[PlaceImgCategory, str] = PlaceImgCategory.ANY,
        filter: Optional[Union[PlaceImgFilter, str]] = None,
    ) -> str:
        return image.image_url_from_placeimg(width, height, category, filter)

    def image_url_from_placeholder(
        self,
        width: int,
        height: Optional[int] = None,
        back_color: Optional[str] = None,
        text_color: Optional[str] = None,
        text_value: Optional[str] = None,
    ) -> str:
        return image.image_url_from_placeholder(
            width, height, back_color, text_color, text_value
        )

    # -- datasets -----------------------------------------------------------

    def records(
        self,
        fields: Sequence[str],
        count: int,
        locale: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        return dataset.records(self, fields, count, locale=locale)

    def to_frame(
        self,
        fields: Sequence[str],
        count: int,
        locale: Optional[str] = None,
        backend: str = "polars",
    ) -> Any:
        return dataset.to_frame(self, fields, count, locale=locale, backend=backend)
