"""Enumerations and option models for field generators."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class WordType(str, Enum):
    VERB = "verb"
    PREPOSITION = "preposition"
    NOUN = "noun"
    INTERJECTION = "interjection"
    CONJUNCTION = "conjunction"
    ADVERB = "adverb"
    ADJECTIVE = "adjective"


class MacAddressSeparator(str, Enum):
    NONE = ""
    DOT = "."
    COLON = ":"
    DASH = "-"
    SPACE = " "


class MacAddressTransmission(str, Enum):
    """Bit 0 of the first octet."""

    UNICAST = "unicast"
    MULTICAST = "multicast"


class MacAddressAdministration(str, Enum):
    """Bit 1 of the first octet."""

    LAA = "laa"  # locally administered
    UAA = "uaa"  # globally unique (OUI enforced)


class PlaceImgCategory(str, Enum):
    ANY = "any"
    ANIMALS = "animals"
    ARCHITECTURE = "architecture"
    NATURE = "nature"
    PEOPLE = "people"
    TECH = "tech"


class PlaceImgFilter(str, Enum):
    GRAYSCALE = "grayscale"
    SEPIA = "sepia"


class NumberOptions(BaseModel):
    """Bounds for ``number``; ``min_value > max_value`` inverts the range."""

    min_value: float = Field(default=0, description="Lower bound")
    max_value: float = Field(default=1, description="Upper bound")
    floating: bool = Field(
        default=False,
        description="Return the raw fractional value instead of an int",
    )

    model_config = {"extra": "forbid"}


class UsernameOptions(BaseModel):
    variant: Optional[int] = Field(
        default=None,
        ge=0,
        le=2,
        description=(
            "0: first name + number, 1: first + separator + last, "
            "2: both. Drawn at random when omitted."
        ),
    )
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    model_config = {"extra": "forbid"}


class MacAddressOptions(BaseModel):
    separator: MacAddressSeparator = Field(
        default=MacAddressSeparator.COLON,
        description="Octet separator; '.' groups octets in pairs",
    )
    transmission: Optional[MacAddressTransmission] = Field(
        default=None,
        description="Force the unicast/multicast bit; random when omitted",
    )
    administration: Optional[MacAddressAdministration] = Field(
        default=None,
        description="Force the local/universal bit; random when omitted",
    )

    model_config = {"extra": "forbid"}


class ColorOptions(BaseModel):
    """Fixed channel values; a channel left as ``None`` is drawn at random."""

    r: Optional[int] = Field(default=None, ge=0, le=255)
    g: Optional[int] = Field(default=None, ge=0, le=255)
    b: Optional[int] = Field(default=None, ge=0, le=255)

    model_config = {"extra": "forbid"}


class PlaceImgOptions(BaseModel):
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    category: PlaceImgCategory = PlaceImgCategory.ANY
    filter: Optional[PlaceImgFilter] = None

    model_config = {"extra": "forbid"}


class PlaceholderOptions(BaseModel):
    width: int = Field(gt=0)
    height: Optional[int] = Field(default=None, gt=0)
    back_color: Optional[str] = None
    text_color: Optional[str] = None
    text_value: Optional[str] = None

    model_config = {"extra": "forbid"}
