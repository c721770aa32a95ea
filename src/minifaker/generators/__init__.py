"""Field generators composed from locale data and random primitives."""

from .schemas import (
    Gender,
    MacAddressAdministration,
    MacAddressSeparator,
    MacAddressTransmission,
    PlaceImgCategory,
    PlaceImgFilter,
    WordType,
)

__all__ = [
    "Gender",
    "MacAddressAdministration",
    "MacAddressSeparator",
    "MacAddressTransmission",
    "PlaceImgCategory",
    "PlaceImgFilter",
    "WordType",
]
