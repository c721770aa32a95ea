"""Core building blocks: random primitives and the locale registry."""

from .primitives import ObjectElement, RandomSource
from .registry import LocaleBundle, LocaleRegistry

__all__ = [
    "LocaleBundle",
    "LocaleRegistry",
    "ObjectElement",
    "RandomSource",
]
