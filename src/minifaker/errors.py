"""Exception types raised by minifaker.

Every error derives from ``MinifakerError`` and from the closest builtin
exception, so callers may catch either ``MinifakerError`` or e.g.
``LookupError``.
"""

from typing import Any, Optional


class MinifakerError(Exception):
    """Base class for all minifaker errors."""


class NoDefaultLocaleError(MinifakerError, LookupError):
    """Raised when locale data is requested before any locale is registered."""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(
            message or "No default locale defined. Register at least one locale!"
        )


class UnknownLocaleError(MinifakerError, LookupError):
    """Raised when a locale name is not registered (or not built in)."""

    def __init__(self, locale: str, message: Optional[str] = None) -> None:
        self.locale = locale
        super().__init__(
            message or f"The locale [{locale}] is not registered or supported."
        )


class MissingFieldError(MinifakerError, LookupError):
    """Raised when a locale bundle has no data for the requested field key."""

    def __init__(self, locale: str, key: str, message: Optional[str] = None) -> None:
        self.locale = locale
        self.key = key
        super().__init__(
            message
            or f"The locale [{locale}] has no data for [{key}]. "
            "Most likely not implemented yet."
        )


class NotAnObjectError(MinifakerError, TypeError):
    """Raised when a key/value mapping was expected."""

    def __init__(self, value: Any, message: Optional[str] = None) -> None:
        self.value = value
        super().__init__(
            message or f"Expected a mapping, got {type(value).__name__}."
        )


class EmptyInputError(MinifakerError, ValueError):
    """Raised when selecting from an empty sequence or mapping."""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or "Cannot select an element from empty input.")
