"""Locale registry and locale data resolution.

A registry maps locale names (``"en"``, ``"fr"``) to bundles: mappings
from field key (``"firstNames"``, ``"phoneFormats"``) to the sequence of
values generators draw from. It also tracks the default locale used when a
caller does not name one.
"""

import logging
import threading
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, Optional, Tuple

from minifaker.errors import (
    MissingFieldError,
    NoDefaultLocaleError,
    NotAnObjectError,
    UnknownLocaleError,
)
from minifaker.utils.logging import configure_module_logger

logger = configure_module_logger(__name__, level=logging.INFO)

LocaleBundle = Mapping[str, Any]


def _freeze(bundle: LocaleBundle) -> Dict[str, Any]:
    return {
        key: tuple(value) if isinstance(value, list) else value
        for key, value in bundle.items()
    }


class LocaleRegistry:
    """Thread-safe mapping of locale name to bundle, plus a default locale.

    Bundles are stored as read-only views of a copy whose list values are
    frozen into tuples, so neither the dict passed to ``add_locale`` nor a
    table returned by ``get_locale_data`` can change a registered bundle.
    Locales are never removed.
    """

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose
        self._locales: Dict[str, LocaleBundle] = {}
        self._default: Optional[str] = None
        self._lock = threading.RLock()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._locales

    def __len__(self) -> int:
        with self._lock:
            return len(self._locales)

    @property
    def default_locale(self) -> Optional[str]:
        with self._lock:
            return self._default

    @property
    def locales(self) -> Tuple[str, ...]:
        """Registered locale names, in registration order."""
        with self._lock:
            return tuple(self._locales)

    def _log(self, message: str) -> None:
        if self.verbose:
            logger.info(message)
        else:
            logger.debug(message)

    def add_locale(self, name: str, bundle: LocaleBundle) -> None:
        """
        Register (or replace) the bundle for ``name``.

        The first locale added to an empty registry also becomes the
        default locale. When several locales are registered at start-up,
        their registration order therefore decides the default; call
        ``set_default_locale`` to pin it explicitly.

        Args:
            name: Locale identifier (e.g. ``"fr"``).
            bundle: Mapping of field key to values.

        Raises:
            ValueError: If ``name`` is empty.
            NotAnObjectError: If ``bundle`` is not a mapping.
        """
        if not name:
            raise ValueError("Locale name must be a non-empty string.")
        if not isinstance(bundle, Mapping):
            raise NotAnObjectError(bundle)

        with self._lock:
            was_empty = not self._locales
            replaced = name in self._locales
            self._locales[name] = MappingProxyType(_freeze(bundle))
            if was_empty:
                self._default = name

        self._log(
            f"{'Replaced' if replaced else 'Registered'} locale "
            f"[bold]{name}[/bold] ({len(bundle)} fields)"
        )
        if was_empty:
            self._log(f"Default locale set to [bold]{name}[/bold]")

    def set_default_locale(self, name: str) -> None:
        """
        Point the default locale at an already registered locale.

        Raises:
            UnknownLocaleError: If ``name`` is not registered.
        """
        with self._lock:
            if name not in self._locales:
                raise UnknownLocaleError(name)
            self._default = name
        self._log(f"Default locale set to [bold]{name}[/bold]")

    def get_bundle(self, name: str) -> LocaleBundle:
        """Return the registered bundle for ``name``."""
        with self._lock:
            try:
                return self._locales[name]
            except KeyError:
                raise UnknownLocaleError(name) from None

    def get_locale_data(self, key: str, locale: Optional[str] = None) -> Any:
        """
        Resolve field ``key`` in ``locale`` or in the default locale.

        A default locale is required even when ``locale`` is given, so no
        call can succeed against a registry that was never populated.
        Present-but-empty values are returned as-is.

        Args:
            key: Field key (e.g. ``"firstNames"``).
            locale: Locale to read from; the default locale when omitted.

        Returns:
            The stored value, unchecked.

        Raises:
            NoDefaultLocaleError: If no locale was ever registered.
            UnknownLocaleError: If the effective locale is not registered.
            MissingFieldError: If ``key`` is absent or ``None``.
        """
        with self._lock:
            if self._default is None:
                raise NoDefaultLocaleError()
            effective = locale or self._default
            bundle = self._locales.get(effective)

        if bundle is None:
            raise UnknownLocaleError(effective)
        value = bundle.get(key)
        if value is None:
            raise MissingFieldError(effective, key)
        return value
