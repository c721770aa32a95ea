"""Built-in locale bundles.

Locale modules only hold data. Registering one is explicit::

    import minifaker
    from minifaker.locales import load_locale

    load_locale("fr")            # into the process-wide instance
    load_locale("en", my_faker)  # into a specific MiniFaker
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Any, Mapping, Optional

from minifaker.errors import UnknownLocaleError

if TYPE_CHECKING:
    from minifaker.faker import MiniFaker

AVAILABLE_LOCALES = ("en", "fr")


def get_locale_bundle(name: str) -> Mapping[str, Any]:
    """Return the static bundle of built-in locale ``name``.

    Raises:
        UnknownLocaleError: If ``name`` is not a built-in locale.
    """
    if name not in AVAILABLE_LOCALES:
        raise UnknownLocaleError(
            name,
            f"The locale [{name}] is not built in. "
            f"Available locales: {', '.join(AVAILABLE_LOCALES)}",
        )
    module = importlib.import_module(f"{__name__}.{name}")
    bundle: Mapping[str, Any] = module.LOCALE
    return bundle


def load_locale(name: str, faker: Optional[MiniFaker] = None) -> Mapping[str, Any]:
    """Register built-in locale ``name`` into ``faker``.

    Args:
        name: Built-in locale name (see ``AVAILABLE_LOCALES``).
        faker: Target instance; the process-wide instance when omitted.

    Returns:
        The registered bundle.
    """
    bundle = get_locale_bundle(name)
    if faker is None:
        from minifaker import get_faker

        faker = get_faker()
    faker.add_locale(name, bundle)
    return bundle


__all__ = ["AVAILABLE_LOCALES", "get_locale_bundle", "load_locale"]
