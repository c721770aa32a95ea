"""Configuration for the process-wide faker instance.

Priority order (highest to lowest):
1. Runtime Parameters (passed directly to ``load_config``)
2. Environment Variables (prefixed with MINIFAKER_)
3. Project Config ([tool.minifaker] in pyproject.toml)
4. Defaults (hardcoded fallbacks)
"""

import os
from pathlib import Path
from typing import Any, List, Optional

from pydantic import BaseModel, Field

_TRUE_VALUES = ("true", "1", "yes", "on")


class FakerConfig(BaseModel):
    """Settings used to build a ``MiniFaker`` instance."""

    default_locale: Optional[str] = Field(
        default=None,
        description=(
            "Locale made default after loading; the first loaded locale "
            "is the default otherwise"
        ),
    )

    locales: List[str] = Field(
        default_factory=list,
        description="Built-in locales to register, in order",
    )

    seed: Optional[int] = Field(
        default=None,
        description="Seed for reproducible output",
    )

    verbose: bool = Field(
        default=False,
        description="Log locale registrations at INFO level",
    )

    model_config = {
        "extra": "forbid",
    }


def _load_from_pyproject_toml() -> dict[str, Any]:
    """Load configuration from the [tool.minifaker] section in pyproject.toml.

    The nearest ``pyproject.toml`` walking up from the working directory
    wins; unreadable files are skipped.

    Returns:
        Dictionary with config values, or empty dict if not found.
    """
    try:
        import tomllib  # Python 3.11+
    except ImportError:
        try:
            import tomli as tomllib  # noqa: F401
        except ImportError:
            return {}

    current_dir = Path.cwd()
    for path in [current_dir] + list(current_dir.parents):
        pyproject_path = path / "pyproject.toml"
        if not pyproject_path.exists():
            continue
        try:
            with open(pyproject_path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError):
            continue
        section = data.get("tool", {}).get("minifaker")
        if section is not None:
            return dict(section)

    return {}


def _load_from_env() -> dict[str, Any]:
    """Load configuration from environment variables (prefixed with MINIFAKER_).

    ``MINIFAKER_LOCALES`` is a comma-separated list.
    """
    config: dict[str, Any] = {}

    default_locale = os.getenv("MINIFAKER_DEFAULT_LOCALE")
    if default_locale:
        config["default_locale"] = default_locale

    locales = os.getenv("MINIFAKER_LOCALES")
    if locales is not None:
        config["locales"] = [name.strip() for name in locales.split(",") if name.strip()]

    seed = os.getenv("MINIFAKER_SEED")
    if seed:
        config["seed"] = seed

    verbose = os.getenv("MINIFAKER_VERBOSE")
    if verbose is not None:
        config["verbose"] = verbose.lower() in _TRUE_VALUES

    return config


def load_config(
    default_locale: Optional[str] = None,
    locales: Optional[List[str]] = None,
    seed: Optional[int] = None,
    verbose: Optional[bool] = None,
) -> FakerConfig:
    """Load configuration with hierarchical priority.

    Args:
        default_locale: Locale to make default.
        locales: Built-in locales to register.
        seed: Random seed.
        verbose: Log registrations at INFO level.

    Returns:
        FakerConfig instance with merged configuration.

    Raises:
        pydantic.ValidationError: If a merged value is invalid (e.g. a
            non-integer MINIFAKER_SEED).
    """
    runtime_config: dict[str, Any] = {}
    if default_locale is not None:
        runtime_config["default_locale"] = default_locale
    if locales is not None:
        runtime_config["locales"] = locales
    if seed is not None:
        runtime_config["seed"] = seed
    if verbose is not None:
        runtime_config["verbose"] = verbose

    merged_config = FakerConfig().model_dump()
    merged_config.update(_load_from_pyproject_toml())
    merged_config.update(_load_from_env())
    merged_config.update(runtime_config)

    return FakerConfig(**merged_config)
