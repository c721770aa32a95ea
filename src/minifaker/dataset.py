"""Multi-field fake datasets, as records or as a dataframe."""

import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Sequence

import narwhals as nw

from minifaker.generators import address, color, internet, job, person, phone, word
from minifaker.utils.logging import configure_module_logger

if TYPE_CHECKING:
    from minifaker.faker import MiniFaker

logger = configure_module_logger(__name__, level=logging.INFO)

FIELD_GENERATORS: Dict[str, Callable[..., Any]] = {
    "first_name": person.first_name,
    "last_name": person.last_name,
    "name": person.name,
    "username": person.username,
    "email": person.email,
    "phone_number": phone.phone_number,
    "city": address.city,
    "city_name": address.city_name,
    "city_prefix": address.city_prefix,
    "city_suffix": address.city_suffix,
    "job_title": job.job_title,
    "job_descriptor": job.job_descriptor,
    "job_area": job.job_area,
    "job_type": job.job_type,
    "word": word.word,
    "domain_name": internet.domain_name,
    "domain_suffix": internet.domain_suffix,
    "domain_url": internet.domain_url,
    "ip": internet.ip,
    "ipv6": internet.ipv6,
    "port": internet.port,
    "mac_address": internet.mac_address,
    "color": color.color,
}

# Generators that take no ``locale`` keyword
LOCALE_FREE_FIELDS = frozenset({"ip", "ipv6", "port", "mac_address", "color"})


def _check_fields(fields: Sequence[str]) -> None:
    unknown = [field for field in fields if field not in FIELD_GENERATORS]
    if unknown:
        available = ", ".join(sorted(FIELD_GENERATORS))
        raise ValueError(
            f"Unknown field(s): {', '.join(unknown)}. Available fields: {available}"
        )


def generate_field(
    faker: "MiniFaker", field: str, locale: Optional[str] = None
) -> Any:
    """Generate one value of ``field`` (a name from ``FIELD_GENERATORS``)."""
    _check_fields([field])
    generator = FIELD_GENERATORS[field]
    if field in LOCALE_FREE_FIELDS:
        return generator(faker)
    return generator(faker, locale=locale)


def records(
    faker: "MiniFaker",
    fields: Sequence[str],
    count: int,
    locale: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    Generate ``count`` rows with one value per field.

    Args:
        faker: Owning instance.
        fields: Field names, e.g. ``["first_name", "email"]``.
        count: Number of rows.
        locale: Locale for locale-aware fields.

    Returns:
        List of dicts keyed by field name, fields in the given order.

    Raises:
        ValueError: If a field name is unknown.
    """
    _check_fields(fields)
    return faker.random.array(
        count,
        lambda _: {field: generate_field(faker, field, locale) for field in fields},
    )


def to_frame(
    faker: "MiniFaker",
    fields: Sequence[str],
    count: int,
    locale: Optional[str] = None,
    backend: str = "polars",
) -> Any:
    """
    Generate ``count`` rows as a native dataframe.

    Args:
        faker: Owning instance.
        fields: Field names; they become the column names.
        count: Number of rows.
        locale: Locale for locale-aware fields.
        backend: Any eager backend narwhals supports (``"polars"``,
            ``"pandas"``, ``"pyarrow"``).

    Returns:
        Native dataframe of the chosen backend.
    """
    rows = records(faker, fields, count, locale=locale)
    col_data: dict[str, list[Any]] = {field: [] for field in fields}
    for row in rows:
        for field in fields:
            col_data[field].append(row[field])

    frame = nw.from_dict(col_data, backend=backend)
    logger.debug(
        f"Generated [bold]{count}[/bold] rows x {len(fields)} fields ({backend})"
    )
    return frame.to_native()
