"""Implementation of the minifaker CLI commands."""

from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from minifaker.config import load_config
from minifaker.dataset import FIELD_GENERATORS, LOCALE_FREE_FIELDS
from minifaker.errors import MinifakerError
from minifaker.faker import MiniFaker
from minifaker.locales import AVAILABLE_LOCALES, get_locale_bundle


def parse_locale_list(value: Optional[str]) -> List[str]:
    """Split a comma-separated locale list; all built-in locales when empty."""
    if not value:
        return list(AVAILABLE_LOCALES)
    return [name.strip() for name in value.split(",") if name.strip()]


def generate_values(
    fields: List[str],
    count: int = 1,
    locale: Optional[str] = None,
    seed: Optional[int] = None,
    load: Optional[str] = None,
    console: Optional[Console] = None,
) -> None:
    """Print generated values.

    A single field prints one value per line; several fields print a table
    with one row per record.

    Args:
        fields: Field names (see ``minifaker fields``).
        count: Number of values/rows.
        locale: Locale for locale-aware fields.
        seed: Seed for reproducible output.
        load: Comma-separated built-in locales to register, in order.
        console: Rich console instance for output.
    """
    if console is None:
        console = Console()

    try:
        config = load_config(locales=parse_locale_list(load), seed=seed)
        faker = MiniFaker.from_config(config)
        rows = faker.records(fields, count, locale=locale)
    except (MinifakerError, ValueError) as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    if len(fields) == 1:
        for row in rows:
            console.print(str(row[fields[0]]), markup=False, highlight=False)
        return

    table = Table(show_header=True, header_style="bold")
    for field in fields:
        table.add_column(field, style="cyan")
    for row in rows:
        table.add_row(*(str(row[field]) for field in fields))
    console.print(table)


def list_fields(console: Optional[Console] = None) -> None:
    """Print the available field names."""
    if console is None:
        console = Console()

    table = Table(title="Available Fields", show_header=True, header_style="bold")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Locale data", style="magenta")
    for field in sorted(FIELD_GENERATORS):
        table.add_row(field, "no" if field in LOCALE_FREE_FIELDS else "yes")
    console.print(table)


def list_locales(console: Optional[Console] = None) -> None:
    """Print the built-in locales and the field keys each one provides."""
    if console is None:
        console = Console()

    table = Table(title="Built-in Locales", show_header=True, header_style="bold")
    table.add_column("Locale", style="cyan", no_wrap=True)
    table.add_column("Field keys", style="green")
    for name in AVAILABLE_LOCALES:
        bundle = get_locale_bundle(name)
        table.add_row(name, ", ".join(sorted(bundle)))
    console.print(table)
