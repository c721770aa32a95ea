"""CLI module for minifaker.

This module provides the command-line interface for generating fake
values and inspecting the built-in locales.
"""

from typing import List, Optional

import typer
from rich.console import Console

from minifaker.cli.commands import generate_values, list_fields, list_locales

app = typer.Typer(
    name="minifaker",
    help="minifaker - Locale-driven fake data generator",
    add_completion=False,
)
console = Console()


@app.command()
def generate(
    fields: List[str] = typer.Argument(
        ..., help="Field names to generate (e.g. first_name email)"
    ),
    count: int = typer.Option(1, "--count", "-n", min=0, help="Number of values"),
    locale: Optional[str] = typer.Option(
        None, "--locale", "-l", help="Locale for locale-aware fields"
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Seed for reproducible output"
    ),
    load: Optional[str] = typer.Option(
        None,
        "--load",
        help="Comma-separated built-in locales to register (default: all)",
    ),
) -> None:
    """Generate fake values."""
    generate_values(
        fields=fields,
        count=count,
        locale=locale,
        seed=seed,
        load=load,
        console=console,
    )


@app.command()
def fields() -> None:
    """List available field names."""
    list_fields(console=console)


@app.command()
def locales() -> None:
    """List built-in locales and their field keys."""
    list_locales(console=console)


if __name__ == "__main__":
    app()
