"""locale-codes command line: registry lookups, code listings and locale strings."""

from __future__ import annotations

import dataclasses
from enum import Enum
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from locale_codes import __version__
from locale_codes.catalog import Catalog
from locale_codes.core.codeset import IdentifierForm
from locale_codes.core.errors import LocaleCodesError, UnknownIdentifier
from locale_codes.core.logging import configure_logging
from locale_codes.core.models.config import Config
from locale_codes.locale.builder import LocaleBuilder

app = typer.Typer(
    name="locale-codes",
    help="Look up ISO language, country, currency, script and M49 region codes",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()


class CodeForm(str, Enum):
    """Identifier selection for the codes command."""

    ALL = "all"
    ALPHA = "alpha"
    NUMERIC = "numeric"


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]locale-codes[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Config file path"),
    ] = None,
    data_dir: Annotated[
        Path | None,
        typer.Option("--data-dir", help="Directory holding the registry JSON files"),
    ] = None,
) -> None:
    """locale-codes - ISO code registries and locale strings."""
    settings = Config.from_yaml(config) if config else Config()
    if data_dir is not None:
        settings.data.data_dir = data_dir
    configure_logging(settings.logs)
    ctx.obj = settings


def _catalog(ctx: typer.Context) -> Catalog:
    return Catalog.open(ctx.obj if isinstance(ctx.obj, Config) else Config())


def _record_table(title: str, record: Any) -> Table:
    """Render a record dataclass as a two-column table."""
    table = Table(title=title)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    for field in dataclasses.fields(record):
        value = getattr(record, field.name)
        if isinstance(value, Enum):
            value = value.value
        elif isinstance(value, tuple):
            value = ", ".join(str(getattr(item, "name", None) or item) for item in value)
        table.add_row(field.name, "" if value is None else escape(str(value)))
    return table


@app.command()
def lookup(
    ctx: typer.Context,
    registry: Annotated[
        str,
        typer.Argument(help="Registry: language, country, currency, script, region"),
    ],
    identifier: Annotated[str, typer.Argument(help="Alphabetic or numeric code")],
) -> None:
    """Look up a record by any of its identifiers."""
    catalog = _catalog(ctx)
    try:
        target = catalog.registry(registry)
        record = target.lookup(identifier)
    except KeyError as e:
        console.print(f"[red]{escape(str(e.args[0]))}[/red]")
        raise typer.Exit(2) from e
    except LocaleCodesError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(2) from e

    if record is None:
        console.print(f"[yellow]No {target.name} record for {identifier!r}[/yellow]")
        raise typer.Exit(1)

    console.print(_record_table(f"{target.name}: {identifier}", record))


@app.command()
def codes(
    ctx: typer.Context,
    registry: Annotated[
        str,
        typer.Argument(help="Registry: language, country, currency, script, region"),
    ],
    form: Annotated[
        CodeForm,
        typer.Option("--form", "-f", help="Which identifiers to list"),
    ] = CodeForm.ALL,
) -> None:
    """List all identifiers of a registry, in dataset order."""
    catalog = _catalog(ctx)
    try:
        target = catalog.registry(registry)
        entries = target.all_codes()
        if form is CodeForm.ALPHA:
            entries = [(f, code) for f, code in entries if f.is_alpha]
        elif form is CodeForm.NUMERIC:
            entries = [(f, code) for f, code in entries if f is IdentifierForm.NUMERIC]
    except KeyError as e:
        console.print(f"[red]{escape(str(e.args[0]))}[/red]")
        raise typer.Exit(2) from e
    except LocaleCodesError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(2) from e

    for entry_form, code in entries:
        typer.echo(f"{entry_form.value}\t{code}")


@app.command()
def locale(
    ctx: typer.Context,
    language: Annotated[str, typer.Argument(help="Language code (ISO 639)")],
    script: Annotated[
        str | None,
        typer.Option("--script", "-s", help="Script code (ISO 15924)"),
    ] = None,
    region: Annotated[
        str | None,
        typer.Option("--region", "-r", help="Country code or M49 region"),
    ] = None,
    lenient: Annotated[
        bool,
        typer.Option("--lenient", help="Skip registry validation"),
    ] = False,
    separator: Annotated[
        str | None,
        typer.Option("--separator", help="Component separator: '-' or '_'"),
    ] = None,
) -> None:
    """Build a locale string, validating components unless --lenient."""
    catalog = _catalog(ctx)
    config = catalog.config
    try:
        builder = LocaleBuilder.from_config(
            language, script, region, config=config, catalog=catalog
        )
        if lenient:
            builder = builder.lenient()
        if separator is not None:
            builder = dataclasses.replace(builder, separator=separator)
        result = builder.build()
    except UnknownIdentifier as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(2) from e
    except (ValueError, LocaleCodesError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(2) from e

    typer.echo(result)


@app.command()
def currencies(
    ctx: typer.Context,
    country: Annotated[str, typer.Argument(help="Country code (alpha-2, alpha-3 or numeric)")],
) -> None:
    """List the currencies used by a country."""
    catalog = _catalog(ctx)
    try:
        name = catalog.countries.country_name(country)
        found = catalog.currencies.currencies_for_country(country)
    except LocaleCodesError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(2) from e

    table = Table(title=f"Currencies: {name or country}")
    table.add_column("Code", style="cyan")
    table.add_column("Numeric", style="green")
    table.add_column("Name")
    for currency in found:
        numeric = "" if currency.numeric_code is None else f"{currency.numeric_code:03d}"
        table.add_row(currency.alphabetic_code, numeric, currency.name)
    console.print(table)


@app.command()
def stats(ctx: typer.Context) -> None:
    """Show record counts per registry."""
    catalog = _catalog(ctx)
    try:
        counts = catalog.stats()
    except LocaleCodesError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(2) from e

    table = Table(title="Registries")
    table.add_column("Registry", style="cyan")
    table.add_column("Records", style="green", justify="right")
    for name, count in counts.items():
        table.add_row(name, str(count))
    console.print(table)


if __name__ == "__main__":
    app()
