from __future__ import annotations

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hbs_loader.config import build_resolver, get_loader_settings
from hbs_loader.exceptions import InvalidArgumentError
from hbs_loader.loader.resolver import PathResolver

app = typer.Typer(name="hbs-loader", help="Resolve template names to loader locations.")
console = Console()


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(name)s | %(levelname)s | %(message)s")


def _build(
    config: Path | None,
    prefix: str | None,
    partials_prefix: str | None,
    suffix: str | None,
) -> PathResolver:
    """Load settings, apply command-line overrides and build the resolver."""
    try:
        resolver = build_resolver(get_loader_settings(config))
        # Command-line options win over YAML and env
        if prefix is not None:
            resolver.prefix = prefix
        if partials_prefix is not None:
            resolver.partials_prefix = partials_prefix
        if suffix is not None:
            resolver.suffix = suffix
    except (InvalidArgumentError, ValidationError) as e:
        console.print(f"[red]Invalid loader configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    return resolver


@app.command()
def resolve(
    names: list[str] = typer.Argument(..., help="Template names to resolve"),
    partial: bool = typer.Option(False, "--partial", "-p", help="Resolve names as partials"),
    prefix: str | None = typer.Option(None, help="Template prefix (overrides config)"),
    partials_prefix: str | None = typer.Option(None, "--partials-prefix", help="Partials prefix (overrides config)"),
    suffix: str | None = typer.Option(None, help="Template suffix (overrides config)"),
    config: Path | None = typer.Option(None, "--config", "-c", help="Path to loader YAML config"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable detailed logging"),
) -> None:
    """Resolve template names to absolute locations."""
    _configure_logging(verbose)
    resolver = _build(config, prefix, partials_prefix, suffix)

    table = Table("Name", "Location")
    for name in names:
        location = resolver.resolve_partial(name) if partial else resolver.resolve(name)
        table.add_row(escape(name), escape(location))
    console.print(table)


@app.command("show-config")
def show_config(
    config: Path | None = typer.Option(None, "--config", "-c", help="Path to loader YAML config"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable detailed logging"),
) -> None:
    """Show the effective prefix, partials prefix and suffix."""
    _configure_logging(verbose)
    resolver = _build(config, None, None, None)
    console.print(f"[bold]prefix:[/bold] {escape(resolver.prefix)}")
    console.print(f"[bold]partials prefix:[/bold] {escape(resolver.partials_prefix)}")
    console.print(f"[bold]suffix:[/bold] {escape(repr(resolver.suffix))}")


if __name__ == "__main__":
    app()
