"""CLI entry point for pathnames.

Invoked as::

    pathnames [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m pathnames.cli.main

Commands
--------
parse            Parse a path and show its root and name elements
normalize        Lexically normalize a path
resolve          Resolve a path against a base path
resolve-sibling  Resolve a path against the parent of a base path
relativize       Build the relative path from one path to another
syntaxes         List registered path syntaxes
version          Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from pathnames.engine.engine import PathEngine
    from pathnames.model.path_value import PathValue

console = Console()
err_console = Console(stderr=True)

_FORMATS = ["text", "json", "yaml"]


def _configure_logging(verbose: bool) -> None:
    """Route library logging to stderr through Rich when ``--verbose`` is set."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _engine_or_exit(syntax: str) -> "PathEngine":
    """Return the engine for ``syntax``, exiting on an unknown name."""
    from pathnames.syntaxes import SyntaxNotFoundError, get_engine

    try:
        return get_engine(syntax)
    except SyntaxNotFoundError as exc:
        err_console.print(
            f"[red]Error:[/red] Unknown syntax {escape(repr(syntax))}. "
            f"Available: {escape(', '.join(exc.available))}"
        )
        sys.exit(2)


def _parse_or_exit(engine: "PathEngine", raw: str) -> "PathValue":
    """Parse ``raw``, printing the error and exiting on failure."""
    from pathnames.engine.errors import InvalidPathFormat

    try:
        return engine.parse(raw)
    except InvalidPathFormat as exc:
        err_console.print(f"[red]Invalid path[/red]: {escape(str(exc))}")
        sys.exit(1)


def _emit(
    engine: "PathEngine",
    value: "PathValue",
    output_format: str,
    output: str | None,
) -> None:
    """Write ``value`` in the requested format to ``output`` or stdout."""
    from pathnames.model.serializer import PathSerializer

    serializer = PathSerializer()
    if output_format == "json":
        text = serializer.to_json(value, indent=2)
    elif output_format == "yaml":
        text = serializer.to_yaml(value).rstrip("\n")
    else:
        text = engine.to_canonical_string(value)

    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        err_console.print(f"[green]Written to[/green] {escape(output)}")
    else:
        click.echo(text)


syntax_option = click.option(
    "--syntax",
    "-s",
    default="unix",
    show_default=True,
    help="Registered path syntax to use",
)
format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice(_FORMATS, case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format",
)
output_option = click.option(
    "--output", "-o", default=None, help="Output file path (defaults to stdout)"
)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="pathnames")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Syntax-agnostic path parsing, normalization and resolution."""
    from pathnames.syntaxes import syntax_registry

    _configure_logging(verbose)
    syntax_registry.load_entrypoints()


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from pathnames import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]pathnames[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# syntaxes command
# ---------------------------------------------------------------------------


@cli.command(name="syntaxes")
def syntaxes_command() -> None:
    """List all registered path syntaxes."""
    from pathnames.syntaxes import syntax_registry

    table = Table(title="Registered syntaxes")
    table.add_column("Name", style="bold")
    table.add_column("Root separator")
    table.add_column("Name separator")
    for name in syntax_registry.list_syntaxes():
        engine = syntax_registry.create(name)
        table.add_row(name, repr(engine.root_separator), repr(engine.name_separator))
    console.print(table)


# ---------------------------------------------------------------------------
# parse command
# ---------------------------------------------------------------------------


@cli.command(name="parse")
@click.argument("path")
@syntax_option
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json", "yaml"], case_sensitive=False),
    default="table",
    show_default=True,
    help="Output format",
)
@output_option
def parse_command(path: str, syntax: str, output_format: str, output: str | None) -> None:
    """Parse PATH and show its root and name elements."""
    engine = _engine_or_exit(syntax)
    value = _parse_or_exit(engine, path)

    if output_format != "table":
        _emit(engine, value, output_format, output)
        return

    table = Table(show_header=False, box=None)
    table.add_row("[bold]Root[/bold]", escape(repr(value.root)))
    table.add_row("[bold]Names[/bold]", escape(repr(list(value.names))))
    table.add_row("[bold]Absolute[/bold]", "yes" if engine.is_absolute(value) else "no")
    table.add_row("[bold]Canonical[/bold]", escape(engine.to_canonical_string(value)))
    console.print(table)


# ---------------------------------------------------------------------------
# normalize command
# ---------------------------------------------------------------------------


@cli.command(name="normalize")
@click.argument("path")
@syntax_option
@format_option
@output_option
def normalize_command(path: str, syntax: str, output_format: str, output: str | None) -> None:
    """Lexically normalize PATH (no filesystem access)."""
    engine = _engine_or_exit(syntax)
    value = _parse_or_exit(engine, path)
    _emit(engine, engine.normalize(value), output_format, output)


# ---------------------------------------------------------------------------
# resolve / resolve-sibling / relativize commands
# ---------------------------------------------------------------------------


def _run_binary(
    operation: str,
    base: str,
    other: str,
    syntax: str,
    output_format: str,
    output: str | None,
    normalize: bool,
) -> None:
    """Shared body of the two-operand commands."""
    from pathnames.engine.errors import PathError

    engine = _engine_or_exit(syntax)
    base_value = _parse_or_exit(engine, base)
    other_value = _parse_or_exit(engine, other)

    try:
        result = getattr(engine, operation)(base_value, other_value)
    except PathError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    if normalize:
        result = engine.normalize(result)
    _emit(engine, result, output_format, output)


@cli.command(name="resolve")
@click.argument("base")
@click.argument("other")
@syntax_option
@format_option
@output_option
@click.option("--normalize", "-n", is_flag=True, default=False, help="Normalize the result")
def resolve_command(
    base: str, other: str, syntax: str, output_format: str, output: str | None, normalize: bool
) -> None:
    """Resolve OTHER against BASE."""
    _run_binary("resolve", base, other, syntax, output_format, output, normalize)


@cli.command(name="resolve-sibling")
@click.argument("base")
@click.argument("other")
@syntax_option
@format_option
@output_option
@click.option("--normalize", "-n", is_flag=True, default=False, help="Normalize the result")
def resolve_sibling_command(
    base: str, other: str, syntax: str, output_format: str, output: str | None, normalize: bool
) -> None:
    """Resolve OTHER against the parent of BASE."""
    _run_binary("resolve_sibling", base, other, syntax, output_format, output, normalize)


@cli.command(name="relativize")
@click.argument("base")
@click.argument("other")
@syntax_option
@format_option
@output_option
def relativize_command(
    base: str, other: str, syntax: str, output_format: str, output: str | None
) -> None:
    """Print the relative path that leads from BASE to OTHER."""
    _run_binary("relativize", base, other, syntax, output_format, output, False)


if __name__ == "__main__":
    cli()
