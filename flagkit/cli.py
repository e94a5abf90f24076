from __future__ import annotations

import json
import logging
import pathlib
from typing import Optional

import typer
from rich import print
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .catalog import DEFAULT_CATALOG, FlagCatalogError, load_catalog
from .config import FlagConfigError, load_flag_config
from .environment import EXECUTING_COMMAND_ENV, detect_ci, executing_command
from .feature_flags import flag_states
from .messages import PLAIN_STYLE, RICH_STYLE
from .models import FlagCatalog
from .resolver import flag_applies, resolve_flags

app = typer.Typer(help="Resolve configured feature flags against the framework flag catalog")


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)"),
):
    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def _load_catalog_or_exit(catalog: Optional[pathlib.Path]) -> FlagCatalog:
    if catalog is None:
        return DEFAULT_CATALOG
    try:
        return load_catalog(catalog)
    except FlagCatalogError as exc:
        print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1)


@app.command()
def resolve(
    config: pathlib.Path = typer.Option(..., "--config", help="JSON config file with a 'flags' mapping"),
    catalog: Optional[pathlib.Path] = typer.Option(None, "--catalog", help="flagkit.flag_catalog.v1 JSON (default: built-in catalog)"),
    command: Optional[str] = typer.Option(None, "--command", help=f"Executing command (default: ${EXECUTING_COMMAND_ENV})"),
    ci: Optional[bool] = typer.Option(None, "--ci/--no-ci", help="Treat the run as CI (default: detect from environment)"),
    as_json: bool = typer.Option(False, "--json", help="Print the resolution result as JSON"),
    plain: bool = typer.Option(False, "--plain", help="Plain text output, no terminal links or colour"),
    strict_includes: bool = typer.Option(False, "--strict-includes", help="Apply CI/command filtering to included flags too"),
):
    """Resolve the flags requested in CONFIG and report which are active."""
    cat = _load_catalog_or_exit(catalog)
    try:
        cfg = load_flag_config(config)
    except FlagConfigError as exc:
        print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1)

    if command is None:
        command = executing_command()
    if ci is None:
        ci = detect_ci()

    console = Console()
    rich_output = not plain and not as_json and console.is_terminal
    result = resolve_flags(
        cat.flags,
        cfg.flags,
        command,
        ci=ci,
        style=RICH_STYLE if rich_output else PLAIN_STYLE,
        config_name=config.name,
        refilter_included=strict_includes,
    )

    if as_json:
        payload = result.model_dump(mode="json")
        payload["flag_states"] = flag_states(cat.flags, result)
        typer.echo(json.dumps(payload, indent=2))
        return

    if rich_output:
        if result.unknown_flag_message:
            console.print(f"[yellow]{result.unknown_flag_message}[/yellow]")
        if result.message:
            console.print(result.message)
        else:
            console.print("[dim]No flags are active.[/dim]")
        return

    if result.unknown_flag_message:
        typer.echo(result.unknown_flag_message)
    typer.echo(result.message or "No flags are active.")


@app.command("list")
def list_flags(
    catalog: Optional[pathlib.Path] = typer.Option(None, "--catalog", help="flagkit.flag_catalog.v1 JSON (default: built-in catalog)"),
    command: Optional[str] = typer.Option(None, "--command", help="Only show flags that apply to this command"),
):
    """Show the flags in the catalog."""
    cat = _load_catalog_or_exit(catalog)
    flags = [f for f in cat.flags if command is None or flag_applies(f, command, ci=False)]

    if not flags:
        print("[yellow]No flags match[/yellow]")
        return

    console = Console()
    table = Table(title=f"Flags (catalog {cat.version})")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Command", style="magenta")
    table.add_column("CI")
    table.add_column("Experimental", style="red")
    table.add_column("Includes", style="yellow")
    table.add_column("Description")

    for flag in flags:
        table.add_row(
            flag.name,
            flag.command,
            "no" if flag.no_ci else "yes",
            "yes" if flag.experimental else "",
            ", ".join(flag.included_flags) or "—",
            escape(flag.description),
        )

    console.print(table)
    if command is not None:
        print(f"\n[bold]{len(flags)} of {len(cat.flags)} flag(s) apply to '{escape(command)}'[/bold]")
