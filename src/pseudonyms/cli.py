"""CLI for reading alias-qualified input."""

import json
import sys
from pathlib import Path
from typing import Any, Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pseudonyms.api import PseudonymService
from pseudonyms.config import PseudonymsConfig, load_config
from pseudonyms.errors import PseudonymError
from pseudonyms.log import configure_logging
from pseudonyms.namespaces import Visibility
from pseudonyms.reader import DispatchTable
from pseudonyms.registry import AliasRegistry

console = Console()


def render(datum: Any) -> str:
    """Render a datum the way it would be written back."""
    if isinstance(datum, list):
        return "(" + " ".join(render(item) for item in datum) + ")"
    return str(datum)


def build_service(cfg: PseudonymsConfig, scope: Optional[str] = None) -> PseudonymService:
    if scope:
        cfg.current_namespace = scope
    return PseudonymService.from_config(cfg, registry=AliasRegistry(), table=DispatchTable())


@click.group()
@click.option("--config", default=None, help="Path to configuration file")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Override configured log level"
)
@click.pass_context
def main(ctx: click.Context, config: Optional[str], log_level: Optional[str]) -> None:
    """Scoped namespace aliases.

    Registers aliases from the configuration and resolves $alias:identifier tokens.
    """
    try:
        cfg = load_config(config)
    except (PseudonymError, OSError) as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        sys.exit(1)

    configure_logging(log_level or cfg.log_level)
    ctx.obj = cfg


@main.command("read")
@click.argument("text", nargs=-1)
@click.option("--file", "file_path", default=None, type=click.Path(exists=True, dir_okay=False), help="Read input from file")
@click.option("--scope", default=None, help="Namespace to resolve aliases in")
@click.pass_obj
def read_command(cfg: PseudonymsConfig, text: Tuple[str, ...], file_path: Optional[str], scope: Optional[str]) -> None:
    """Read input and print each datum with aliases resolved."""
    if file_path:
        source = Path(file_path).read_text()
    else:
        source = " ".join(text)

    try:
        service = build_service(cfg, scope)
        data = service.read(source)
    except PseudonymError as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        sys.exit(1)

    for datum in data:
        console.print(escape(render(datum)), highlight=False, soft_wrap=True)


@main.command("aliases")
@click.option("--scope", default=None, help="Scope to list (default: current namespace)")
@click.option("--json", "as_json", is_flag=True, help="Dump every scope as JSON")
@click.pass_obj
def aliases_command(cfg: PseudonymsConfig, scope: Optional[str], as_json: bool) -> None:
    """List registered aliases."""
    try:
        service = build_service(cfg, scope)
    except PseudonymError as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(service.registry.to_dict(), indent=2))
        return

    service.print_aliases(console=console)


@main.command("check")
@click.pass_obj
def check_command(cfg: PseudonymsConfig) -> None:
    """Validate the configuration and summarize it."""
    try:
        service = build_service(cfg)
    except PseudonymError as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        sys.exit(1)

    table = Table(title="Namespaces")
    table.add_column("Namespace", style="cyan")
    table.add_column("External", justify="right", style="green")
    table.add_column("Internal", justify="right")
    table.add_column("Alias", justify="center")

    for name in service.catalog.namespaces():
        visibilities = service.catalog.identifiers(name)
        external = len([v for v in visibilities.values() if v is Visibility.EXTERNAL])
        table.add_row(
            name,
            str(external),
            str(len(visibilities) - external),
            service.find_alias(name) or "-",
        )

    console.print(table)
    stats = service.registry.get_stats()
    console.print(f"✓ {stats['total_aliases']} aliases in {stats['active_scopes']} scopes")
    console.print(f"Marker {cfg.marker!r}, separator {cfg.separator!r}", style="dim", markup=False)


if __name__ == "__main__":
    main()
