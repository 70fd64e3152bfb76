"""Human-readable listing of registered aliases."""

from typing import Optional

from rich.console import Console
from rich.markup import escape

from pseudonyms.errors import TypeMismatchError
from pseudonyms.registry import AliasRegistry, get_registry


def print_aliases(
    scope: str,
    registry: Optional[AliasRegistry] = None,
    console: Optional[Console] = None
) -> int:
    """Print the aliases of scope, one ``namespace => alias`` line each.

    Returns:
        Number of entries printed
    """
    if not isinstance(scope, str):
        raise TypeMismatchError("scope", scope)

    registry = registry or get_registry()
    console = console or Console()

    entries = registry.entries(scope)
    if not entries:
        console.print(f"[yellow]No aliases defined in {escape(scope)}.[/yellow]", soft_wrap=True)
        return 0

    console.print(f"[bold]Aliases in {escape(scope)}:[/bold]", soft_wrap=True)
    for entry in entries:
        console.print(f"  {escape(entry.namespace_name)} => {escape(entry.alias)}", soft_wrap=True, highlight=False)
    return len(entries)
