"""CLI interface for Namespace Search."""

import json
from contextlib import nullcontext

import typer
from bs4 import BeautifulSoup
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ....config.logging import setup_logging
from ....config.settings import settings
from ...common.exception_handler import format_exception_json

app = typer.Typer(
    name="namespace-search",
    help="Semantic search over the namespaces of a hosted vector index",
    add_completion=False,
)

console = Console(force_terminal=True, legacy_windows=False)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
) -> None:
    """Configure logging before any command runs."""
    setup_logging("DEBUG" if verbose else "WARNING", json_format=settings.log_json)


def handle_cli_error(exc: Exception) -> None:
    """Display an error with its code, or the full JSON in debug mode.

    Args:
        exc: The exception to handle.
    """
    error_data = format_exception_json(exc, include_trace=settings.debug)

    if settings.debug:
        console.print(
            Panel(
                json.dumps(error_data, indent=2, default=str),
                title="[bold red]Error Details[/]",
                border_style="red",
            )
        )
        return

    error_type = error_data["error"]["type"]
    error_msg = error_data["error"]["message"]
    error_code = error_data["error"].get("code", "UNKNOWN")

    console.print(f"\n[red]Error \\[{error_code}]:[/] {escape(error_msg)}", highlight=False)
    console.print(f"[dim]Type: {error_type}[/]")
    console.print("[dim]Set DEBUG=true for full details[/]")


def fragment_to_text(fragment: str) -> str:
    """Render an HTML result fragment as plain lines for the terminal."""
    return BeautifulSoup(fragment, "html.parser").get_text("\n", strip=True)


def _get_index():
    from ....composition.container import build_vector_index

    return build_vector_index(settings)


@app.command()
def namespaces() -> None:
    """List namespaces and their record counts."""
    from ....composition.container import build_namespace_directory

    try:
        with console.status("[bold green]Reading index stats...[/]"):
            directory = build_namespace_directory(_get_index()).list_namespaces()
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    if not directory.count:
        console.print("[yellow]The index has no namespaces.[/]")
        return

    table = Table(title=f"Namespaces ({directory.count})")
    table.add_column("Namespace", style="cyan")
    table.add_column("Records", justify="right")
    for ns in directory.to_namespaces():
        table.add_row(ns.name, str(ns.record_count))
    console.print(table)


@app.command()
def search(
    query: str = typer.Argument(..., help="Free-text search query"),
    namespace: str = typer.Option(..., "--namespace", "-n", help="Namespace to search"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw API-shaped JSON"),
) -> None:
    """Search one namespace and print the matches."""
    from ....composition.container import build_query_pipeline

    try:
        status_ctx = nullcontext() if as_json else console.status("[bold green]Searching...[/]")
        with status_ctx:
            results = build_query_pipeline(_get_index(), settings).search(query, namespace)
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    if as_json:
        payload = {
            "results": results.results,
            "count": results.count,
            "query": results.query,
            "namespace": results.namespace,
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    if not results.count:
        console.print(f"[yellow]No results in '{results.namespace}'.[/]")
        return

    for i, fragment in enumerate(results.results, 1):
        console.print(
            Panel(Text(fragment_to_text(fragment)), title=f"#{i}", border_style="blue"),
            highlight=False,
        )
    console.print(f"[dim]{results.count} results from '{results.namespace}'[/]")


@app.command()
def status() -> None:
    """Show configuration status and the namespaces of the index."""
    console.print("[bold]Namespace Search Status[/]\n")
    console.print(f"Backend: [cyan]{settings.vector_backend}[/]")

    missing = settings.missing_credentials()
    if missing:
        console.print(f"❌ {missing}")
        return
    console.print("✅ Credentials configured")

    namespaces()


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address"),
    port: int = typer.Option(8000, help="Bind port"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "namespace_search.adapters.inbound.api.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    app()
