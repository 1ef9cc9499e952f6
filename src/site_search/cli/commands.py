"""CLI commands for Site Search."""

import asyncio
from pathlib import Path
from typing import Annotated, Optional

import httpx
import typer
from rich.console import Console
from rich.table import Table

from ..config import settings
from ..models.presentation import PresentationState, Results
from ..page.regions import Page
from ..rendering.templates import results_template
from ..search.orchestrator import build_search_page
from ..search.providers import HttpSearchProvider, JsonFileSearchProvider, SearchProvider
from ..storage.html_writer import HtmlWriter
from ..utils.logging import search_context, setup_logging

app = typer.Typer(
    name="site-search",
    help="Render search results into a search page",
    add_completion=False,
)
console = Console()


@app.command()
def search(
    query: Annotated[
        str,
        typer.Argument(help="Search query"),
    ],
    service_url: Annotated[
        Optional[str],
        typer.Option("--service-url", "-s", help="Search service endpoint"),
    ] = None,
    output_dir: Annotated[
        Optional[str],
        typer.Option("--output", "-o", help="Output directory for HTML pages"),
    ] = None,
    decouple_excerpt: Annotated[
        bool,
        typer.Option(
            "--decouple-excerpt/--coupled-excerpt",
            help="Show excerpts for posts without a publish date",
        ),
    ] = settings.decouple_excerpt,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging"),
    ] = False,
) -> None:
    """Query the search service and save the rendered page."""
    setup_logging("DEBUG" if verbose else settings.log_level)

    exit_code = asyncio.run(
        _search_async(
            query=query,
            service_url=service_url or settings.search_service_url,
            output_dir=output_dir or settings.output_dir,
            decouple_excerpt=decouple_excerpt,
        )
    )
    raise typer.Exit(code=exit_code)


@app.command()
def render(
    result_file: Annotated[
        Path,
        typer.Argument(help="JSON file holding a search result"),
    ],
    output_dir: Annotated[
        Optional[str],
        typer.Option("--output", "-o", help="Output directory for HTML pages"),
    ] = None,
    decouple_excerpt: Annotated[
        bool,
        typer.Option(
            "--decouple-excerpt/--coupled-excerpt",
            help="Show excerpts for posts without a publish date",
        ),
    ] = settings.decouple_excerpt,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging"),
    ] = False,
) -> None:
    """Render a saved search result file into a page."""
    setup_logging("DEBUG" if verbose else settings.log_level)

    if not result_file.is_file():
        console.print(f"[red]Error:[/red] no such file: {result_file}")
        raise typer.Exit(code=1)

    provider = JsonFileSearchProvider(result_file, default_query=result_file.stem)
    exit_code = asyncio.run(
        _present_and_save(
            provider,
            query=result_file.stem,
            output_dir=output_dir or settings.output_dir,
            decouple_excerpt=decouple_excerpt,
        )
    )
    raise typer.Exit(code=exit_code)


async def _search_async(
    query: str,
    service_url: str,
    output_dir: str,
    decouple_excerpt: bool,
) -> int:
    """Async implementation of search command."""
    console.print(f"\n[bold blue]Site Search[/bold blue]")
    console.print(f"Query: {query}")
    console.print(f"Service: {service_url}")
    console.print()

    async with httpx.AsyncClient(timeout=settings.request_timeout_seconds) as client:
        provider = HttpSearchProvider(client, service_url, query)
        return await _present_and_save(provider, query, output_dir, decouple_excerpt)


async def _present_and_save(
    provider: SearchProvider,
    query: str,
    output_dir: str,
    decouple_excerpt: bool,
) -> int:
    """Present one search on a page and save it.

    Returns:
        Process exit code
    """
    with search_context(query, "cli"):
        page, state = await build_search_page(
            provider,
            title=settings.page_title,
            template=results_template(decouple_excerpt),
        )

    if state is None:
        console.print("[red]Error:[/red] the search provider returned no result")
        return 1

    writer = HtmlWriter(output_dir)
    filepath = await writer.write_page(page, state.query_string or query)

    _print_summary(page, state)
    console.print(f"[green]Saved:[/green] {filepath}")
    return 0


def _print_summary(page: Page, state: PresentationState) -> None:
    """Display a summary table of the presented search."""
    table = Table(title=f"Results for '{state.query_string}'", show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Presentation", state.mode)

    if isinstance(state, Results):
        posts = state.model.posts
        undated = sum(1 for post in posts if post.post_date is None)
        table.add_row("Posts Found", str(len(posts)))
        table.add_row("Posts Without Date", str(undated))
    else:
        table.add_row("Posts Found", "0")

    table.add_row("Visible Regions", ", ".join(sorted(page.visible_regions())))
    console.print(table)


@app.command()
def serve(
    host: Annotated[
        str,
        typer.Option("--host", "-h", help="API host"),
    ] = settings.api_host,
    port: Annotated[
        int,
        typer.Option("--port", "-p", help="API port"),
    ] = settings.api_port,
    reload: Annotated[
        bool,
        typer.Option("--reload", "-r", help="Enable auto-reload"),
    ] = False,
) -> None:
    """Start the FastAPI server."""
    import uvicorn

    console.print(f"\n[bold blue]Starting Site Search API[/bold blue]")
    console.print(f"Host: {host}")
    console.print(f"Port: {port}")
    console.print(f"Docs: http://{host}:{port}/docs")
    console.print()

    uvicorn.run(
        "site_search.api.app:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )


@app.command()
def version() -> None:
    """Show version information."""
    from .. import __version__

    console.print(f"Site Search v{__version__}")


def main() -> None:
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
