"""
Portfolio Sync CLI - content tooling for the portfolio site

A command-line tool for keeping portfolio content current by:
1. Suggesting project updates from a GitHub repository (sync)
2. Validating content collection front matter (check)
3. Exporting the CV document as JSON (export-cv, serve)
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from portfolio_sync import __version__
from portfolio_sync.config import SyncSettings
from portfolio_sync.content import load_all_collections
from portfolio_sync.formatters import print_sync_report
from portfolio_sync.github import GitHubAPIError
from portfolio_sync.pipeline import ProjectSyncPipeline
from portfolio_sync.server import create_app, load_cv, render_cv

app = typer.Typer(
    name="portfolio-sync",
    help="Portfolio content tooling",
    add_completion=False,
)

console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable debug logging"),
):
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


@app.command()
def sync(
    repo_url: str = typer.Argument(..., help="GitHub repository URL (e.g., https://github.com/celloopa/ghosted)"),
):
    """
    Suggest project content updates from a GitHub repository.

    Fetches repository metadata, README and recent commits, finds the project
    MDX file that links to the repository and prints suggested highlights,
    keywords and a cv.json entry. Nothing is written; apply updates by hand.

    Example:
        portfolio-sync sync https://github.com/celloopa/ghosted
    """
    settings = SyncSettings.from_env()

    try:
        pipeline = ProjectSyncPipeline(repo_url=repo_url, settings=settings)
    except ValueError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(f"\n🔍 Fetching data for [yellow]{escape(pipeline.ref.full_name)}[/yellow]...")

    try:
        result = pipeline.run()
    except GitHubAPIError as e:
        console.print(f"[red]❌ Failed to fetch repository data: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    print_sync_report(result, console)


@app.command()
def check(
    content_dir: Optional[Path] = typer.Option(
        None,
        "--content-dir",
        "-c",
        help="Content root (default: PORTFOLIO_CONTENT_DIR or src/content)",
    ),
):
    """
    Validate front matter of every content collection entry.

    Exits with status 1 when any entry is invalid.
    """
    settings = SyncSettings.from_env()
    root = content_dir or settings.content_dir

    if not root.is_dir():
        console.print(f"[red]❌ Content directory not found: {escape(str(root))}[/red]")
        raise typer.Exit(1)

    reports = load_all_collections(root)

    table = Table(title=f"Content collections in {root}")
    table.add_column("Collection", style="cyan")
    table.add_column("Valid", style="green", justify="right")
    table.add_column("Invalid", style="red", justify="right")
    for report in reports:
        table.add_row(report.collection, str(len(report.entries)), str(len(report.errors)))
    console.print(table)

    failed = False
    for report in reports:
        for error in report.errors:
            failed = True
            console.print(f"\n[red]❌ {report.collection}/{escape(error.path.name)}[/red]")
            for message in error.errors:
                console.print(f"   • {escape(message)}")

    if failed:
        raise typer.Exit(1)

    console.print("\n[bold green]✓ All content entries are valid[/bold green]")


@app.command("export-cv")
def export_cv(
    cv_path: Optional[Path] = typer.Option(
        None,
        "--cv-path",
        help="CV document (default: PORTFOLIO_CV_PATH or src/data/cv.json)",
    ),
):
    """Print the CV document as formatted JSON."""
    path = cv_path or SyncSettings.from_env().cv_path

    try:
        cv = load_cv(path)
    except FileNotFoundError:
        console.print(f"[red]❌ CV document not found: {escape(str(path))}[/red]")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]❌ CV document is not valid JSON: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(render_cv(cv), markup=False, highlight=False, soft_wrap=True)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", "-p", help="Bind port"),
):
    """Serve the CV document at /cv.json."""
    import uvicorn

    settings = SyncSettings.from_env()
    console.print(Panel.fit(
        "[bold cyan]Portfolio Content Export[/bold cyan]\n\n"
        f"CV: [yellow]{escape(str(settings.cv_path))}[/yellow]\n"
        f"URL: [yellow]http://{host}:{port}/cv.json[/yellow]",
        border_style="cyan"
    ))
    uvicorn.run(create_app(settings), host=host, port=port)


@app.command()
def version():
    """Show the version of portfolio-sync."""
    console.print(f"[bold cyan]Portfolio Sync[/bold cyan] v{__version__}")
    console.print("Portfolio content tooling")


if __name__ == "__main__":
    app()
