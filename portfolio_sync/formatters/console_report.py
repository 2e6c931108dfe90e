"""
Console presentation of a sync result.

Prints a human-readable summary followed by suggested updates. Nothing is
written back to disk; the reviewer applies suggestions by hand.
"""

import json
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from portfolio_sync.schemas import SyncResult

RULE_WIDTH = 60


def print_sync_report(result: SyncResult, console: Optional[Console] = None):
    """Print the repository summary and the suggested updates."""
    console = console or Console()
    print_summary(result, console)
    print_suggestions(result, console)


def print_summary(result: SyncResult, console: Console):
    data = result.data
    repo = data.repo

    console.print()
    console.print(Panel.fit(
        f"[bold cyan]PROJECT SYNC SUMMARY: {escape(repo.name.upper())}[/bold cyan]",
        border_style="cyan"
    ))

    console.print("\n[bold]📦 Repository Info:[/bold]")
    console.print(f"   Name: [yellow]{escape(repo.name)}[/yellow]")
    console.print(f"   Description: {escape(repo.description or '')}")
    console.print(f"   Language: {escape(repo.language or '')}")
    console.print(f"   Topics: {escape(', '.join(repo.topics))}")
    console.print(f"   Last updated: {escape(repo.updated_at)}")

    console.print("\n[bold]🔄 Recent Changes:[/bold]")
    for change in data.recent_changes[:5]:
        console.print(f"   • {escape(change)}")

    console.print("\n[bold]✨ Extracted Features:[/bold]")
    for feature in data.features[:10]:
        console.print(f"   • {escape(feature)}")

    if result.existing_frontmatter is not None:
        console.print(f"\n[bold]📄 Current MDX Highlights[/bold] ([cyan]{escape(str(result.project_file))}[/cyan]):")
        highlights = result.existing_frontmatter.fields.get("highlights")
        if isinstance(highlights, list):
            for highlight in highlights:
                console.print(f"   • {escape(highlight)}")


def print_suggestions(result: SyncResult, console: Console):
    console.print("\n[bold green]💡 SUGGESTED UPDATES:[/bold green]")
    console.print("-" * RULE_WIDTH)

    console.print("\n[bold]Suggested MDX Highlights:[/bold]")
    for highlight in result.suggested_highlights:
        console.print(f"   - {escape(highlight)}")

    console.print("\n[bold]Suggested cv.json Keywords:[/bold]")
    console.print(f"   {json.dumps(result.suggested_keywords)}", markup=False, highlight=False, soft_wrap=True)

    console.print("\n[bold]📝 cv.json Project Entry (suggested):[/bold]")
    console.print(
        json.dumps(result.cv_entry.to_cv_dict(), indent=2, ensure_ascii=False),
        markup=False,
        highlight=False,
        soft_wrap=True
    )

    console.print("\n" + "=" * RULE_WIDTH)
    console.print("Review the suggestions above and apply updates manually.")
    console.print("=" * RULE_WIDTH + "\n")
