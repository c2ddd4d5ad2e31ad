"""Main Typer application for moss."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from moss.cli.errorhandler import handle_cli_errors
from moss.logging_setup import configure_logging
from moss.scanning import scan
from moss.site import build, summarize

app = typer.Typer(
    name="moss",
    help="Turn a folder of documents into a static website",
    add_completion=False,
)

console = Console()

FolderArgument = Annotated[
    Path,
    typer.Argument(help="Folder containing the documents to publish"),
]
DebugOption = Annotated[bool, typer.Option("--debug", help="Log debug messages and show full tracebacks on errors")]


@app.callback()
def main() -> None:
    """Moss: folder in, website out."""


@app.command("compile")
def compile_command(folder: FolderArgument, debug: DebugOption = False) -> None:
    """Generate the site into FOLDER/.moss/site."""
    configure_logging(debug=debug)
    with handle_cli_errors(debug=debug):
        structure, result = build(folder)

    console.print(f"[bold green]✅ {escape(summarize(structure, result))}[/bold green]")
    if result.warnings:
        console.print(f"[yellow]⚠️  {len(result.warnings)} file(s) skipped:[/yellow]")
        for warning in result.warnings:
            console.print(f"  - [yellow]{warning.kind.value}[/yellow] {escape(str(warning))}")


@app.command("scan")
def scan_command(folder: FolderArgument, debug: DebugOption = False) -> None:
    """Show how FOLDER would be classified, without writing anything."""
    configure_logging(debug=debug)
    with handle_cli_errors(debug=debug):
        structure = scan(folder)

    table = Table(title=f"📁 {escape(structure.root_path)}", show_header=False)
    table.add_column("Property", style="cyan")
    table.add_column("Value")
    table.add_row("Project type", structure.project_type.value)
    table.add_row("Strategy", structure.project_type.strategy)
    table.add_row("Homepage", escape(structure.homepage_file or "-"))
    table.add_row("Content folders", escape(", ".join(sorted(structure.content_folders)) or "-"))
    table.add_row("Markdown files", str(len(structure.markdown_files)))
    table.add_row("HTML files", str(len(structure.html_files)))
    table.add_row("Images", str(len(structure.image_files)))
    table.add_row("Other files", str(len(structure.other_files)))
    table.add_row("Total files", str(structure.total_file_count))
    console.print(table)

    for warning in structure.warnings:
        console.print(f"[yellow]⚠️  {escape(str(warning))}[/yellow]")
