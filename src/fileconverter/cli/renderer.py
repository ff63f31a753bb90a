"""Renderer for CLI output.

This module renders source reports and the compatibility matrix as Rich
tables.
"""

from typing import Iterable, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fileconverter.core.compatibility import is_compatible
from fileconverter.models.core import MediaCategory, OutputFormat, SourceReport


def _yes_no(value: Optional[bool]) -> str:
    if value is None:
        return "-"
    return "[green]yes[/green]" if value else "[red]no[/red]"


def render_report(report: SourceReport, console: Console | None = None) -> None:
    """Render a source report as a two column table.

    Args:
        report: The report to render.
        console: Optional Console instance to use for rendering.
    """
    console = console or Console()

    if not report.valid:
        console.print(f"[red]Malformed path:[/red] {escape(report.path)}")
        if report.error:
            console.print(f"[dim]Reason:[/dim] {escape(report.error)}")
        return

    table = Table(title=f"Source: {escape(report.path)}", show_header=False)
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")

    parts = report.parts
    if parts is not None:
        table.add_row("Drive", escape(parts.drive))
        table.add_row(
            "Directories", escape(" > ".join(parts.directories)) or "[dim](none)[/dim]"
        )
        table.add_row("Filename", escape(parts.filename))
        table.add_row("Extension", escape(parts.extension) or "[dim](none)[/dim]")
    table.add_row("Category", report.category.value)
    table.add_row("Optical drive", _yes_no(report.on_optical_drive))
    if report.track_number is not None:
        table.add_row("CD track", str(report.track_number))
    if report.output_format is not None:
        table.add_row("Output format", report.output_format.value)
        table.add_row("Compatible", _yes_no(report.compatible))

    console.print(table)


def render_matrix(
    console: Console | None = None,
    categories: Iterable[MediaCategory] = tuple(MediaCategory),
) -> None:
    """Render the output format / media category compatibility table."""
    console = console or Console()
    categories = list(categories)

    table = Table(title="Output format compatibility")
    table.add_column("Format", style="bold")
    for category in categories:
        table.add_column(category.value, justify="center")

    for output_format in OutputFormat:
        table.add_row(
            output_format.value,
            *(
                "[green]x[/green]" if is_compatible(output_format, category) else ""
                for category in categories
            ),
        )

    console.print(table)
