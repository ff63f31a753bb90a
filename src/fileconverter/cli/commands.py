"""CLI commands for fileconverter.

This module implements the user-facing commands that expose the path grammar
and media classification helpers.
- Uses Typer for declarative CLI structure and option parsing.
- All output is routed through Rich Console for consistent, styled UX.

Design:
- Annotated is used for CLI argument/option definitions.
- The core helpers are independent; ``build_report`` is where they are
  composed for a single source path.
- Exit codes are defined as an Enum.
"""

import os
import sys
from enum import Enum
from typing import Annotated, Iterable, Optional

import typer
from rich.console import Console
from rich.markup import escape

from fileconverter.cli.console import ENV_DISABLE_RICH, ConsoleManager
from fileconverter.cli.renderer import render_matrix, render_report
from fileconverter.core.categories import category_of
from fileconverter.core.compatibility import compatible_formats, is_compatible
from fileconverter.core.drives import is_optical_drive
from fileconverter.core.path_grammar import decompose_path
from fileconverter.core.tracks import extract_track_number, is_cda_track
from fileconverter.core.unique_path import allocate_unique_path
from fileconverter.errors import FileConverterError, MalformedPathError
from fileconverter.fs.storage import get_user_data_dir, path_exists
from fileconverter.models.core import MediaCategory, OutputFormat, SourceReport
from fileconverter.utils.config import (
    get_optical_drive_letters,
    set_optical_drive_letters,
)

app = typer.Typer(
    name="fileconverter",
    help="Inspect source paths and output formats for file conversions.",
    add_completion=True,
)


class ExitCode(int, Enum):
    """Exit codes for CLI commands."""

    SUCCESS = 0
    ERROR = 1
    INCOMPATIBLE = 2


def validate_output_format(value: Optional[str]) -> Optional[OutputFormat]:
    """Validate and convert a string to an OutputFormat.

    Raises:
        typer.BadParameter: If the value is not a known output format.
    """
    if value is None:
        return None
    try:
        return OutputFormat(value.strip().lstrip(".").lower())
    except ValueError:
        valid = ", ".join(fmt.value for fmt in OutputFormat)
        raise typer.BadParameter(f"Invalid output format. Must be one of: {valid}")


def validate_category(value: str) -> MediaCategory:
    """Validate and convert a string such as ``"animated-image"`` to a MediaCategory.

    Raises:
        typer.BadParameter: If the value is not a known category.
    """
    wanted = value.replace("-", " ").replace("_", " ").strip().lower()
    for category in MediaCategory:
        if category.value.lower() == wanted:
            return category
    valid = ", ".join(c.value.lower().replace(" ", "-") for c in MediaCategory)
    raise typer.BadParameter(f"Invalid category. Must be one of: {valid}")


def build_report(
    path: str,
    output_format: Optional[OutputFormat] = None,
    optical_drive_letters: Iterable[str] = (),
) -> SourceReport:
    """Answer every classification question for a single source path."""
    try:
        parts = decompose_path(path)
    except MalformedPathError as e:
        return SourceReport(path=path, valid=False, error=e.reason)

    category = category_of(parts.extension)
    return SourceReport(
        path=path,
        valid=True,
        parts=parts,
        category=category,
        output_format=output_format,
        compatible=(
            is_compatible(output_format, category) if output_format is not None else None
        ),
        on_optical_drive=is_optical_drive(path, optical_drive_letters),
        track_number=extract_track_number(path) if is_cda_track(path) else None,
    )


SOURCE_PATH = Annotated[
    str,
    typer.Argument(help="Absolute source path, e.g. 'C:\\Music\\song.flac'"),
]

OUTPUT_FORMAT = Annotated[
    Optional[str],
    typer.Option(
        "--format",
        "-f",
        help="Output format to check compatibility against (mp3, mp4, png, ...)",
    ),
]

OPTICAL = Annotated[
    Optional[str],
    typer.Option(
        "--optical",
        help="Letters of the mounted optical drives, e.g. 'EF'. "
        "Defaults to the drives.optical setting.",
    ),
]

JSON_OUTPUT = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Output results in JSON format",
    ),
]


@app.callback()
def callback(
    no_rich: bool = typer.Option(
        False,
        "--no-rich",
        help=(
            "Disable Rich coloured output. Can also be set with the "
            "FILECONVERTER_NO_RICH environment variable."
        ),
    ),
) -> None:
    """Top-level CLI callback adding global options."""
    if no_rich:
        os.environ[ENV_DISABLE_RICH] = "1"


@app.command()
def inspect(
    path: SOURCE_PATH,
    output_format: OUTPUT_FORMAT = None,
    optical: OPTICAL = None,
    json_output: JSON_OUTPUT = False,
) -> None:
    """Decompose a source path and classify it."""
    with ConsoleManager() as console:
        result = _inspect_impl(console, path, output_format, optical, json_output)
    # ConsoleManager prints any exception leaving its context, Exit included.
    raise typer.Exit(result)


def _inspect_impl(
    console: Console,
    path: str,
    output_format: Optional[str],
    optical: Optional[str],
    json_output: bool,
) -> ExitCode:
    """Implementation of the inspect command."""
    try:
        fmt = validate_output_format(output_format)
    except typer.BadParameter as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return ExitCode.ERROR

    try:
        report = build_report(path, fmt, get_optical_drive_letters(optical))
    except FileConverterError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return ExitCode.ERROR

    if json_output:
        sys.stdout.write(report.model_dump_json(indent=2) + "\n")
    else:
        render_report(report, console=console)

    if not report.valid:
        return ExitCode.ERROR
    if report.compatible is False:
        return ExitCode.INCOMPATIBLE
    return ExitCode.SUCCESS


@app.command()
def unique(path: SOURCE_PATH) -> None:
    """Print a free output path derived from PATH."""
    result = ExitCode.SUCCESS
    with ConsoleManager() as console:
        try:
            free_path = allocate_unique_path(path, path_exists)
        except FileConverterError as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            result = ExitCode.ERROR
        else:
            console.print(free_path, markup=False, highlight=False, soft_wrap=True)
    if result != ExitCode.SUCCESS:
        raise typer.Exit(result)


@app.command()
def formats(
    category: Annotated[
        Optional[str],
        typer.Argument(help="Only list formats for this category (audio, video, ...)"),
    ] = None,
) -> None:
    """Show which output formats accept which input categories."""
    result = ExitCode.SUCCESS
    with ConsoleManager() as console:
        if category is None:
            render_matrix(console)
        else:
            try:
                media_category = validate_category(category)
            except typer.BadParameter as e:
                console.print(f"[red]Error: {escape(str(e))}[/red]")
                result = ExitCode.ERROR
            else:
                names = ", ".join(
                    fmt.value for fmt in compatible_formats(media_category)
                )
                console.print(f"[bold]{media_category.value}[/bold]: {names}")
    if result != ExitCode.SUCCESS:
        raise typer.Exit(result)


@app.command()
def drives(
    set_letters: Annotated[
        Optional[str],
        typer.Option("--set", help="Store these optical drive letters, e.g. 'EF'"),
    ] = None,
) -> None:
    """Show or store the optical drive letters."""
    with ConsoleManager() as console:
        if set_letters is not None:
            letters = set_optical_drive_letters(set_letters)
            console.print(f"Saved optical drives: {', '.join(letters) or '(none)'}")
            return
        letters = get_optical_drive_letters()
        if not letters:
            console.print("[yellow]No optical drives configured.[/yellow]")
            return
        console.print(f"Optical drives: {', '.join(letters)}")


@app.command("data-dir")
def data_dir() -> None:
    """Print the application data directory, creating it if needed."""
    with ConsoleManager() as console:
        console.print(
            str(get_user_data_dir()), markup=False, highlight=False, soft_wrap=True
        )


@app.command()
def version() -> None:
    """Show the version of fileconverter."""
    from fileconverter.__about__ import __version__

    with ConsoleManager() as console:
        console.print(f"FileConverter version: [bold]{__version__}[/bold]")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
