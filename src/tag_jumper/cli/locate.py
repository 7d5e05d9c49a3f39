from pathlib import Path
from typing import Annotated

import typer

from tag_jumper.cli.common import configure_logging, get_resolver, read_document, render_offsets, report_failure
from tag_jumper.errors import TagJumperError

FileArgument = Annotated[Path, typer.Argument(help="Document to scan.")]
LanguageOption = Annotated[str | None, typer.Option(help="Grammar to parse with (tsx, javascript).")]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")]


def tags(file: FileArgument, language: LanguageOption = None, verbose: VerboseOption = False) -> None:
    """List tag boundaries."""
    configure_logging(verbose)
    text, resolved = read_document(file, language)
    try:
        offsets = get_resolver(resolved).locate_tag_boundaries(text)
    except TagJumperError as exc:
        report_failure(exc)
        raise typer.Exit(1) from None
    render_offsets(text, offsets)


def attributes(file: FileArgument, language: LanguageOption = None, verbose: VerboseOption = False) -> None:
    """List attribute boundaries."""
    configure_logging(verbose)
    text, resolved = read_document(file, language)
    try:
        offsets = get_resolver(resolved).locate_attribute_boundaries(text)
    except TagJumperError as exc:
        report_failure(exc)
        raise typer.Exit(1) from None
    render_offsets(text, offsets)
