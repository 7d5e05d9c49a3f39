from pathlib import Path
from typing import Annotated

import typer

from tag_jumper.cli.common import (
    configure_logging,
    console,
    get_resolver,
    line_column,
    read_document,
    report_failure,
)
from tag_jumper.config import attributes_include_tags, categories_for
from tag_jumper.core.navigation import Direction
from tag_jumper.errors import TagJumperError
from tag_jumper.models import BoundaryCategory

FileArgument = Annotated[Path, typer.Argument(help="Document to scan.")]
OffsetOption = Annotated[int, typer.Option("--offset", help="Current cursor offset.")]
TargetOption = Annotated[BoundaryCategory, typer.Option(help="Navigate by tag or by attribute.")]
IncludeTagsOption = Annotated[
    bool | None,
    typer.Option(
        "--include-tags/--no-include-tags",
        help="Also stop at tag boundaries when navigating attributes. Defaults to TAG_JUMPER_ATTRIBUTES_INCLUDE_TAGS.",
    ),
]
LanguageOption = Annotated[str | None, typer.Option(help="Grammar to parse with (tsx, javascript).")]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")]


def _navigate(
    direction: Direction,
    file: Path,
    offset: int,
    target: BoundaryCategory,
    include_tags: bool | None,
    language: str | None,
    verbose: bool,
) -> None:
    configure_logging(verbose)
    text, resolved = read_document(file, language)
    if include_tags is None:
        include_tags = attributes_include_tags()
    categories = categories_for(target, include_tags)
    resolver = get_resolver(resolved)

    try:
        if direction is Direction.FORWARD:
            boundary = resolver.find_next_boundary(text, offset, categories)
        else:
            boundary = resolver.find_previous_boundary(text, offset, categories)
    except TagJumperError as exc:
        report_failure(exc)
        raise typer.Exit(1) from None

    if boundary is None:
        console.print(f"No {target.value} boundary {direction.value} of offset {offset}.")
        return
    line, column = line_column(text, boundary)
    console.print(f"{boundary} (line {line}, column {column})")


def next_boundary(
    file: FileArgument,
    offset: OffsetOption,
    target: TargetOption = BoundaryCategory.TAG,
    include_tags: IncludeTagsOption = None,
    language: LanguageOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the nearest boundary after the offset."""
    _navigate(Direction.FORWARD, file, offset, target, include_tags, language, verbose)


def previous_boundary(
    file: FileArgument,
    offset: OffsetOption,
    target: TargetOption = BoundaryCategory.TAG,
    include_tags: IncludeTagsOption = None,
    language: LanguageOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the nearest boundary before the offset."""
    _navigate(Direction.BACKWARD, file, offset, target, include_tags, language, verbose)
