import logging
from collections.abc import Sequence
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tag_jumper.core.languages import resolve_language
from tag_jumper.core.navigation import NavigationResolver, create_resolver
from tag_jumper.errors import SourceSyntaxError, TagJumperError

logger = logging.getLogger(__name__)
console = Console()


def configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def read_document(file: Path, language: str | None) -> tuple[str, str]:
    """Return (text, resolved_language) for ``file``."""
    # Decoded without newline translation so offsets match the bytes on disk (CRLF included).
    try:
        text = file.read_bytes().decode("utf-8")
    except FileNotFoundError:
        console.print(f"[red]File not found: {escape(str(file))}[/red]")
        raise typer.Exit(1) from None
    except UnicodeDecodeError as exc:
        console.print(f"[red]{escape(str(file))} is not valid UTF-8: {escape(str(exc))}[/red]")
        raise typer.Exit(1) from None
    except OSError as exc:
        console.print(f"[red]Cannot read {escape(str(file))}: {escape(exc.strerror or str(exc))}[/red]")
        raise typer.Exit(1) from None
    try:
        resolved = resolve_language(language, file)
    except ValueError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from None
    return text, resolved


def get_resolver(language: str) -> NavigationResolver:
    return create_resolver(language=language)


def report_failure(exc: TagJumperError) -> None:
    if isinstance(exc, SourceSyntaxError):
        logger.info("No navigation possible: %s", exc)
    console.print(f"[red]{escape(str(exc))}[/red]")


def line_column(text: str, offset: int) -> tuple[int, int]:
    line = text.count("\n", 0, offset) + 1
    column = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return line, column


def render_offsets(text: str, offsets: Sequence[int]) -> None:
    table = Table(show_lines=False)
    for h in ("offset", "line", "column"):
        table.add_column(h)
    for offset in offsets:
        line, column = line_column(text, offset)
        table.add_row(str(offset), str(line), str(column))
    console.print(table)
    console.print(f"({len(offsets)} boundaries)")
