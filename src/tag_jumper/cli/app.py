import typer

from tag_jumper.cli.locate import attributes, tags
from tag_jumper.cli.navigate import next_boundary, previous_boundary

app = typer.Typer(
    name="tag-jumper",
    help="Tag Jumper CLI: locate tag and attribute boundaries in JSX/TSX documents.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("tags")(tags)
app.command("attributes")(attributes)
app.command("next")(next_boundary)
app.command("prev")(previous_boundary)


def main() -> None:
    app()
