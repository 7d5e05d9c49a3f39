class TagJumperError(Exception):
    """Base class for boundary-extraction failures."""


class SourceSyntaxError(TagJumperError, ValueError):
    """The document is not well-formed markup for the selected grammar."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None) -> None:
        super().__init__(message)
        self.line = line
        self.column = column


class MalformedNodeError(TagJumperError, ValueError):
    """The parse tree holds a tag or attribute shape the extractor cannot place a boundary in."""


class UnsupportedExpressionKindError(MalformedNodeError):
    def __init__(self, node_type: str, position: int | None = None) -> None:
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Unsupported expression kind '{node_type}'{where}")
        self.node_type = node_type
        self.position = position
