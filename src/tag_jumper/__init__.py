from tag_jumper.core.cache import BoundaryCache, content_fingerprint
from tag_jumper.core.extractor import extract_attribute_boundaries, extract_tag_boundaries
from tag_jumper.core.navigation import Direction, NavigationResolver, create_resolver
from tag_jumper.errors import (
    MalformedNodeError,
    SourceSyntaxError,
    TagJumperError,
    UnsupportedExpressionKindError,
)
from tag_jumper.models import BoundaryCategory, BoundaryList, ExpressionKind

__all__ = [
    "BoundaryCache",
    "BoundaryCategory",
    "BoundaryList",
    "Direction",
    "ExpressionKind",
    "MalformedNodeError",
    "NavigationResolver",
    "SourceSyntaxError",
    "TagJumperError",
    "UnsupportedExpressionKindError",
    "content_fingerprint",
    "create_resolver",
    "extract_attribute_boundaries",
    "extract_tag_boundaries",
]
