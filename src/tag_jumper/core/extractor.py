"""Boundary extraction over a parsed document.

Tag boundaries sit just before the ``>`` of an opening tag or the ``/>`` of a
self-closing tag. Attribute boundaries sit at the end of an attribute's
meaningful content: after a boolean attribute's name, just inside the closing
quote of a string value, or, for ``{...}`` values, at the attribute end plus
the trailing width of the embedded expression's kind.
"""

import logging

from tag_jumper.core.parser import parse_document
from tag_jumper.errors import MalformedNodeError, UnsupportedExpressionKindError
from tag_jumper.models import (
    AttributeKind,
    BoundaryCategory,
    BoundaryList,
    ExpressionKind,
    JsxAttribute,
    ParsedDocument,
    TagKind,
    ValueShape,
)

logger = logging.getLogger(__name__)

# Characters of closing syntax between an expression's meaningful end and the
# attribute end. -1 skips the embedding "}"; -2 also skips the expression's own
# closing quote, backtick, bracket, brace or slash.
TRAILING_WIDTHS: dict[ExpressionKind, int] = {
    ExpressionKind.ARRAY: -2,  # {[1, 2, 3]}
    ExpressionKind.ARROW_FUNCTION_BLOCK: -2,  # {() => { go() }}
    ExpressionKind.ARROW_FUNCTION_EXPRESSION: -1,  # {e => go(e)}
    ExpressionKind.AS: -1,  # {foo as string}
    ExpressionKind.ASSIGNMENT: -1,  # {foo = bar}
    ExpressionKind.AUGMENTED_ASSIGNMENT: -1,  # {count += 1}
    ExpressionKind.AWAIT: -1,  # {await fetchData()}
    ExpressionKind.BINARY: -1,  # {1 + 2}, {foo && bar}
    ExpressionKind.BOOLEAN: -1,  # {true}
    ExpressionKind.CALL: -1,  # {getValue()}
    ExpressionKind.CLASS: -2,  # {class { method() {} }}
    ExpressionKind.EMPTY: -1,  # {}, {/* comment */}
    ExpressionKind.FUNCTION: -2,  # {function () { return 1 }}
    ExpressionKind.GENERATOR_FUNCTION: -2,  # {function* () { yield 1 }}
    ExpressionKind.IDENTIFIER: -1,  # {foo}
    ExpressionKind.IMPORT: -1,  # {import("foo")}
    ExpressionKind.INSTANTIATION: -1,  # {foo<string>}
    ExpressionKind.JSX_ELEMENT: -1,  # {<span>bar</span>}
    ExpressionKind.JSX_FRAGMENT: -1,  # {<>{foo}</>}
    ExpressionKind.JSX_SELF_CLOSING_ELEMENT: -1,  # {<br />}
    ExpressionKind.MEMBER: -1,  # {foo.bar}
    ExpressionKind.META_PROPERTY: -1,  # {import.meta}
    ExpressionKind.NEW: -1,  # {new Date()}
    ExpressionKind.NON_NULL: -1,  # {foo!}
    ExpressionKind.NULL: -1,  # {null}
    ExpressionKind.NUMBER: -1,  # {42}, {123n}
    ExpressionKind.OBJECT: -2,  # {{ color: "red" }}
    ExpressionKind.OPTIONAL_CALL: -1,  # {foo?.()}
    ExpressionKind.OPTIONAL_MEMBER: -1,  # {foo?.bar}
    ExpressionKind.PARENTHESIZED: -2,  # {(foo, bar)}
    ExpressionKind.REGEX: -2,  # {/abc/}
    ExpressionKind.SATISFIES: -1,  # {foo satisfies Bar}
    ExpressionKind.SEQUENCE: -1,  # {foo, bar}
    ExpressionKind.STRING: -2,  # {"bar"}
    ExpressionKind.SUBSCRIPT: -1,  # {foo[0]}
    ExpressionKind.SUPER: -1,  # {super}
    ExpressionKind.TAGGED_TEMPLATE: -2,  # {tag`template`}
    ExpressionKind.TEMPLATE_STRING: -2,  # {`foo${bar}`}
    ExpressionKind.TERNARY: -1,  # {foo ? "a" : "b"}
    ExpressionKind.THIS: -1,  # {this}
    ExpressionKind.UNARY: -1,  # {!foo}
    ExpressionKind.UPDATE: -1,  # {count++}
    ExpressionKind.YIELD: -1,  # {yield foo}
}


def trailing_width(kind: ExpressionKind) -> int:
    try:
        return TRAILING_WIDTHS[kind]
    except KeyError:
        raise UnsupportedExpressionKindError(kind.value) from None


def attribute_boundary(attribute: JsxAttribute) -> int:
    if attribute.kind is AttributeKind.SPREAD:
        return attribute.end - 1

    value = attribute.value
    if value is None:
        return attribute.end
    if value.shape in (ValueShape.LITERAL, ValueShape.ELEMENT, ValueShape.FRAGMENT):
        return attribute.end - 1
    if value.expression_kind is None:
        raise MalformedNodeError(
            f"Expression value without an expression kind for attribute '{attribute.name}' "
            f"at position {attribute.start}"
        )
    return attribute.end + trailing_width(value.expression_kind)


def _to_boundary_list(category: BoundaryCategory, offsets: list[int]) -> BoundaryList:
    return BoundaryList(category=category, offsets=tuple(sorted(set(offsets))))


def tag_boundaries(document: ParsedDocument) -> BoundaryList:
    offsets: list[int] = []
    for tag in document.tags:
        if tag.kind is TagKind.SELF_CLOSING:
            offsets.append(tag.end - 2)
        elif tag.kind is TagKind.OPEN and tag.name is not None:
            offsets.append(tag.end - 1)
    return _to_boundary_list(BoundaryCategory.TAG, offsets)


def attribute_boundaries(document: ParsedDocument) -> BoundaryList:
    offsets = [
        attribute_boundary(attribute)
        for tag in document.tags
        if tag.kind is not TagKind.CLOSE
        for attribute in tag.attributes
    ]
    return _to_boundary_list(BoundaryCategory.ATTRIBUTE, offsets)


def extract_tag_boundaries(text: str, language: str) -> BoundaryList:
    boundaries = tag_boundaries(parse_document(text, language))
    logger.debug("Extracted %d tag boundaries", len(boundaries.offsets))
    return boundaries


def extract_attribute_boundaries(text: str, language: str) -> BoundaryList:
    boundaries = attribute_boundaries(parse_document(text, language))
    logger.debug("Extracted %d attribute boundaries", len(boundaries.offsets))
    return boundaries


def extract_boundaries(text: str, category: BoundaryCategory, language: str) -> BoundaryList:
    if category is BoundaryCategory.TAG:
        return extract_tag_boundaries(text, language)
    return extract_attribute_boundaries(text, language)
