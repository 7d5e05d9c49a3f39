"""Structural parser: markup tags and their attributes from a tree-sitter parse."""

import logging
from typing import cast

from tree_sitter import Node
from tree_sitter_language_pack import SupportedLanguage, get_parser

from tag_jumper.errors import MalformedNodeError, SourceSyntaxError, UnsupportedExpressionKindError
from tag_jumper.models import (
    AttributeKind,
    AttributeValue,
    ExpressionKind,
    JsxAttribute,
    JsxTag,
    ParsedDocument,
    TagKind,
    ValueShape,
)

logger = logging.getLogger(__name__)

_TAG_KINDS = {
    "jsx_opening_element": TagKind.OPEN,
    "jsx_self_closing_element": TagKind.SELF_CLOSING,
    "jsx_closing_element": TagKind.CLOSE,
}

# Grammar node types whose kind needs no look at their children.
_EXPRESSION_KINDS = {
    "array": ExpressionKind.ARRAY,
    "as_expression": ExpressionKind.AS,
    "assignment_expression": ExpressionKind.ASSIGNMENT,
    "augmented_assignment_expression": ExpressionKind.AUGMENTED_ASSIGNMENT,
    "await_expression": ExpressionKind.AWAIT,
    "binary_expression": ExpressionKind.BINARY,
    "class": ExpressionKind.CLASS,
    "false": ExpressionKind.BOOLEAN,
    "function": ExpressionKind.FUNCTION,
    "function_expression": ExpressionKind.FUNCTION,
    "generator_function": ExpressionKind.GENERATOR_FUNCTION,
    "identifier": ExpressionKind.IDENTIFIER,
    "instantiation_expression": ExpressionKind.INSTANTIATION,
    "jsx_fragment": ExpressionKind.JSX_FRAGMENT,
    "jsx_self_closing_element": ExpressionKind.JSX_SELF_CLOSING_ELEMENT,
    "meta_property": ExpressionKind.META_PROPERTY,
    "new_expression": ExpressionKind.NEW,
    "non_null_expression": ExpressionKind.NON_NULL,
    "null": ExpressionKind.NULL,
    "number": ExpressionKind.NUMBER,
    "object": ExpressionKind.OBJECT,
    "parenthesized_expression": ExpressionKind.PARENTHESIZED,
    "regex": ExpressionKind.REGEX,
    "satisfies_expression": ExpressionKind.SATISFIES,
    "sequence_expression": ExpressionKind.SEQUENCE,
    "string": ExpressionKind.STRING,
    "subscript_expression": ExpressionKind.SUBSCRIPT,
    "super": ExpressionKind.SUPER,
    "template_string": ExpressionKind.TEMPLATE_STRING,
    "ternary_expression": ExpressionKind.TERNARY,
    "this": ExpressionKind.THIS,
    "true": ExpressionKind.BOOLEAN,
    "unary_expression": ExpressionKind.UNARY,
    "undefined": ExpressionKind.IDENTIFIER,
    "update_expression": ExpressionKind.UPDATE,
    "yield_expression": ExpressionKind.YIELD,
}


class _OffsetMap:
    """Translate tree-sitter byte offsets into string offsets."""

    def __init__(self, text: str, source: bytes) -> None:
        self._table: list[int] | None = None
        if len(source) == len(text):
            return
        table = [0] * (len(source) + 1)
        position = 0
        for index, char in enumerate(text):
            width = len(char.encode("utf-8", errors="surrogatepass"))
            for k in range(width):
                table[position + k] = index
            position += width
        table[position] = len(text)
        self._table = table

    def __call__(self, byte_offset: int) -> int:
        if self._table is None:
            return byte_offset
        return self._table[byte_offset]


def _significant_children(node: Node) -> list[Node]:
    return [child for child in node.named_children if child.type != "comment"]


def _same_node(a: Node | None, b: Node) -> bool:
    return a is not None and (a.type, a.start_byte, a.end_byte) == (b.type, b.start_byte, b.end_byte)


def _node_text(node: Node | None) -> str | None:
    if node is None or node.text is None:
        return None
    return node.text.decode("utf-8", errors="replace")


def _is_fragment(element: Node) -> bool:
    opening = element.child_by_field_name("open_tag")
    if opening is None:
        opening = next((c for c in element.named_children if c.type == "jsx_opening_element"), None)
    return opening is not None and opening.child_by_field_name("name") is None


def classify_expression(node: Node) -> ExpressionKind:
    """Map one grammar expression node onto its ``ExpressionKind``."""
    if node.type == "call_expression":
        function = node.child_by_field_name("function")
        arguments = node.child_by_field_name("arguments")
        if function is not None and function.type == "import":
            return ExpressionKind.IMPORT
        if arguments is not None and arguments.type == "template_string":
            return ExpressionKind.TAGGED_TEMPLATE
        if node.child_by_field_name("optional_chain") is not None:
            return ExpressionKind.OPTIONAL_CALL
        return ExpressionKind.CALL
    if node.type == "member_expression":
        if node.child_by_field_name("optional_chain") is not None:
            return ExpressionKind.OPTIONAL_MEMBER
        return ExpressionKind.MEMBER
    if node.type == "arrow_function":
        body = node.child_by_field_name("body")
        if body is not None and body.type == "statement_block":
            return ExpressionKind.ARROW_FUNCTION_BLOCK
        return ExpressionKind.ARROW_FUNCTION_EXPRESSION
    if node.type == "jsx_element":
        return ExpressionKind.JSX_FRAGMENT if _is_fragment(node) else ExpressionKind.JSX_ELEMENT

    kind = _EXPRESSION_KINDS.get(node.type)
    if kind is None:
        raise UnsupportedExpressionKindError(node.type, node.start_byte)
    return kind


class _DocumentBuilder:
    def __init__(self, text: str, source: bytes) -> None:
        self._offset = _OffsetMap(text, source)

    def tag(self, node: Node) -> JsxTag:
        kind = _TAG_KINDS[node.type]
        name_node = node.child_by_field_name("name")
        attributes: list[JsxAttribute] = []
        if kind is not TagKind.CLOSE:
            for child in _significant_children(node):
                if _same_node(name_node, child) or child.type == "type_arguments":
                    continue
                attributes.append(self.attribute(child))
        return JsxTag(
            kind=kind,
            start=self._offset(node.start_byte),
            end=self._offset(node.end_byte),
            name=_node_text(name_node),
            attributes=tuple(attributes),
        )

    def attribute(self, node: Node) -> JsxAttribute:
        start = self._offset(node.start_byte)
        end = self._offset(node.end_byte)

        if node.type == "jsx_expression":
            inner = _significant_children(node)
            if len(inner) != 1 or inner[0].type != "spread_element":
                raise MalformedNodeError(f"Expression container used as an attribute at position {start}")
            return JsxAttribute(kind=AttributeKind.SPREAD, start=start, end=end)

        if node.type != "jsx_attribute":
            raise MalformedNodeError(f"Unexpected attribute type '{node.type}' at position {start}")

        parts = _significant_children(node)
        if not parts or len(parts) > 2:
            raise MalformedNodeError(f"Unexpected attribute structure at position {start}")
        name = _node_text(parts[0])
        value = self.value(parts[1], name) if len(parts) == 2 else None
        return JsxAttribute(kind=AttributeKind.NAMED, start=start, end=end, name=name, value=value)

    def value(self, node: Node, attribute_name: str | None) -> AttributeValue:
        start = self._offset(node.start_byte)
        end = self._offset(node.end_byte)
        expression_kind: ExpressionKind | None = None

        if node.type == "string":
            shape = ValueShape.LITERAL
        elif node.type == "jsx_self_closing_element":
            shape = ValueShape.ELEMENT
        elif node.type == "jsx_fragment":
            shape = ValueShape.FRAGMENT
        elif node.type == "jsx_element":
            shape = ValueShape.FRAGMENT if _is_fragment(node) else ValueShape.ELEMENT
        elif node.type == "jsx_expression":
            shape = ValueShape.EXPRESSION
            inner = _significant_children(node)
            if not inner:
                expression_kind = ExpressionKind.EMPTY
            elif len(inner) == 1:
                try:
                    expression_kind = classify_expression(inner[0])
                except UnsupportedExpressionKindError as exc:
                    raise UnsupportedExpressionKindError(exc.node_type, self._offset(inner[0].start_byte)) from None
            else:
                raise MalformedNodeError(
                    f"Expression container for attribute '{attribute_name}' at position {start} "
                    f"holds {len(inner)} expressions"
                )
        else:
            raise MalformedNodeError(
                f"Unexpected value type '{node.type}' for attribute '{attribute_name}' at position {start}"
            )

        return AttributeValue(shape=shape, start=start, end=end, expression_kind=expression_kind)

    def syntax_error(self, root: Node, text: str) -> SourceSyntaxError:
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type == "ERROR" or node.is_missing:
                offset = self._offset(node.start_byte)
                line = text.count("\n", 0, offset) + 1
                column = offset - (text.rfind("\n", 0, offset) + 1) + 1
                problem = f"missing '{node.type}'" if node.is_missing else "unexpected input"
                return SourceSyntaxError(
                    f"Syntax error at line {line}, column {column}: {problem}", line=line, column=column
                )
            if node.has_error:
                stack.extend(reversed(node.children))
        return SourceSyntaxError("Syntax error in document")


def parse_document(text: str, language: str) -> ParsedDocument:
    """Parse ``text`` and return its tags in document order.

    Raises ``SourceSyntaxError`` when the grammar reports any error or missing node.
    """
    source = text.encode("utf-8", errors="surrogatepass")
    parser = get_parser(cast(SupportedLanguage, language))
    tree = parser.parse(source)
    root = tree.root_node
    builder = _DocumentBuilder(text, source)

    if root.has_error:
        raise builder.syntax_error(root, text)

    tags: list[JsxTag] = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type in _TAG_KINDS:
            tags.append(builder.tag(node))
        stack.extend(reversed(node.named_children))

    logger.debug("Parsed %d tag(s) from %d chars (%s)", len(tags), len(text), language)
    return ParsedDocument(language=language, length=len(text), tags=tuple(tags))
