"""Unit tests for the structural parser."""

from types import SimpleNamespace

import pytest
from tree_sitter import Parser

from tag_jumper.core.parser import classify_expression, parse_document
from tag_jumper.errors import SourceSyntaxError, UnsupportedExpressionKindError
from tag_jumper.models import AttributeKind, ExpressionKind, TagKind, ValueShape


class TestParseDocument:
    def test_tags_in_document_order(self) -> None:
        document = parse_document("<div><br /></div>", "tsx")

        assert [tag.kind for tag in document.tags] == [TagKind.OPEN, TagKind.SELF_CLOSING, TagKind.CLOSE]
        assert [tag.name for tag in document.tags] == ["div", "br", "div"]

    def test_tag_offsets(self) -> None:
        text = "<div>content</div>"
        document = parse_document(text, "tsx")

        opening = document.tags[0]
        assert (opening.start, opening.end) == (0, 5)
        closing = document.tags[1]
        assert (closing.start, closing.end) == (text.index("</div>"), len(text))

    def test_attribute_kinds_and_shapes(self) -> None:
        document = parse_document('<Widget a="x" b c={1} {...rest} d=<i /> />', "tsx")
        attributes = document.tags[0].attributes

        assert [a.kind for a in attributes] == [
            AttributeKind.NAMED,
            AttributeKind.NAMED,
            AttributeKind.NAMED,
            AttributeKind.SPREAD,
            AttributeKind.NAMED,
        ]
        assert [a.name for a in attributes] == ["a", "b", "c", None, "d"]
        assert attributes[0].value is not None and attributes[0].value.shape is ValueShape.LITERAL
        assert attributes[1].value is None
        assert attributes[2].value is not None and attributes[2].value.shape is ValueShape.EXPRESSION
        assert attributes[2].value.expression_kind is ExpressionKind.NUMBER
        assert attributes[4].value is not None and attributes[4].value.shape is ValueShape.ELEMENT

    def test_member_tag_name_is_not_an_attribute(self) -> None:
        document = parse_document("<Foo.Bar baz />", "tsx")
        tag = document.tags[0]

        assert tag.name == "Foo.Bar"
        assert [a.name for a in tag.attributes] == ["baz"]

    def test_fragment_opener_has_no_name(self) -> None:
        document = parse_document("<>text</>", "tsx")

        assert document.tags[0].kind is TagKind.OPEN
        assert document.tags[0].name is None

    def test_byte_offsets_converted_for_non_ascii(self) -> None:
        text = '// ünïcödé\n<b title="x" />'
        document = parse_document(text, "tsx")

        assert document.tags[0].start == text.index("<b")
        assert document.tags[0].end == len(text)
        assert document.length == len(text)

    def test_syntax_error_has_position(self) -> None:
        with pytest.raises(SourceSyntaxError) as exc_info:
            parse_document("<div>\n  <span\n</div>", "tsx")

        assert exc_info.value.line is not None
        assert exc_info.value.column is not None
        assert "Syntax error" in str(exc_info.value)


class TestClassifyExpression:
    def test_classifies_real_node(self, tsx_parser: Parser) -> None:
        tree = tsx_parser.parse(b"x = getValue();")
        assignment = tree.root_node.named_children[0].named_children[0]
        right = assignment.child_by_field_name("right")

        assert right is not None
        assert classify_expression(right) is ExpressionKind.CALL

    def test_unknown_node_type_raises(self) -> None:
        node = SimpleNamespace(type="do_expression", start_byte=7, child_by_field_name=lambda _: None)

        with pytest.raises(UnsupportedExpressionKindError) as exc_info:
            classify_expression(node)  # type: ignore[arg-type]

        assert exc_info.value.node_type == "do_expression"
        assert exc_info.value.position == 7
