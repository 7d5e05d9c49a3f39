from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class TagKind(str, Enum):
    OPEN = "open"
    SELF_CLOSING = "self_closing"
    CLOSE = "close"


class AttributeKind(str, Enum):
    NAMED = "named"
    SPREAD = "spread"


class ValueShape(str, Enum):
    """How an attribute value is written after the ``=``."""

    LITERAL = "literal"  # name="foo"
    ELEMENT = "element"  # name=<span />
    FRAGMENT = "fragment"  # name=<>...</>
    EXPRESSION = "expression"  # name={...}


class ExpressionKind(str, Enum):
    """Closed set of expression shapes that can sit inside an attribute's ``{...}``."""

    ARRAY = "array"
    ARROW_FUNCTION_BLOCK = "arrow_function_block"
    ARROW_FUNCTION_EXPRESSION = "arrow_function_expression"
    AS = "as"
    ASSIGNMENT = "assignment"
    AUGMENTED_ASSIGNMENT = "augmented_assignment"
    AWAIT = "await"
    BINARY = "binary"
    BOOLEAN = "boolean"
    CALL = "call"
    CLASS = "class"
    EMPTY = "empty"
    FUNCTION = "function"
    GENERATOR_FUNCTION = "generator_function"
    IDENTIFIER = "identifier"
    IMPORT = "import"
    INSTANTIATION = "instantiation"
    JSX_ELEMENT = "jsx_element"
    JSX_FRAGMENT = "jsx_fragment"
    JSX_SELF_CLOSING_ELEMENT = "jsx_self_closing_element"
    MEMBER = "member"
    META_PROPERTY = "meta_property"
    NEW = "new"
    NON_NULL = "non_null"
    NULL = "null"
    NUMBER = "number"
    OBJECT = "object"
    OPTIONAL_CALL = "optional_call"
    OPTIONAL_MEMBER = "optional_member"
    PARENTHESIZED = "parenthesized"
    REGEX = "regex"
    SATISFIES = "satisfies"
    SEQUENCE = "sequence"
    STRING = "string"
    SUBSCRIPT = "subscript"
    SUPER = "super"
    TAGGED_TEMPLATE = "tagged_template"
    TEMPLATE_STRING = "template_string"
    TERNARY = "ternary"
    THIS = "this"
    UNARY = "unary"
    UPDATE = "update"
    YIELD = "yield"


class AttributeValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    shape: ValueShape
    start: int
    end: int
    expression_kind: ExpressionKind | None = None


class JsxAttribute(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: AttributeKind
    start: int
    end: int
    name: str | None = None
    value: AttributeValue | None = None


class JsxTag(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: TagKind
    start: int
    end: int
    name: str | None = None
    attributes: tuple[JsxAttribute, ...] = ()


class ParsedDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    language: str
    length: int
    tags: tuple[JsxTag, ...] = ()


class BoundaryCategory(str, Enum):
    TAG = "tag"
    ATTRIBUTE = "attribute"


class BoundaryList(BaseModel):
    """Ascending, duplicate-free offsets of one boundary category."""

    model_config = ConfigDict(frozen=True)

    category: BoundaryCategory
    offsets: tuple[int, ...] = ()

    @field_validator("offsets")
    @classmethod
    def _strictly_ascending(cls, offsets: tuple[int, ...]) -> tuple[int, ...]:
        for prev, cur in zip(offsets, offsets[1:]):
            if cur <= prev:
                raise ValueError(f"Boundary offsets must be strictly ascending, got {prev} then {cur}")
        if offsets and offsets[0] < 0:
            raise ValueError(f"Boundary offsets must be non-negative, got {offsets[0]}")
        return offsets


class CacheStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    capacity: int
    entries: int = 0
    hits: int = 0
    misses: int = 0
    evictions: int = 0
