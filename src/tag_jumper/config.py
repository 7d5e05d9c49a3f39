import os

from tag_jumper.core.languages import DEFAULT_LANGUAGE, normalize_language
from tag_jumper.models import BoundaryCategory

# Two extraction kinds per snapshot, so this holds 32 distinct document states.
DEFAULT_CACHE_CAPACITY = 64

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def get_cache_capacity() -> int:
    raw = os.getenv("TAG_JUMPER_CACHE_CAPACITY", str(DEFAULT_CACHE_CAPACITY))
    try:
        capacity = int(raw)
    except ValueError:
        raise ValueError(f"TAG_JUMPER_CACHE_CAPACITY must be an integer, got {raw!r}") from None
    if capacity <= 0:
        raise ValueError(f"TAG_JUMPER_CACHE_CAPACITY must be positive, got {capacity}")
    return capacity


def get_default_language() -> str:
    return normalize_language(os.getenv("TAG_JUMPER_LANGUAGE", DEFAULT_LANGUAGE))


def attributes_include_tags() -> bool:
    """Whether attribute navigation also stops at tag boundaries."""
    raw = os.getenv("TAG_JUMPER_ATTRIBUTES_INCLUDE_TAGS", "false").strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(f"TAG_JUMPER_ATTRIBUTES_INCLUDE_TAGS must be a boolean, got {raw!r}")


def categories_for(target: BoundaryCategory, include_tags_with_attributes: bool) -> frozenset[BoundaryCategory]:
    if target is BoundaryCategory.ATTRIBUTE and include_tags_with_attributes:
        return frozenset({BoundaryCategory.ATTRIBUTE, BoundaryCategory.TAG})
    return frozenset({target})
