import bisect
import logging
from collections.abc import Collection
from enum import Enum

from tag_jumper.config import get_cache_capacity, get_default_language
from tag_jumper.core.cache import BoundaryCache
from tag_jumper.core.extractor import extract_boundaries
from tag_jumper.core.languages import normalize_language
from tag_jumper.models import BoundaryCategory

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


def nearest_boundary(offsets: list[int], position: int, direction: Direction) -> int | None:
    """Nearest offset strictly after (forward) or strictly before (backward) ``position``.

    ``offsets`` must be sorted ascending.
    """
    if direction is Direction.FORWARD:
        index = bisect.bisect_right(offsets, position)
        return offsets[index] if index < len(offsets) else None
    index = bisect.bisect_left(offsets, position)
    return offsets[index - 1] if index > 0 else None


class NavigationResolver:
    """Answers "where is the next/previous tag or attribute" for a document snapshot.

    Boundary lists come from the shared cache, so repeated commands over an
    unchanged document parse it once per extraction kind.
    """

    def __init__(self, cache: BoundaryCache, language: str = "tsx") -> None:
        self.cache = cache
        self.language = normalize_language(language)

    def _offsets(self, text: str, category: BoundaryCategory, language: str | None) -> tuple[int, ...]:
        resolved = normalize_language(language) if language else self.language
        return self.cache.get_or_compute(text, category, resolved, extract_boundaries).offsets

    def locate_tag_boundaries(self, text: str, language: str | None = None) -> list[int]:
        return list(self._offsets(text, BoundaryCategory.TAG, language))

    def locate_attribute_boundaries(self, text: str, language: str | None = None) -> list[int]:
        return list(self._offsets(text, BoundaryCategory.ATTRIBUTE, language))

    def merged_boundaries(
        self, text: str, categories: Collection[BoundaryCategory], language: str | None = None
    ) -> list[int]:
        if not categories:
            raise ValueError("At least one boundary category must be selected.")
        merged: set[int] = set()
        for category in categories:
            merged.update(self._offsets(text, BoundaryCategory(category), language))
        return sorted(merged)

    def find_boundary(
        self,
        text: str,
        current_offset: int,
        direction: Direction,
        want_tags: bool,
        want_attributes: bool,
        language: str | None = None,
    ) -> int | None:
        categories = []
        if want_tags:
            categories.append(BoundaryCategory.TAG)
        if want_attributes:
            categories.append(BoundaryCategory.ATTRIBUTE)
        offsets = self.merged_boundaries(text, categories, language)
        target = nearest_boundary(offsets, current_offset, direction)
        logger.debug("Boundary %s of %d: %s", direction.value, current_offset, target)
        return target

    def find_next_boundary(
        self, text: str, position: int, categories: Collection[BoundaryCategory], language: str | None = None
    ) -> int | None:
        offsets = self.merged_boundaries(text, categories, language)
        return nearest_boundary(offsets, position, Direction.FORWARD)

    def find_previous_boundary(
        self, text: str, position: int, categories: Collection[BoundaryCategory], language: str | None = None
    ) -> int | None:
        offsets = self.merged_boundaries(text, categories, language)
        return nearest_boundary(offsets, position, Direction.BACKWARD)


def create_resolver(capacity: int | None = None, language: str | None = None) -> NavigationResolver:
    """Build a resolver with its own cache, sized from configuration unless given."""
    cache = BoundaryCache(capacity if capacity is not None else get_cache_capacity())
    return NavigationResolver(cache, language or get_default_language())
