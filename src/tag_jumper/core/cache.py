import hashlib
import logging
import threading
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass

from tag_jumper.models import BoundaryCategory, BoundaryList, CacheStats

logger = logging.getLogger(__name__)


def content_fingerprint(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8", errors="surrogatepass")).hexdigest()


@dataclass(frozen=True)
class CacheKey:
    fingerprint: str
    kind: BoundaryCategory
    language: str


@dataclass(frozen=True)
class _CacheEntry:
    text: str
    boundaries: BoundaryList


class BoundaryCache:
    """Bounded LRU store of boundary lists keyed by document content and extraction kind.

    Keys are content-derived, so an edited document simply misses; nothing is
    ever invalidated except by capacity pressure.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError(f"Cache capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._entries: OrderedDict[CacheKey, _CacheEntry] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, text: str, kind: BoundaryCategory, language: str) -> BoundaryList | None:
        key = CacheKey(content_fingerprint(text), kind, language)
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and entry.text != text:
                logger.warning("Fingerprint collision on %s; treating as a miss", key.fingerprint[:12])
                entry = None
            if entry is None:
                self._misses += 1
                logger.debug("Cache miss for %s/%s %s", kind.value, language, key.fingerprint[:12])
                return None
            self._entries.move_to_end(key)
            self._hits += 1
            logger.debug("Cache hit for %s/%s %s", kind.value, language, key.fingerprint[:12])
            return entry.boundaries

    def put(self, text: str, kind: BoundaryCategory, language: str, boundaries: BoundaryList) -> None:
        key = CacheKey(content_fingerprint(text), kind, language)
        with self._lock:
            self._entries[key] = _CacheEntry(text=text, boundaries=boundaries)
            self._entries.move_to_end(key)
            while len(self._entries) > self.capacity:
                evicted, _ = self._entries.popitem(last=False)
                self._evictions += 1
                logger.debug("Evicted %s/%s %s", evicted.kind.value, evicted.language, evicted.fingerprint[:12])

    def get_or_compute(
        self,
        text: str,
        kind: BoundaryCategory,
        language: str,
        compute: Callable[[str, BoundaryCategory, str], BoundaryList],
    ) -> BoundaryList:
        cached = self.get(text, kind, language)
        if cached is not None:
            return cached
        # Extraction runs unlocked; concurrent misses on the same key store equal results.
        boundaries = compute(text, kind, language)
        self.put(text, kind, language, boundaries)
        return boundaries

    def clear(self) -> None:
        """Drop all entries and reset the hit, miss and eviction counters."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0
            self._evictions = 0

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                capacity=self.capacity,
                entries=len(self._entries),
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
            )
