"""Unit tests for environment-driven configuration."""

import pytest

from tag_jumper.config import (
    DEFAULT_CACHE_CAPACITY,
    attributes_include_tags,
    categories_for,
    get_cache_capacity,
    get_default_language,
)
from tag_jumper.models import BoundaryCategory


def test_cache_capacity_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TAG_JUMPER_CACHE_CAPACITY", raising=False)
    assert get_cache_capacity() == DEFAULT_CACHE_CAPACITY


def test_cache_capacity_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TAG_JUMPER_CACHE_CAPACITY", "128")
    assert get_cache_capacity() == 128


@pytest.mark.parametrize("raw", ["0", "-4", "many"])
def test_cache_capacity_rejects_invalid(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("TAG_JUMPER_CACHE_CAPACITY", raw)
    with pytest.raises(ValueError, match="TAG_JUMPER_CACHE_CAPACITY"):
        get_cache_capacity()


def test_default_language(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TAG_JUMPER_LANGUAGE", raising=False)
    assert get_default_language() == "tsx"
    monkeypatch.setenv("TAG_JUMPER_LANGUAGE", "JS")
    assert get_default_language() == "javascript"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("true", True), ("Yes", True), ("on", True), ("0", False), ("false", False), ("off", False)],
)
def test_attributes_include_tags(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("TAG_JUMPER_ATTRIBUTES_INCLUDE_TAGS", raw)
    assert attributes_include_tags() is expected


def test_attributes_include_tags_defaults_off(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TAG_JUMPER_ATTRIBUTES_INCLUDE_TAGS", raising=False)
    assert attributes_include_tags() is False


def test_attributes_include_tags_rejects_garbage(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TAG_JUMPER_ATTRIBUTES_INCLUDE_TAGS", "sometimes")
    with pytest.raises(ValueError):
        attributes_include_tags()


def test_categories_for() -> None:
    assert categories_for(BoundaryCategory.TAG, True) == {BoundaryCategory.TAG}
    assert categories_for(BoundaryCategory.ATTRIBUTE, False) == {BoundaryCategory.ATTRIBUTE}
    assert categories_for(BoundaryCategory.ATTRIBUTE, True) == {BoundaryCategory.ATTRIBUTE, BoundaryCategory.TAG}
