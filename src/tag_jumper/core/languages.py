from pathlib import Path

_LANGUAGE_ALIASES = {
    "cjs": "javascript",
    "javascript": "javascript",
    "javascriptreact": "javascript",
    "js": "javascript",
    "jsx": "javascript",
    "mjs": "javascript",
    "ts": "tsx",
    "tsx": "tsx",
    "typescript": "tsx",
    "typescriptreact": "tsx",
}

# Plain .ts files still go through the tsx grammar: the typescript grammar has no markup.
_EXTENSION_LANGUAGE_MAP = {
    ".cjs": "javascript",
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".ts": "tsx",
    ".tsx": "tsx",
}

SUPPORTED_LANGUAGES = frozenset(_EXTENSION_LANGUAGE_MAP.values())
DEFAULT_LANGUAGE = "tsx"


def normalize_language(language: str) -> str:
    normalized = language.strip().lower()
    resolved = _LANGUAGE_ALIASES.get(normalized, normalized)
    if resolved not in SUPPORTED_LANGUAGES:
        raise ValueError(f"Unsupported language '{language}'. Supported: {sorted(SUPPORTED_LANGUAGES)}")
    return resolved


def detect_language_from_path(file_path: Path) -> str:
    suffix = file_path.suffix.lower()
    if suffix in _EXTENSION_LANGUAGE_MAP:
        return _EXTENSION_LANGUAGE_MAP[suffix]
    raise ValueError(f"Unsupported file extension: {suffix}")


def resolve_language(language: str | None, file_path: Path | None) -> str:
    if language:
        return normalize_language(language)
    if file_path:
        return detect_language_from_path(file_path)
    raise ValueError("Language must be provided when no file path is available.")
