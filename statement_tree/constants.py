"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

SOURCE_ENCODING = "utf-8"

# Language id (as used by editors) -> tree-sitter-language-pack grammar name.
LANGUAGE_GRAMMARS: dict[str, str] = {
    "c": "c",
    "cpp": "cpp",
    "csharp": "csharp",
    "go": "go",
    "java": "java",
    "javascript": "javascript",
    "javascriptreact": "javascript",
    "jsx": "javascript",
    "typescript": "typescript",
    "typescriptreact": "tsx",
    "php": "php",
    "python": "python",
    "ruby": "ruby",
}

SUPPORTED_LANGUAGES: tuple[str, ...] = tuple(LANGUAGE_GRAMMARS.keys())

# Languages whose completions are trimmed at statement boundaries without
# an explicit opt-in from the caller.
TRIMMED_BY_DEFAULT_LANGUAGES: frozenset[str] = frozenset(
    {
        "javascript",
        "javascriptreact",
        "jsx",
        "typescript",
        "typescriptreact",
        "go",
    }
)

ERROR_NODE_TYPE = "ERROR"

DESCRIPTION_LIMIT = 33
DESCRIPTION_EDGE = 15
DESCRIPTION_ELLIPSIS = "..."

DUMP_BRANCH = "+- "
DUMP_CONTINUATION = "|  "
DUMP_LAST_CONTINUATION = "   "
