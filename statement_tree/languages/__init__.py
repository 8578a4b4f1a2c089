"""Grammar Registry — per-language statement classification tables."""

from __future__ import annotations

import importlib
import logging
from functools import lru_cache

from ._base import NOT_A_STATEMENT, SIMPLE, BaseGrammar, StatementKind
from .. import constants
from ..errors import UnsupportedLanguageError

logger = logging.getLogger(__name__)

# Lazy imports to avoid loading every grammar table at startup
_GRAMMAR_CLASSES: dict[str, str] = {
    "c": "c.CGrammar",
    "cpp": "cpp.CppGrammar",
    "csharp": "csharp.CSharpGrammar",
    "go": "go.GoGrammar",
    "java": "java.JavaGrammar",
    "javascript": "javascript.JavaScriptGrammar",
    "typescript": "typescript.TypeScriptGrammar",
    "tsx": "typescript.TsxGrammar",
    "php": "php.PhpGrammar",
    "python": "python.PythonGrammar",
    "ruby": "ruby.RubyGrammar",
}


def grammar_name(language_id: str) -> str:
    """Return the tree-sitter grammar name for *language_id*.

    Raises ``UnsupportedLanguageError`` if the id is not registered.
    """
    name = constants.LANGUAGE_GRAMMARS.get(language_id)
    if name is None:
        raise UnsupportedLanguageError(language_id)
    return name


def is_supported(language_id: str) -> bool:
    return language_id in constants.LANGUAGE_GRAMMARS


@lru_cache(maxsize=None)
def _load_grammar(name: str) -> BaseGrammar:
    module_name, class_name = _GRAMMAR_CLASSES[name].split(".")
    try:
        mod = importlib.import_module(f".{module_name}", package=__package__)
    except ImportError:
        logger.warning("Could not load grammar table %s", name)
        raise
    return getattr(mod, class_name)()


def get_grammar(language_id: str) -> BaseGrammar:
    """Return the (shared, read-only) grammar for *language_id*."""
    return _load_grammar(grammar_name(language_id))


def classify(language_id: str, node_kind: str) -> StatementKind:
    """Context-free classification of *node_kind* in *language_id*."""
    return get_grammar(language_id).classify(node_kind)


SUPPORTED_LANGUAGES: tuple[str, ...] = constants.SUPPORTED_LANGUAGES

__all__ = [
    "BaseGrammar",
    "NOT_A_STATEMENT",
    "SIMPLE",
    "StatementKind",
    "SUPPORTED_LANGUAGES",
    "classify",
    "get_grammar",
    "grammar_name",
    "is_supported",
]
