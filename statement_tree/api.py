"""Composable API functions for building and inspecting statement trees.

Each function builds a fresh tree for one query, disposes the CST and
returns the result, so callers that only need spans never handle the tree
lifecycle themselves.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import BuildConfig
from .parser import Parser
from .tree import StatementTree

logger = logging.getLogger(__name__)


async def build_statement_tree(
    text: str,
    language: str = "python",
    start: int = 0,
    end: Optional[int] = None,
    parser: Optional[Parser] = None,
    config: Optional[BuildConfig] = None,
) -> StatementTree:
    """Build the statement tree of *text* restricted to ``[start, end)``.

    Args:
        text: The source code text.
        language: Language id (e.g. "python", "typescriptreact").
        start: Start of the query range (character offset).
        end: End of the query range; defaults to the end of *text*.
        parser: Parser to use instead of the tree-sitter-language-pack one.
        config: Build configuration; defaults apply when omitted.

    Returns:
        A built StatementTree whose CST has already been released.
    """
    end = len(text) if end is None else end
    logger.debug("Building statement tree (%s, range=[%d,%d))", language, start, end)
    tree = StatementTree.create(language, text, start, end, parser=parser, config=config)
    with tree:
        await tree.build()
    return tree


async def statement_spans(
    text: str,
    language: str = "python",
    start: int = 0,
    end: Optional[int] = None,
    parser: Optional[Parser] = None,
    config: Optional[BuildConfig] = None,
) -> list[tuple[int, int, bool]]:
    """Return ``(start, end, is_compound)`` for every statement in pre-order."""
    tree = await build_statement_tree(text, language, start, end, parser, config)
    return [(node.start, node.end, node.is_compound) for node in tree.walk()]


async def dump_statements(
    text: str,
    language: str = "python",
    start: int = 0,
    end: Optional[int] = None,
    parser: Optional[Parser] = None,
    config: Optional[BuildConfig] = None,
) -> str:
    """Return the human-readable dump of the statement tree of *text*."""
    tree = await build_statement_tree(text, language, start, end, parser, config)
    return tree.dump()
