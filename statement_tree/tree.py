"""Tree Query Surface — StatementNode arena and StatementTree lifecycle."""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

from . import constants
from .builder import NodeDraft, StatementTreeBuilder, validate_drafts
from .config import DEFAULT_BUILD_CONFIG, BuildConfig
from .errors import InvalidRangeError, TreeAlreadyBuiltError
from .languages import get_grammar, grammar_name, is_supported
from .parser import CstHandle, Parser, SourceIndex, TreeSitterParserFactory
from .spans import SourceSpan

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatementNode:
    """One statement of a built tree.

    Nodes live in the owning tree's arena; ``parent_index`` and
    ``child_indices`` are positions in that arena.
    """

    tree: StatementTree = field(repr=False, compare=False)
    index: int
    kind: str
    start: int
    end: int
    is_compound: bool
    parent_index: int | None = None
    child_indices: tuple[int, ...] = ()

    @property
    def parent(self) -> StatementNode | None:
        if self.parent_index is None:
            return None
        return self.tree.nodes[self.parent_index]

    @property
    def children(self) -> list[StatementNode]:
        return [self.tree.nodes[i] for i in self.child_indices]

    @property
    def next_sibling(self) -> StatementNode | None:
        siblings = self.parent.child_indices if self.parent else self.tree.root_indices
        position = siblings.index(self.index)
        if position + 1 < len(siblings):
            return self.tree.nodes[siblings[position + 1]]
        return None

    @property
    def span(self) -> SourceSpan:
        return self.tree.source_index.span(self.start, self.end)

    @property
    def text(self) -> str:
        return self.tree.text[self.start : self.end]

    @property
    def description(self) -> str:
        config = self.tree.config
        text = self.text
        if len(text) > config.description_limit:
            edge = config.description_edge
            text = text[:edge] + constants.DESCRIPTION_ELLIPSIS + text[-edge:]
        return f"{self.kind} ({self.span}): {json.dumps(text, ensure_ascii=False)}"

    def contains(self, other: StatementNode) -> bool:
        return self.start <= other.start and other.end <= self.end

    def contains_offset(self, offset: int) -> bool:
        return self.start <= offset < self.end

    def statement_at(self, offset: int) -> StatementNode | None:
        """Innermost node of this subtree whose ``[start, end)`` holds *offset*."""
        if not self.contains_offset(offset):
            return None
        for child in self.children:
            found = child.statement_at(offset)
            if found is not None:
                return found
        return self

    def ancestors(self) -> list[StatementNode]:
        """Root-first chain of enclosing statements, excluding this node."""
        chain = []
        node = self.parent
        while node is not None:
            chain.append(node)
            node = node.parent
        return list(reversed(chain))

    def dump(self, prefix1: str = "", prefix2: str = "") -> str:
        lines = [prefix1 + self.description]
        children = self.children
        for i, child in enumerate(children):
            is_last = i == len(children) - 1
            continuation = (
                constants.DUMP_LAST_CONTINUATION if is_last else constants.DUMP_CONTINUATION
            )
            lines.append(
                child.dump(prefix2 + constants.DUMP_BRANCH, prefix2 + continuation)
            )
        return "\n".join(lines)

    def dump_path(self, prefix1: str = "", prefix2: str = "") -> str:
        """Render the chain from the top-level statement down to this node."""
        lines = []
        for depth, node in enumerate([*self.ancestors(), self]):
            if depth == 0:
                lines.append(prefix1 + node.description)
            else:
                indent = constants.DUMP_LAST_CONTINUATION * (depth - 1)
                lines.append(prefix2 + indent + constants.DUMP_BRANCH + node.description)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.description


class StatementTree:
    """Statements of one source text intersecting one query range.

    Usage::

        tree = StatementTree.create("python", source, 0, len(source))
        await tree.build()
        node = tree.statement_at(offset)
        tree.dispose()
    """

    def __init__(
        self,
        language_id: str,
        text: str,
        start: int,
        end: int,
        parser: Optional[Parser] = None,
        config: BuildConfig = DEFAULT_BUILD_CONFIG,
    ):
        self.grammar = get_grammar(language_id)
        if not 0 <= start <= end <= len(text):
            raise InvalidRangeError(
                f"Query range [{start},{end}) is outside the source text (length {len(text)})"
            )
        self.language_id = language_id
        self.text = text
        self.start = start
        self.end = end
        self.config = config
        self.source_index = SourceIndex(text)
        self._parser = parser or Parser(TreeSitterParserFactory())
        self._handle: CstHandle | None = None
        self._nodes: list[StatementNode] = []
        self._built = False
        self._disposed = False

    @classmethod
    def create(
        cls,
        language_id: str,
        text: str,
        start: int,
        end: int,
        *,
        parser: Optional[Parser] = None,
        config: Optional[BuildConfig] = None,
    ) -> StatementTree:
        """Factory; raises ``UnsupportedLanguageError`` for unknown ids."""
        return cls(
            language_id, text, start, end, parser=parser, config=config or DEFAULT_BUILD_CONFIG
        )

    @staticmethod
    def is_supported(language_id: str) -> bool:
        return is_supported(language_id)

    @staticmethod
    def is_trimmed_by_default(language_id: str) -> bool:
        return language_id in constants.TRIMMED_BY_DEFAULT_LANGUAGES

    # ── lifecycle ────────────────────────────────────────────────

    async def build(self) -> StatementTree:
        """Parse the source and populate the statement arena.

        Raises:
            TreeAlreadyBuiltError: if called more than once.
            ParseFailureError: if the parser raises or returns no tree.
            StatementTreeInvariantError: if validation is enabled and the
                result is inconsistent.
        """
        if self._built:
            raise TreeAlreadyBuiltError(f"Statement tree for {self.language_id} is already built")
        self._built = True
        self._handle = await asyncio.to_thread(
            self._parser.parse, self.text, grammar_name(self.language_id)
        )
        drafts = StatementTreeBuilder(self.grammar, self.start, self.end).build(
            self._handle.root
        )
        if self.config.validate_invariants:
            validate_drafts(drafts, self.start, self.end)
        self._nodes = [self._freeze(d) for d in drafts]
        logger.info(
            "Built statement tree (%s, range=[%d,%d)): %d statements, %d top level",
            self.language_id,
            self.start,
            self.end,
            len(self._nodes),
            len(self.root_indices),
        )
        return self

    def dispose(self) -> None:
        """Release the CST; the statement arena stays readable."""
        if self._handle is not None:
            self._handle.close()
            self._handle = None
        self._disposed = True

    @property
    def disposed(self) -> bool:
        return self._disposed

    def __enter__(self) -> StatementTree:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    # ── queries ──────────────────────────────────────────────────

    @property
    def built(self) -> bool:
        return self._built

    @property
    def nodes(self) -> list[StatementNode]:
        return self._nodes

    @property
    def root_indices(self) -> tuple[int, ...]:
        return tuple(n.index for n in self._nodes if n.parent_index is None)

    @property
    def statements(self) -> list[StatementNode]:
        return [self._nodes[i] for i in self.root_indices]

    def walk(self) -> Iterator[StatementNode]:
        """Every node in pre-order (the arena order)."""
        return iter(self._nodes)

    def statement_at(self, offset: int) -> StatementNode | None:
        for statement in self.statements:
            found = statement.statement_at(offset)
            if found is not None:
                return found
        return None

    def dump(self, prefix: str = "") -> str:
        lines = []
        for i, statement in enumerate(self.statements):
            lines.append(statement.dump(f"{prefix}[{i}] ", prefix + " " * len(f"[{i}] ")))
        return "\n".join(lines)

    def _freeze(self, draft: NodeDraft) -> StatementNode:
        return StatementNode(
            tree=self,
            index=draft.index,
            kind=draft.kind,
            start=draft.start,
            end=draft.end,
            is_compound=draft.is_compound,
            parent_index=draft.parent,
            child_indices=tuple(draft.children),
        )

    def __repr__(self) -> str:
        return (
            f"StatementTree({self.language_id!r}, range=[{self.start},{self.end}), "
            f"statements={len(self.statements)})"
        )
