"""Tree-Sitter Parsing Layer — a uniform node view over the external CST parser."""

from __future__ import annotations

import bisect
import logging
import time
from abc import ABC, abstractmethod
from typing import Iterator

from . import constants
from .errors import ParseFailureError
from .spans import SourcePoint, SourceSpan

logger = logging.getLogger(__name__)


class ParserFactory(ABC):
    """Abstract factory for obtaining a language parser."""

    @abstractmethod
    def get_parser(self, language: str): ...


class TreeSitterParserFactory(ParserFactory):
    """Concrete factory that delegates to tree-sitter-language-pack."""

    def get_parser(self, language: str):
        import tree_sitter_language_pack as tslp

        return tslp.get_parser(language)


class SourceIndex:
    """Converts tree-sitter byte offsets to character offsets and points.

    Byte offsets are only translated when the source contains non-ASCII
    characters; for pure ASCII text both units coincide.
    """

    def __init__(self, text: str):
        self.text = text
        self._ascii = text.isascii()
        self._byte_starts: list[int] = []
        if not self._ascii:
            offset = 0
            for ch in text:
                self._byte_starts.append(offset)
                offset += len(ch.encode(constants.SOURCE_ENCODING))
            self._byte_starts.append(offset)
        self._line_starts = [0] + [
            i + 1 for i, ch in enumerate(text) if ch == "\n"
        ]

    def to_char(self, byte_offset: int) -> int:
        if self._ascii:
            return byte_offset
        return bisect.bisect_left(self._byte_starts, byte_offset)

    def point(self, offset: int) -> SourcePoint:
        row = bisect.bisect_right(self._line_starts, offset) - 1
        return SourcePoint(row=row, column=offset - self._line_starts[row])

    def span(self, start: int, end: int) -> SourceSpan:
        return SourceSpan(
            start=start,
            end=end,
            start_point=self.point(start),
            end_point=self.point(end),
        )


class CstNode:
    """Read-only, language-agnostic view of one concrete syntax tree node.

    Offsets are character offsets into the source ``str``.
    """

    __slots__ = ("_node", "_index")

    def __init__(self, node, index: SourceIndex):
        self._node = node
        self._index = index

    def __eq__(self, other) -> bool:
        return isinstance(other, CstNode) and self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return f"CstNode({self.kind!r}, {self.start}, {self.end})"

    @property
    def key(self) -> tuple[str, int, int]:
        return (self.kind, self._node.start_byte, self._node.end_byte)

    @property
    def kind(self) -> str:
        return self._node.type

    @property
    def start(self) -> int:
        return self._index.to_char(self._node.start_byte)

    @property
    def end(self) -> int:
        return self._index.to_char(self._node.end_byte)

    @property
    def start_row(self) -> int:
        return self._node.start_point[0]

    @property
    def end_row(self) -> int:
        return self._node.end_point[0]

    @property
    def span(self) -> SourceSpan:
        return self._index.span(self.start, self.end)

    @property
    def text(self) -> str:
        return self._index.text[self.start : self.end]

    @property
    def is_named(self) -> bool:
        return self._node.is_named

    @property
    def is_error(self) -> bool:
        return self._node.is_error or self.kind == constants.ERROR_NODE_TYPE

    @property
    def is_missing(self) -> bool:
        return self._node.is_missing

    @property
    def is_extra(self) -> bool:
        return self._node.is_extra

    @property
    def parent(self) -> CstNode | None:
        parent = self._node.parent
        return CstNode(parent, self._index) if parent is not None else None

    @property
    def children(self) -> list[CstNode]:
        return [CstNode(c, self._index) for c in self._node.children]

    @property
    def named_children(self) -> list[CstNode]:
        return [CstNode(c, self._index) for c in self._node.children if c.is_named]

    def fielded_children(self) -> Iterator[tuple[str | None, CstNode]]:
        """Yield ``(field_name, child)`` for every child in document order."""
        for i, child in enumerate(self._node.children):
            yield self._node.field_name_for_child(i), CstNode(child, self._index)

    def children_by_field(self, name: str) -> list[CstNode]:
        return [c for field, c in self.fielded_children() if field == name]

    def child_by_field(self, name: str) -> CstNode | None:
        return next(iter(self.children_by_field(name)), None)

    def intersects(self, start: int, end: int) -> bool:
        if start == end:
            return self.start <= start <= self.end
        return self.start < end and start < self.end


class CstHandle:
    """Owns one parsed tree for the lifetime of a statement tree."""

    def __init__(self, tree, source: str, language: str):
        self._tree = tree
        self.language = language
        self.index = SourceIndex(source)

    @property
    def root(self) -> CstNode:
        if self._tree is None:
            raise ParseFailureError(f"CST for {self.language} has been released")
        return CstNode(self._tree.root_node, self.index)

    @property
    def closed(self) -> bool:
        return self._tree is None

    def close(self) -> None:
        self._tree = None


class Parser:
    """Thin wrapper around a parser factory."""

    def __init__(self, parser_factory: ParserFactory):
        self._factory = parser_factory

    def parse(self, source: str, language: str) -> CstHandle:
        started = time.perf_counter()
        try:
            parser = self._factory.get_parser(language)
            tree = parser.parse(source.encode(constants.SOURCE_ENCODING))
        except Exception as exc:
            raise ParseFailureError(f"Failed to parse {language} source: {exc}") from exc
        if tree is None or getattr(tree, "root_node", None) is None:
            raise ParseFailureError(f"Parser for {language} returned no syntax tree")
        logger.debug(
            "Parsed %d chars of %s in %.2f ms",
            len(source),
            language,
            (time.perf_counter() - started) * 1000,
        )
        return CstHandle(tree, source, language)
