"""Shared helpers for the statement tree test suite.

Fixture sources may carry inline markers:

- ``«`` marks where an expected statement starts and ``»`` where it ends;
  markers nest the way the statements do.
- ``‸`` marks the cursor; the query range then runs from the cursor to the
  end of the text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from statement_tree.config import BuildConfig
from statement_tree.parser import Parser, ParserFactory
from statement_tree.tree import StatementNode, StatementTree

logger = logging.getLogger(__name__)

START_MARK = "«"
END_MARK = "»"
CURSOR_MARK = "‸"


@dataclass
class ExpectedStatement:
    start: int
    end: int = -1
    children: list[ExpectedStatement] = field(default_factory=list)

    def shape(self, depth: int = 0) -> list[tuple[int, int, int]]:
        rows = [(depth, self.start, self.end)]
        for child in self.children:
            rows.extend(child.shape(depth + 1))
        return rows


@dataclass
class MarkedSource:
    text: str
    cursor: Optional[int]
    statements: list[ExpectedStatement]

    @property
    def query_range(self) -> tuple[int, int]:
        if self.cursor is None:
            return 0, len(self.text)
        return self.cursor, len(self.text)

    def shape(self) -> list[tuple[int, int, int]]:
        return [row for s in self.statements for row in s.shape()]


def parse_markers(marked: str) -> MarkedSource:
    """Strip the inline markers from *marked* and record the expected tree."""
    text: list[str] = []
    cursor: Optional[int] = None
    roots: list[ExpectedStatement] = []
    stack: list[ExpectedStatement] = []
    for ch in marked:
        offset = len(text)
        if ch == START_MARK:
            statement = ExpectedStatement(start=offset)
            (stack[-1].children if stack else roots).append(statement)
            stack.append(statement)
        elif ch == END_MARK:
            if not stack:
                raise ValueError(f"Unbalanced end marker at offset {offset}")
            stack.pop().end = offset
        elif ch == CURSOR_MARK:
            cursor = offset
        else:
            text.append(ch)
    if stack:
        raise ValueError(f"{len(stack)} statement marker(s) left open")
    return MarkedSource(text="".join(text), cursor=cursor, statements=roots)


def tree_shape(tree: StatementTree) -> list[tuple[int, int, int]]:
    return [(len(node.ancestors()), node.start, node.end) for node in tree.walk()]


async def build_tree(
    language: str,
    source: str,
    start: int = 0,
    end: Optional[int] = None,
    parser: Optional[Parser] = None,
    config: Optional[BuildConfig] = None,
) -> StatementTree:
    end = len(source) if end is None else end
    tree = StatementTree.create(language, source, start, end, parser=parser, config=config)
    await tree.build()
    return tree


async def build_marked(language: str, marked: str) -> tuple[StatementTree, MarkedSource]:
    source = parse_markers(marked)
    start, end = source.query_range
    return await build_tree(language, source.text, start, end), source


async def assert_statements(language: str, marked: str) -> StatementTree:
    """Build *marked* and assert the statement spans match its markers."""
    tree, source = await build_marked(language, marked)
    assert tree_shape(tree) == source.shape(), (
        f"Unexpected statements for {language}:\n{tree.dump()}"
    )
    return tree


def find_statement(tree: StatementTree, text: str) -> StatementNode:
    """Return the first node (pre-order) whose text equals *text*."""
    for node in tree.walk():
        if node.text == text:
            return node
    raise AssertionError(f"No statement with text {text!r} in:\n{tree.dump()}")


def find_kind(tree: StatementTree, kind: str) -> list[StatementNode]:
    return [node for node in tree.walk() if node.kind == kind]


def child_texts(node: StatementNode) -> list[str]:
    return [child.text for child in node.children]


def top_texts(tree: StatementTree) -> list[str]:
    return [statement.text for statement in tree.statements]


# ── fake CST for grammar-independent builder tests ───────────────


class FakeNode:
    """Stands in for ``tree_sitter.Node`` over an ASCII source."""

    def __init__(
        self,
        type: str,
        start_byte: int,
        end_byte: int,
        children: Optional[list[FakeNode]] = None,
        fields: Optional[dict[int, str]] = None,
        is_named: bool = True,
        is_missing: bool = False,
        is_extra: bool = False,
    ):
        self.type = type
        self.start_byte = start_byte
        self.end_byte = end_byte
        self.children = children or []
        self._fields = fields or {}
        self.is_named = is_named
        self.is_missing = is_missing
        self.is_extra = is_extra
        self.is_error = type == "ERROR"
        self.parent = None
        self.start_point = (0, start_byte)
        self.end_point = (0, end_byte)
        for child in self.children:
            child.parent = self

    def field_name_for_child(self, index: int) -> Optional[str]:
        return self._fields.get(index)


class FakeTree:
    def __init__(self, root_node: Optional[FakeNode]):
        self.root_node = root_node


class FakeLanguageParser:
    def __init__(self, tree: Optional[FakeTree]):
        self._tree = tree

    def parse(self, source: bytes) -> Optional[FakeTree]:
        return self._tree


class FakeParserFactory(ParserFactory):
    """Returns a parser that always yields the given fake tree."""

    def __init__(self, tree: Optional[FakeTree]):
        self._tree = tree
        self.requested: list[str] = []

    def get_parser(self, language: str):
        self.requested.append(language)
        return FakeLanguageParser(self._tree)


class FailingParserFactory(ParserFactory):
    def get_parser(self, language: str):
        raise RuntimeError(f"no grammar for {language}")


def fake_parser(root: Optional[FakeNode]) -> Parser:
    return Parser(FakeParserFactory(FakeTree(root)))
