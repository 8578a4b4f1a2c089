"""Compound Classifier — body selection, collapsing and fusion rules.

The grammar tables say what a node kind *can* be; the classifier decides
what a concrete node *is*:

- fused prefixes (labels, decorators, ``export``, ``template<...>``)
  take their classification and body from the node they wrap,
- a compound statement's body is reduced to *leaves*: blocks (walked
  transparently by the builder) and statements, with wrapper clauses
  such as ``else`` / ``case`` / ``catch`` expanded in place,
- a collapsible control statement whose leaves are all inlined single
  statements is simple.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from .languages import BaseGrammar, StatementKind
from .languages._base import FUSE_LAST_STATEMENT
from .parser import CstNode

logger = logging.getLogger(__name__)

FIELD_PATH_SEPARATOR = "."


class BodyLeaf(NamedTuple):
    """A body node and whether its CST container is a statement list.

    ``nested_statement`` marks a block that sits directly inside another
    block; it is a statement of its own rather than a transparent body.
    """

    node: CstNode
    in_statement_list: bool = False
    nested_statement: bool = False


class Resolution(NamedTuple):
    is_compound: bool
    bodies: tuple[BodyLeaf, ...] = ()


SIMPLE_RESOLUTION = Resolution(is_compound=False)


class CompoundClassifier:
    """Resolves statement nodes against one grammar."""

    def __init__(self, grammar: BaseGrammar):
        self.grammar = grammar

    def resolve(self, node: CstNode, kind: StatementKind) -> Resolution:
        """Decide whether statement *node* is compound and find its bodies."""
        target, kind = self.fuse(node, kind)
        if target is None or not kind.compound:
            return SIMPLE_RESOLUTION
        leaves = self.body_leaves(target, kind)
        if not leaves and not self.grammar.is_block(target):
            return SIMPLE_RESOLUTION
        if kind.collapsible and self._collapses(target, leaves):
            return SIMPLE_RESOLUTION
        return Resolution(is_compound=True, bodies=tuple(leaves))

    def fuse(self, node: CstNode, kind: StatementKind) -> tuple[CstNode | None, StatementKind]:
        """Follow fused prefixes down to the statement they wrap.

        Returns ``(None, kind)`` when a prefix wraps nothing classifiable
        (``export { a, b };``, a trailing label).
        """
        target = node
        while kind.is_fused:
            target = self._fuse_target(target, kind.fuse_field)
            if target is None:
                return None, kind
            kind = self.grammar.classify_node(target)
        return target, kind

    def body_leaves(self, node: CstNode, kind: StatementKind) -> list[BodyLeaf]:
        """Body blocks and statements of *node* in document order."""
        leaves: list[BodyLeaf] = []
        for path in kind.body_fields:
            for child in self._follow_field_path(node, path):
                self._expand(child, False, leaves)
        if kind.unfielded_body:
            in_list = self.grammar.is_statement_list(node)
            nested = self.grammar.is_block(node)
            for field, child in node.fielded_children():
                if field is None and child.is_named:
                    self._expand(child, in_list, leaves, nested)
        if kind.body_fields and not leaves:
            logger.debug(
                "No body in fields %s of %s, falling back to block children",
                kind.body_fields,
                node.kind,
            )
            leaves = [
                BodyLeaf(c)
                for c in node.named_children
                if self.grammar.is_block(c) and not self.grammar.is_skipped(c)
            ]
        return self._ordered(leaves)

    def _expand(
        self,
        child: CstNode,
        in_list: bool,
        leaves: list[BodyLeaf],
        nested: bool = False,
    ) -> None:
        grammar = self.grammar
        if grammar.is_skipped(child):
            return
        if child.is_error:
            for grandchild in child.named_children:
                self._expand(grandchild, False, leaves, nested)
            return
        if grammar.is_block(child):
            is_statement = nested and grammar.classify(child.kind).statement
            leaves.append(BodyLeaf(child, in_list, is_statement))
            return
        kind = grammar.classify_node(child, in_list)
        if kind.is_wrapper:
            leaves.extend(self.body_leaves(child, kind))
        elif kind.statement:
            leaves.append(BodyLeaf(child, in_list))

    def _collapses(self, owner: CstNode, leaves: list[BodyLeaf]) -> bool:
        for leaf in leaves:
            if not self.grammar.is_inlined_body(owner, leaf.node):
                return False
            if self.grammar.is_block(leaf.node):
                continue
            kind = self.grammar.classify_node(leaf.node, leaf.in_statement_list)
            if self.resolve(leaf.node, kind).is_compound:
                return False
        return True

    def _fuse_target(self, node: CstNode, field: str) -> CstNode | None:
        if field != FUSE_LAST_STATEMENT:
            target = node.child_by_field(field)
            if target is None or not self.grammar.classify_node(target).statement:
                return None
            return target
        candidates = [
            c
            for c in node.named_children
            if not self.grammar.is_skipped(c)
            and self.grammar.classify_node(c).statement
        ]
        return candidates[-1] if candidates else None

    def _follow_field_path(self, node: CstNode, path: str) -> list[CstNode]:
        nodes = [node]
        for name in path.split(FIELD_PATH_SEPARATOR):
            nodes = [c for n in nodes for c in n.children_by_field(name)]
        return nodes

    @staticmethod
    def _ordered(leaves: list[BodyLeaf]) -> list[BodyLeaf]:
        seen: set[tuple[str, int, int]] = set()
        unique = []
        for leaf in sorted(leaves, key=lambda l: (l.node.start, l.node.end)):
            if leaf.node.key not in seen:
                seen.add(leaf.node.key)
                unique.append(leaf)
        return unique
