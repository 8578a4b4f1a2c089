"""Statement Tree Builder — range-scoped depth-first walk over the CST."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .classifier import BodyLeaf, CompoundClassifier
from .errors import StatementTreeInvariantError
from .languages import BaseGrammar, StatementKind
from .parser import CstNode

logger = logging.getLogger(__name__)


@dataclass
class NodeDraft:
    """A statement while the arena is still being filled."""

    index: int
    kind: str
    start: int
    end: int
    is_compound: bool
    parent: int | None = None
    children: list[int] = field(default_factory=list)


class StatementTreeBuilder:
    """Walks a CST and records every statement intersecting ``[start, end)``.

    Drafts are appended in pre-order, so a draft's index is its position in
    document order and parents always precede their children.
    """

    def __init__(self, grammar: BaseGrammar, start: int, end: int):
        self.grammar = grammar
        self.classifier = CompoundClassifier(grammar)
        self.start = start
        self.end = end
        self.drafts: list[NodeDraft] = []
        self.error_nodes = 0

    def build(self, root: CstNode) -> list[NodeDraft]:
        self._walk(root, None)
        if self.error_nodes:
            logger.debug(
                "Walked through %d ERROR node(s) in %s source",
                self.error_nodes,
                self.grammar.GRAMMAR_NAME,
            )
        return self.drafts

    def _walk(self, container: CstNode, parent: int | None) -> None:
        in_list = self.grammar.is_statement_list(container)
        for child in container.named_children:
            self._visit(child, parent, in_list)

    def _visit(self, node: CstNode, parent: int | None, in_list: bool) -> None:
        if self.grammar.is_skipped(node) or not node.intersects(self.start, self.end):
            return
        if node.is_error:
            self.error_nodes += 1
            self._walk(node, parent)
            return
        kind = self.grammar.classify_node(node, in_list)
        if kind.statement and self.grammar.old_style_parameters(node):
            self._emit_old_style_function(node, parent)
        elif kind.statement:
            self._emit(node, kind, parent)
        elif kind.is_wrapper:
            for leaf in self.classifier.body_leaves(node, kind):
                self._visit_body(leaf, parent)
        else:
            self._walk(node, parent)

    def _visit_body(self, leaf: BodyLeaf, parent: int | None) -> None:
        if leaf.nested_statement or not self.grammar.is_block(leaf.node):
            self._visit(leaf.node, parent, leaf.in_statement_list)
        elif leaf.node.intersects(self.start, self.end):
            self._walk(leaf.node, parent)

    def _emit(self, node: CstNode, kind: StatementKind, parent: int | None) -> None:
        resolution = self.classifier.resolve(node, kind)
        index = self._append(node.kind, node.start, node.end, resolution.is_compound, parent)
        for leaf in resolution.bodies:
            self._visit_body(leaf, index)

    def _emit_old_style_function(self, node: CstNode, parent: int | None) -> None:
        """Emit ``int f(a) int a; { ... }`` as header, declarations and body siblings."""
        logger.debug("Splitting old-style %s at offset %d", node.kind, node.start)
        declarator = node.child_by_field("declarator")
        header_end = declarator.end if declarator is not None else node.start
        if _ranges_intersect(node.start, header_end, self.start, self.end):
            self._append(node.kind, node.start, header_end, False, parent)
        for declaration in self.grammar.old_style_parameters(node):
            self._visit(declaration, parent, False)
        body = node.child_by_field("body")
        if body is not None:
            self._visit(body, parent, False)

    def _append(
        self, kind: str, start: int, end: int, is_compound: bool, parent: int | None
    ) -> int:
        draft = NodeDraft(
            index=len(self.drafts),
            kind=kind,
            start=start,
            end=end,
            is_compound=is_compound,
            parent=parent,
        )
        self.drafts.append(draft)
        if parent is not None:
            self.drafts[parent].children.append(draft.index)
        return draft.index


def validate_drafts(drafts: list[NodeDraft], start: int, end: int) -> None:
    """Raise ``StatementTreeInvariantError`` on any containment or order violation."""
    roots = [d.index for d in drafts if d.parent is None]
    _check_siblings(drafts, roots, "top level")
    for draft in drafts:
        if not _intersects(draft, start, end):
            raise StatementTreeInvariantError(
                f"{draft.kind} [{draft.start},{draft.end}) lies outside the query range "
                f"[{start},{end})"
            )
        if draft.start > draft.end:
            raise StatementTreeInvariantError(
                f"{draft.kind} has an inverted range [{draft.start},{draft.end})"
            )
        if draft.children and not draft.is_compound:
            raise StatementTreeInvariantError(f"Simple {draft.kind} has children")
        for index in draft.children:
            child = drafts[index]
            if child.parent != draft.index:
                raise StatementTreeInvariantError(
                    f"{child.kind} is linked to the wrong parent"
                )
            inside = draft.start <= child.start and child.end <= draft.end
            if not inside or (child.start, child.end) == (draft.start, draft.end):
                raise StatementTreeInvariantError(
                    f"{draft.kind} [{draft.start},{draft.end}) does not strictly contain "
                    f"{child.kind} [{child.start},{child.end})"
                )
        _check_siblings(drafts, draft.children, draft.kind)


def _check_siblings(drafts: list[NodeDraft], indices: list[int], owner: str) -> None:
    for prev, nxt in zip(indices, indices[1:]):
        a, b = drafts[prev], drafts[nxt]
        if b.start < a.end:
            raise StatementTreeInvariantError(
                f"Siblings under {owner} overlap or are out of order: "
                f"{a.kind} [{a.start},{a.end}) and {b.kind} [{b.start},{b.end})"
            )


def _intersects(draft: NodeDraft, start: int, end: int) -> bool:
    return _ranges_intersect(draft.start, draft.end, start, end)


def _ranges_intersect(node_start: int, node_end: int, start: int, end: int) -> bool:
    if start == end:
        return node_start <= start <= node_end
    return node_start < end and start < node_end
