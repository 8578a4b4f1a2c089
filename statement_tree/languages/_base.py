"""BaseGrammar — per-language statement classification tables."""

from __future__ import annotations

from dataclasses import dataclass

from ..parser import CstNode


@dataclass(frozen=True)
class StatementKind:
    """How one CST node kind participates in statement segmentation.

    ``body_fields`` name the fields holding nested statements; a dotted
    entry such as ``"type.body"`` follows one field into a child first.
    With ``unfielded_body`` every named child that carries no field name is
    a body candidate as well.  ``fuse_field`` marks label / decorator style
    wrappers whose span is kept but whose classification is taken from the
    wrapped node (``"*"`` picks the last wrapped statement).
    """

    statement: bool = True
    compound: bool = False
    body_fields: tuple[str, ...] = ()
    unfielded_body: bool = False
    collapsible: bool = False
    fuse_field: str = ""

    @property
    def is_wrapper(self) -> bool:
        return not self.statement and self.compound

    @property
    def is_fused(self) -> bool:
        return bool(self.fuse_field)


NOT_A_STATEMENT = StatementKind(statement=False)
SIMPLE = StatementKind()
FUSE_LAST_STATEMENT = "*"


def simple() -> StatementKind:
    return SIMPLE


def compound(*body_fields: str, unfielded: bool = False) -> StatementKind:
    """A statement owning a body of nested statements."""
    return StatementKind(
        compound=True, body_fields=body_fields, unfielded_body=unfielded
    )


def block() -> StatementKind:
    """A brace / indentation block used as a statement on its own."""
    return StatementKind(compound=True, unfielded_body=True)


def control(*body_fields: str, unfielded: bool = False) -> StatementKind:
    """A control-flow statement that collapses when its bodies are inlined."""
    return StatementKind(
        compound=True,
        body_fields=body_fields,
        unfielded_body=unfielded,
        collapsible=True,
    )


def wrapper(*body_fields: str, unfielded: bool = False) -> StatementKind:
    """A non-statement clause (else, case, catch ...) that only carries bodies."""
    return StatementKind(
        statement=False,
        compound=True,
        body_fields=body_fields,
        unfielded_body=unfielded,
    )


def fused(field_name: str = FUSE_LAST_STATEMENT) -> StatementKind:
    """A label / decorator / export prefix fused into the statement it wraps."""
    return StatementKind(fuse_field=field_name)


class BaseGrammar:
    """Base class for per-language statement classification.

    Subclasses populate ``_STATEMENT_KINDS`` and override the node-type
    constants where the grammar differs from the defaults.
    """

    # ── overridable constants ────────────────────────────────────

    GRAMMAR_NAME: str = ""

    COMMENT_TYPES: frozenset[str] = frozenset({"comment"})
    NOISE_TYPES: frozenset[str] = frozenset()

    # Bodies that are walked transparently when reached through a body
    # field: their statements become children of the owning statement.
    BLOCK_TYPES: frozenset[str] = frozenset()

    # Containers in which every named child is a statement, even when its
    # kind is not listed in the table.
    STATEMENT_LIST_TYPES: frozenset[str] = frozenset()

    # ── init ─────────────────────────────────────────────────────

    def __init__(self):
        self._STATEMENT_KINDS: dict[str, StatementKind] = {}

    # ── lookups ──────────────────────────────────────────────────

    @property
    def statement_kinds(self) -> dict[str, StatementKind]:
        return dict(self._STATEMENT_KINDS)

    def classify(self, node_kind: str) -> StatementKind:
        """Table lookup; unknown kinds are transparent non-statements."""
        return self._STATEMENT_KINDS.get(node_kind, NOT_A_STATEMENT)

    def classify_node(self, node: CstNode, in_statement_list: bool = False) -> StatementKind:
        """Classify *node* in context.

        Override for rules that depend on a node's shape rather than its
        kind alone.
        """
        if node.is_error:
            return NOT_A_STATEMENT
        kind = self.classify(node.kind)
        if kind is NOT_A_STATEMENT and in_statement_list and node.is_named:
            return SIMPLE
        return kind

    def is_skipped(self, node: CstNode) -> bool:
        """Comments, noise and zero-width recovery nodes never take part."""
        return (
            not node.is_named
            or node.is_missing
            or (node.is_extra and not node.is_error)
            or node.kind in self.COMMENT_TYPES
            or node.kind in self.NOISE_TYPES
            or node.start == node.end
        )

    def is_block(self, node: CstNode) -> bool:
        return node.kind in self.BLOCK_TYPES

    def is_statement_list(self, node: CstNode) -> bool:
        return node.kind in self.STATEMENT_LIST_TYPES

    def old_style_parameters(self, node: CstNode) -> list[CstNode]:
        """Parameter declarations written between a declarator and its body."""
        return []

    def is_inlined_body(self, owner: CstNode, body: CstNode) -> bool:
        """True when *body* is a single statement rather than a block."""
        return not self.is_block(body)
