"""CppGrammar — statement classification for tree-sitter C++ (extends CGrammar)."""

from __future__ import annotations

from ._base import SIMPLE, StatementKind, compound, control, fused, simple, wrapper
from .c import CGrammar
from ..parser import CstNode

CONCEPT_WITH_REQUIREMENTS = compound(unfielded=True)


class CppGrammar(CGrammar):
    """Classifies C++ statements.

    Extends CGrammar with namespaces, classes, templates, concepts,
    try/catch, range-for and using/alias declarations.
    """

    GRAMMAR_NAME = "cpp"

    BLOCK_TYPES = CGrammar.BLOCK_TYPES | frozenset({"requirement_seq"})

    def __init__(self):
        super().__init__()

        self._STATEMENT_KINDS.update(
            {
                "namespace_definition": compound("body"),
                "linkage_specification": compound("body"),
                "class_specifier": compound("body"),
                "template_declaration": fused(),
                "concept_definition": simple(),
                "requires_expression": wrapper("requirements"),
                "simple_requirement": simple(),
                "compound_requirement": simple(),
                "type_requirement": simple(),
                "nested_requirement": simple(),
                "using_declaration": simple(),
                "alias_declaration": simple(),
                "namespace_alias_definition": simple(),
                "static_assert_declaration": simple(),
                "friend_declaration": simple(),
                "throw_statement": simple(),
                "co_return_statement": simple(),
                "co_yield_statement": simple(),
                "for_range_loop": control("body"),
                "try_statement": compound("body", unfielded=True),
                "catch_clause": wrapper("body"),
            }
        )

    def classify_node(self, node: CstNode, in_statement_list: bool = False) -> StatementKind:
        kind = super().classify_node(node, in_statement_list)
        if kind is SIMPLE and node.kind == "concept_definition":
            requires = self._requires_expression(node)
            if (
                requires is not None
                and requires.child_by_field("requirements") is not None
                and node.start_row != node.end_row
            ):
                return CONCEPT_WITH_REQUIREMENTS
        return kind

    def _requires_expression(self, node: CstNode) -> CstNode | None:
        return next(
            (c for c in node.named_children if c.kind == "requires_expression"),
            None,
        )
