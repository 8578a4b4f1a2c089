"""CGrammar — statement classification for tree-sitter C."""

from __future__ import annotations

from ._base import (
    SIMPLE,
    BaseGrammar,
    StatementKind,
    block,
    compound,
    control,
    fused,
    simple,
    wrapper,
)
from ..parser import CstNode

# Type specifiers that may carry a member body of their own.
RECORD_SPECIFIER_TYPES = frozenset(
    {"struct_specifier", "union_specifier", "enum_specifier", "class_specifier"}
)

# `declaration` / `type_definition` whose type specifier has a body.
DECLARATION_WITH_BODY = compound("type.body")


class CGrammar(BaseGrammar):
    """Classifies C statements, declarations and preprocessor groups."""

    GRAMMAR_NAME = "c"

    BLOCK_TYPES = frozenset(
        {
            "compound_statement",
            "field_declaration_list",
            "enumerator_list",
            "declaration_list",
        }
    )

    def __init__(self):
        super().__init__()
        self._STATEMENT_KINDS: dict[str, StatementKind] = {
            # declarations
            "declaration": simple(),
            "type_definition": simple(),
            "field_declaration": simple(),
            "function_definition": compound("body"),
            "struct_specifier": compound("body"),
            "union_specifier": compound("body"),
            "enum_specifier": compound("body"),
            # statements
            "compound_statement": block(),
            "expression_statement": simple(),
            "return_statement": simple(),
            "break_statement": simple(),
            "continue_statement": simple(),
            "goto_statement": simple(),
            "labeled_statement": fused(),
            "attributed_statement": fused(),
            "if_statement": control("consequence", "alternative"),
            "else_clause": wrapper(unfielded=True),
            "while_statement": control("body"),
            "do_statement": control("body"),
            "for_statement": control("body"),
            "switch_statement": compound("body"),
            "case_statement": compound(unfielded=True),
            # preprocessor
            "preproc_if": compound("alternative", unfielded=True),
            "preproc_ifdef": compound("alternative", unfielded=True),
            "preproc_elif": wrapper("alternative", unfielded=True),
            "preproc_elifdef": wrapper("alternative", unfielded=True),
            "preproc_else": wrapper(unfielded=True),
            "preproc_def": simple(),
            "preproc_function_def": simple(),
            "preproc_include": simple(),
            "preproc_call": simple(),
        }

    def classify_node(self, node: CstNode, in_statement_list: bool = False) -> StatementKind:
        kind = super().classify_node(node, in_statement_list)
        if kind is SIMPLE and node.kind in ("declaration", "type_definition"):
            if self._has_record_body(node):
                return DECLARATION_WITH_BODY
        return kind

    def old_style_parameters(self, node: CstNode) -> list[CstNode]:
        if node.kind != "function_definition":
            return []
        return [
            child
            for field, child in node.fielded_children()
            if field is None and child.kind == "declaration"
        ]

    def _has_record_body(self, node: CstNode) -> bool:
        type_node = node.child_by_field("type")
        return (
            type_node is not None
            and type_node.kind in RECORD_SPECIFIER_TYPES
            and type_node.child_by_field("body") is not None
        )
