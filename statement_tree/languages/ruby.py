"""RubyGrammar — statement classification for tree-sitter Ruby."""

from __future__ import annotations

from ._base import SIMPLE, BaseGrammar, StatementKind, compound, simple, wrapper
from ..parser import CstNode

CALL_TYPES = frozenset({"call", "method_call"})

# A method call followed by `do ... end`.
CALL_WITH_DO_BLOCK = compound("block")


class RubyGrammar(BaseGrammar):
    """Classifies Ruby statements.

    Ruby has no statement node kind of its own: every named child of a
    statement list is a statement, which ``STATEMENT_LIST_TYPES`` expresses.
    The table only needs the kinds that own bodies.
    """

    GRAMMAR_NAME = "ruby"

    NOISE_TYPES = frozenset({"heredoc_body"})

    BLOCK_TYPES = frozenset({"then", "else", "do", "body_statement", "block_body"})

    STATEMENT_LIST_TYPES = frozenset(
        {
            "program",
            "then",
            "else",
            "do",
            "body_statement",
            "block_body",
            "begin",
            "ensure",
            "begin_block",
            "end_block",
            "class",
            "module",
            "method",
            "singleton_method",
            "singleton_class",
            "do_block",
            "parenthesized_statements",
        }
    )

    def __init__(self):
        super().__init__()
        self._STATEMENT_KINDS: dict[str, StatementKind] = {
            "if": compound("consequence", "alternative"),
            "unless": compound("consequence", "alternative"),
            "elsif": wrapper("consequence", "alternative"),
            "while": compound("body"),
            "until": compound("body"),
            "for": compound("body"),
            "case": compound(unfielded=True),
            "case_match": compound("clauses", "else", unfielded=True),
            "when": compound("body"),
            "in_clause": compound("body"),
            "begin": compound(unfielded=True),
            "rescue": wrapper("body"),
            "ensure": wrapper(unfielded=True),
            "begin_block": compound(unfielded=True),
            "end_block": compound(unfielded=True),
            "class": compound("body", unfielded=True),
            "module": compound("body", unfielded=True),
            "singleton_class": compound("body", unfielded=True),
            "method": compound("body", unfielded=True),
            "singleton_method": compound("body", unfielded=True),
            "do_block": wrapper("body", unfielded=True),
            "if_modifier": simple(),
            "unless_modifier": simple(),
            "while_modifier": simple(),
            "until_modifier": simple(),
            "rescue_modifier": simple(),
        }

    def classify_node(self, node: CstNode, in_statement_list: bool = False) -> StatementKind:
        kind = super().classify_node(node, in_statement_list)
        if kind is SIMPLE and node.kind in CALL_TYPES:
            attached = node.child_by_field("block")
            if attached is not None and attached.kind == "do_block":
                return CALL_WITH_DO_BLOCK
        return kind
