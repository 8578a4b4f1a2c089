"""GoGrammar — statement classification for tree-sitter Go."""

from __future__ import annotations

from ._base import BaseGrammar, StatementKind, block, compound, control, fused, simple, wrapper


class GoGrammar(BaseGrammar):
    """Classifies Go statements; switch/select cases are transparent."""

    GRAMMAR_NAME = "go"

    BLOCK_TYPES = frozenset({"block", "statement_list"})

    def __init__(self):
        super().__init__()
        self._STATEMENT_KINDS: dict[str, StatementKind] = {
            # top level
            "package_clause": simple(),
            "import_declaration": simple(),
            "const_declaration": simple(),
            "var_declaration": simple(),
            "type_declaration": simple(),
            "function_declaration": compound("body"),
            "method_declaration": compound("body"),
            # simple statements
            "expression_statement": simple(),
            "send_statement": simple(),
            "receive_statement": simple(),
            "inc_statement": simple(),
            "dec_statement": simple(),
            "assignment_statement": simple(),
            "short_var_declaration": simple(),
            "go_statement": simple(),
            "defer_statement": simple(),
            "return_statement": simple(),
            "break_statement": simple(),
            "continue_statement": simple(),
            "goto_statement": simple(),
            "fallthrough_statement": simple(),
            "empty_statement": simple(),
            # compound statements
            "block": block(),
            "labeled_statement": fused(),
            "if_statement": control("consequence", "alternative"),
            "for_statement": compound("body"),
            "expression_switch_statement": compound(unfielded=True),
            "type_switch_statement": compound(unfielded=True),
            "select_statement": compound(unfielded=True),
            "expression_case": wrapper(unfielded=True),
            "type_case": wrapper(unfielded=True),
            "default_case": wrapper(unfielded=True),
            "communication_case": wrapper(unfielded=True),
        }
