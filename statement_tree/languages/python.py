"""PythonGrammar — statement classification for tree-sitter Python."""

from __future__ import annotations

from ._base import BaseGrammar, StatementKind, compound, control, fused, simple, wrapper
from ..parser import CstNode


class PythonGrammar(BaseGrammar):
    """Classifies Python statements.

    Suites are ``block`` nodes in every position, so whether a body is
    inlined is decided by layout: a suite that starts on the owner's
    first line (``if x: y = 1``) is inlined.
    """

    GRAMMAR_NAME = "python"

    BLOCK_TYPES = frozenset({"block"})

    def __init__(self):
        super().__init__()
        self._STATEMENT_KINDS: dict[str, StatementKind] = {
            # simple statements
            "expression_statement": simple(),
            "return_statement": simple(),
            "pass_statement": simple(),
            "import_statement": simple(),
            "import_from_statement": simple(),
            "future_import_statement": simple(),
            "print_statement": simple(),
            "assert_statement": simple(),
            "delete_statement": simple(),
            "raise_statement": simple(),
            "break_statement": simple(),
            "continue_statement": simple(),
            "global_statement": simple(),
            "nonlocal_statement": simple(),
            "exec_statement": simple(),
            "type_alias_statement": simple(),
            # control flow
            "if_statement": control("consequence", "alternative"),
            "elif_clause": wrapper("consequence"),
            "else_clause": wrapper("body", unfielded=True),
            "for_statement": control("body", "alternative"),
            "while_statement": control("body", "alternative"),
            "try_statement": compound("body", unfielded=True),
            "except_clause": wrapper("body", unfielded=True),
            "except_group_clause": wrapper("body", unfielded=True),
            "finally_clause": wrapper("body", unfielded=True),
            "with_statement": compound("body"),
            "match_statement": compound("body"),
            "case_clause": wrapper("consequence"),
            # definitions
            "function_definition": compound("body"),
            "class_definition": compound("body"),
            "decorated_definition": fused("definition"),
        }

    def is_inlined_body(self, owner: CstNode, body: CstNode) -> bool:
        if not self.is_block(body):
            return True
        return body.start_row == owner.start_row
