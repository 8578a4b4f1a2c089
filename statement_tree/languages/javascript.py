"""JavaScriptGrammar — statement classification for tree-sitter JavaScript."""

from __future__ import annotations

from ._base import BaseGrammar, StatementKind, block, compound, control, fused, simple, wrapper


class JavaScriptGrammar(BaseGrammar):
    """Classifies JavaScript statements and class members.

    ``export`` prefixes are fused into the declaration they export; switch
    cases are transparent so case bodies belong to the switch.
    """

    GRAMMAR_NAME = "javascript"

    NOISE_TYPES = frozenset({"hash_bang_line"})

    BLOCK_TYPES = frozenset({"statement_block", "class_body"})

    def __init__(self):
        super().__init__()
        self._STATEMENT_KINDS: dict[str, StatementKind] = {
            # declarations
            "import_statement": simple(),
            "export_statement": fused("declaration"),
            "variable_declaration": simple(),
            "lexical_declaration": simple(),
            "function_declaration": compound("body"),
            "generator_function_declaration": compound("body"),
            "class_declaration": compound("body"),
            "method_definition": compound("body"),
            "field_definition": simple(),
            "class_static_block": compound("body"),
            # statements
            "statement_block": block(),
            "expression_statement": simple(),
            "debugger_statement": simple(),
            "return_statement": simple(),
            "break_statement": simple(),
            "continue_statement": simple(),
            "throw_statement": simple(),
            "empty_statement": simple(),
            "labeled_statement": fused("body"),
            "if_statement": control("consequence", "alternative"),
            "else_clause": wrapper(unfielded=True),
            "for_statement": control("body"),
            "for_in_statement": control("body"),
            "while_statement": control("body"),
            "do_statement": control("body"),
            "with_statement": compound("body"),
            "switch_statement": compound("body"),
            "switch_body": wrapper(unfielded=True),
            "switch_case": wrapper("body", unfielded=True),
            "switch_default": wrapper("body", unfielded=True),
            "try_statement": compound("body", "handler", "finalizer"),
            "catch_clause": wrapper("body"),
            "finally_clause": wrapper("body"),
        }
