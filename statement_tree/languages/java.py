"""JavaGrammar — statement classification for tree-sitter Java."""

from __future__ import annotations

from ._base import BaseGrammar, StatementKind, block, compound, control, fused, simple, wrapper


class JavaGrammar(BaseGrammar):
    """Classifies Java declarations and statements."""

    GRAMMAR_NAME = "java"

    BLOCK_TYPES = frozenset(
        {
            "block",
            "class_body",
            "interface_body",
            "enum_body",
            "annotation_type_body",
            "constructor_body",
            "module_body",
        }
    )

    def __init__(self):
        super().__init__()
        self._STATEMENT_KINDS: dict[str, StatementKind] = {
            # declarations
            "package_declaration": simple(),
            "import_declaration": simple(),
            "module_declaration": compound("body"),
            "class_declaration": compound("body"),
            "interface_declaration": compound("body"),
            "enum_declaration": compound("body"),
            "record_declaration": compound("body"),
            "annotation_type_declaration": compound("body"),
            "annotation_type_element_declaration": simple(),
            "constant_declaration": simple(),
            "field_declaration": simple(),
            "method_declaration": compound("body"),
            "constructor_declaration": compound("body"),
            "compact_constructor_declaration": compound("body"),
            "static_initializer": compound(unfielded=True),
            # statements
            "block": block(),
            "local_variable_declaration": simple(),
            "expression_statement": simple(),
            "explicit_constructor_invocation": simple(),
            "return_statement": simple(),
            "break_statement": simple(),
            "continue_statement": simple(),
            "throw_statement": simple(),
            "assert_statement": simple(),
            "yield_statement": simple(),
            "labeled_statement": fused(),
            "if_statement": control("consequence", "alternative"),
            "while_statement": control("body"),
            "do_statement": control("body"),
            "for_statement": control("body"),
            "enhanced_for_statement": control("body"),
            "synchronized_statement": compound("body"),
            "switch_expression": compound("body"),
            "switch_block": wrapper(unfielded=True),
            "switch_block_statement_group": wrapper(unfielded=True),
            "switch_rule": wrapper(unfielded=True),
            "try_statement": compound("body", unfielded=True),
            "try_with_resources_statement": compound("body", unfielded=True),
            "catch_clause": wrapper("body"),
            "finally_clause": wrapper(unfielded=True),
        }
