"""PhpGrammar — statement classification for tree-sitter PHP."""

from __future__ import annotations

from ._base import BaseGrammar, StatementKind, block, compound, control, simple, wrapper


class PhpGrammar(BaseGrammar):
    """Classifies PHP statements, including the ``: ... endif;`` forms."""

    GRAMMAR_NAME = "php"

    NOISE_TYPES = frozenset({"php_tag", "text_interpolation"})

    BLOCK_TYPES = frozenset(
        {
            "compound_statement",
            "declaration_list",
            "enum_declaration_list",
            "colon_block",
        }
    )

    def __init__(self):
        super().__init__()
        self._STATEMENT_KINDS: dict[str, StatementKind] = {
            # declarations
            "namespace_definition": compound("body"),
            "namespace_use_declaration": simple(),
            "function_definition": compound("body"),
            "class_declaration": compound("body"),
            "interface_declaration": compound("body"),
            "trait_declaration": compound("body"),
            "enum_declaration": compound("body"),
            "method_declaration": compound("body"),
            "property_declaration": simple(),
            "const_declaration": simple(),
            "use_declaration": simple(),
            # statements
            "compound_statement": block(),
            "expression_statement": simple(),
            "echo_statement": simple(),
            "return_statement": simple(),
            "break_statement": simple(),
            "continue_statement": simple(),
            "global_declaration": simple(),
            "function_static_declaration": simple(),
            "unset_statement": simple(),
            "goto_statement": simple(),
            "named_label_statement": simple(),
            "empty_statement": simple(),
            "declare_statement": compound(unfielded=True),
            "if_statement": control("body", "alternative"),
            "else_if_clause": wrapper("body"),
            "else_clause": wrapper("body"),
            "while_statement": control("body"),
            "do_statement": control("body"),
            "for_statement": control("body", unfielded=True),
            "foreach_statement": control("body", unfielded=True),
            "switch_statement": compound("body"),
            "switch_block": wrapper(unfielded=True),
            "case_statement": wrapper(unfielded=True),
            "default_statement": wrapper(unfielded=True),
            "try_statement": compound("body", unfielded=True),
            "catch_clause": wrapper("body"),
            "finally_clause": wrapper("body"),
        }
