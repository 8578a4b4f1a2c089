"""TypeScriptGrammar — statement classification for tree-sitter TypeScript / TSX."""

from __future__ import annotations

from ._base import compound, fused, simple
from .javascript import JavaScriptGrammar


class TypeScriptGrammar(JavaScriptGrammar):
    """Classifies TypeScript statements (extends JavaScriptGrammar).

    Interface and enum members are not statements, so those declarations
    are compound with no children.
    """

    GRAMMAR_NAME = "typescript"

    BLOCK_TYPES = JavaScriptGrammar.BLOCK_TYPES | frozenset(
        {"interface_body", "enum_body", "object_type"}
    )

    def __init__(self):
        super().__init__()

        self._STATEMENT_KINDS.update(
            {
                "interface_declaration": compound("body"),
                "enum_declaration": compound("body"),
                "abstract_class_declaration": compound("body"),
                "internal_module": compound("body"),
                "module": compound("body"),
                "ambient_declaration": fused(),
                "type_alias_declaration": simple(),
                "import_alias": simple(),
                "public_field_definition": simple(),
                "function_signature": simple(),
                "abstract_method_signature": simple(),
            }
        )


class TsxGrammar(TypeScriptGrammar):
    GRAMMAR_NAME = "tsx"
