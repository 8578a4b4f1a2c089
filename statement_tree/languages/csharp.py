"""CSharpGrammar — statement classification for tree-sitter C#."""

from __future__ import annotations

from ._base import BaseGrammar, StatementKind, block, compound, control, fused, simple, wrapper


class CSharpGrammar(BaseGrammar):
    """Classifies C# declarations, members and statements.

    Properties, indexers and events own an accessor list; each accessor is
    compound only when it has a block body (``get { ... }``), so ``get;``
    stays simple.
    """

    GRAMMAR_NAME = "csharp"

    BLOCK_TYPES = frozenset(
        {
            "block",
            "declaration_list",
            "enum_member_declaration_list",
            "accessor_list",
        }
    )

    def __init__(self):
        super().__init__()
        self._STATEMENT_KINDS: dict[str, StatementKind] = {
            # compilation unit
            "extern_alias_directive": simple(),
            "using_directive": simple(),
            "global_attribute": simple(),
            "global_attribute_list": simple(),
            "namespace_declaration": compound("body"),
            "file_scoped_namespace_declaration": compound(unfielded=True),
            # types
            "class_declaration": compound("body"),
            "struct_declaration": compound("body"),
            "interface_declaration": compound("body"),
            "record_declaration": compound("body"),
            "record_struct_declaration": compound("body"),
            "enum_declaration": compound("body"),
            "delegate_declaration": simple(),
            # members
            "field_declaration": simple(),
            "event_field_declaration": simple(),
            "method_declaration": compound("body"),
            "constructor_declaration": compound("body"),
            "destructor_declaration": compound("body"),
            "operator_declaration": compound("body"),
            "conversion_operator_declaration": compound("body"),
            "property_declaration": compound("accessors"),
            "indexer_declaration": compound("accessors"),
            "event_declaration": compound("accessors"),
            "accessor_declaration": compound("body"),
            # statements
            "block": block(),
            "local_declaration_statement": simple(),
            "local_function_statement": compound("body"),
            "expression_statement": simple(),
            "return_statement": simple(),
            "break_statement": simple(),
            "continue_statement": simple(),
            "throw_statement": simple(),
            "yield_statement": simple(),
            "goto_statement": simple(),
            "empty_statement": simple(),
            "labeled_statement": fused(),
            "if_statement": control("consequence", "alternative"),
            "while_statement": control("body"),
            "do_statement": control("body"),
            "for_statement": control("body"),
            "foreach_statement": control("body"),
            "switch_statement": compound("body", unfielded=True),
            "switch_body": wrapper(unfielded=True),
            "switch_section": wrapper(unfielded=True),
            "try_statement": compound("body", unfielded=True),
            "catch_clause": wrapper("body"),
            "finally_clause": wrapper(unfielded=True),
            "checked_statement": compound(unfielded=True),
            "unsafe_statement": compound(unfielded=True),
            "lock_statement": compound("body", unfielded=True),
            "fixed_statement": compound("body", unfielded=True),
            "using_statement": compound("body", unfielded=True),
        }
