"""Tests for the grammar registry and per-language classification tables."""

from __future__ import annotations

import pytest

from statement_tree import constants
from statement_tree.errors import UnsupportedLanguageError
from statement_tree.languages import (
    NOT_A_STATEMENT,
    SIMPLE,
    SUPPORTED_LANGUAGES,
    classify,
    get_grammar,
    grammar_name,
    is_supported,
)
from statement_tree.languages.c import CGrammar
from statement_tree.languages.cpp import CppGrammar
from statement_tree.languages.typescript import TsxGrammar, TypeScriptGrammar


class TestSupportedLanguages:
    @pytest.mark.parametrize("language", SUPPORTED_LANGUAGES)
    def test_every_language_has_a_grammar(self, language):
        assert is_supported(language)
        assert get_grammar(language).GRAMMAR_NAME == constants.LANGUAGE_GRAMMARS[language]

    @pytest.mark.parametrize(
        "language", ["javascript", "javascriptreact", "jsx", "typescript", "typescriptreact"]
    )
    def test_javascript_family_is_supported(self, language):
        assert is_supported(language)

    def test_unknown_language(self):
        assert not is_supported("cobol")
        with pytest.raises(UnsupportedLanguageError) as excinfo:
            get_grammar("cobol")
        assert excinfo.value.language_id == "cobol"
        assert isinstance(excinfo.value, ValueError)

    def test_aliases_share_one_grammar_instance(self):
        assert get_grammar("jsx") is get_grammar("javascriptreact")
        assert get_grammar("jsx") is get_grammar("javascript")

    def test_grammar_names(self):
        assert grammar_name("typescriptreact") == "tsx"
        assert grammar_name("javascriptreact") == "javascript"
        assert isinstance(get_grammar("typescriptreact"), TsxGrammar)
        assert isinstance(get_grammar("typescriptreact"), TypeScriptGrammar)


class TestClassify:
    def test_simple_statement(self):
        assert classify("python", "pass_statement") is SIMPLE

    def test_unknown_kind_is_transparent(self):
        kind = classify("python", "argument_list")
        assert kind is NOT_A_STATEMENT
        assert not kind.statement
        assert not kind.compound

    def test_compound_statement_has_body_fields(self):
        kind = classify("java", "method_declaration")
        assert kind.statement
        assert kind.compound
        assert kind.body_fields == ("body",)

    def test_control_statements_are_collapsible(self):
        assert classify("c", "if_statement").collapsible
        assert not classify("c", "function_definition").collapsible

    def test_clauses_are_wrappers(self):
        kind = classify("javascript", "else_clause")
        assert kind.is_wrapper
        assert not kind.statement

    def test_labels_and_decorators_are_fused(self):
        assert classify("go", "labeled_statement").is_fused
        assert classify("python", "decorated_definition").fuse_field == "definition"

    def test_cpp_extends_c(self):
        c, cpp = CGrammar(), CppGrammar()
        assert set(c.statement_kinds) < set(cpp.statement_kinds)
        assert cpp.classify("if_statement") == c.classify("if_statement")
        assert c.classify("namespace_definition") is NOT_A_STATEMENT

    def test_statement_kinds_is_a_copy(self):
        grammar = get_grammar("go")
        grammar.statement_kinds.clear()
        assert grammar.classify("go_statement") is SIMPLE


class TestTrimmedByDefault:
    def test_trimmed_languages(self):
        assert constants.TRIMMED_BY_DEFAULT_LANGUAGES == {
            "javascript",
            "javascriptreact",
            "jsx",
            "typescript",
            "typescriptreact",
            "go",
        }
