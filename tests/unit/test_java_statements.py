"""Tests for Java and C# statement segmentation."""

from __future__ import annotations

import pytest

from tests.unit.conftest import assert_statements, build_tree, child_texts, find_kind


class TestJavaDeclarations:
    @pytest.mark.asyncio
    async def test_class_fields_and_methods(self):
        await assert_statements(
            "java",
            "«class A {\n  «int x = 1;»\n  «void f() {\n    «g();»\n  }»\n}»",
        )

    @pytest.mark.asyncio
    async def test_interface_method_without_body_is_simple(self):
        tree = await assert_statements("java", "«interface I {\n  «void f();»\n}»")
        assert tree.statements[0].is_compound
        assert not tree.statements[0].children[0].is_compound

    @pytest.mark.asyncio
    async def test_enum_is_compound(self):
        tree = await assert_statements("java", "«enum Color {\n  RED,\n  GREEN\n}»")
        assert tree.statements[0].is_compound

    @pytest.mark.asyncio
    async def test_record_compact_constructor(self):
        tree = await build_tree(
            "java", "record P(int x) {\n  P {\n    check(x);\n  }\n}"
        )
        (constructor,) = find_kind(tree, "compact_constructor_declaration")
        assert constructor.is_compound
        assert child_texts(constructor) == ["check(x);"]

    @pytest.mark.asyncio
    async def test_constructor_and_static_initializer(self):
        tree = await build_tree(
            "java",
            "class A {\n  static {\n    init();\n  }\n  A() {\n    super();\n  }\n}",
        )
        (static_block,) = find_kind(tree, "static_initializer")
        assert child_texts(static_block) == ["init();"]
        (constructor,) = find_kind(tree, "constructor_declaration")
        assert child_texts(constructor) == ["super();"]

    @pytest.mark.asyncio
    async def test_package_and_imports(self):
        tree = await build_tree("java", "package a.b;\nimport java.util.List;\nclass A {}")
        assert [s.kind for s in tree.statements] == [
            "package_declaration",
            "import_declaration",
            "class_declaration",
        ]


class TestJavaStatements:
    async def _method_body(self, body: str):
        tree = await build_tree("java", "class A {\n  void f() {\n" + body + "\n  }\n}")
        (method,) = find_kind(tree, "method_declaration")
        return method.children

    @pytest.mark.asyncio
    async def test_switch_groups_are_transparent(self):
        (switch,) = await self._method_body(
            "    switch (x) {\n      case 1:\n        a();\n        break;\n"
            "      default:\n        b();\n    }"
        )
        assert switch.is_compound
        assert child_texts(switch) == ["a();", "break;", "b();"]

    @pytest.mark.asyncio
    async def test_try_catch_finally(self):
        (statement,) = await self._method_body(
            "    try {\n      a();\n    } catch (Exception e) {\n      b();\n"
            "    } finally {\n      c();\n    }"
        )
        assert child_texts(statement) == ["a();", "b();", "c();"]

    @pytest.mark.asyncio
    async def test_enhanced_for_collapses(self):
        loops = await self._method_body(
            "    for (int x : xs) g(x);\n    for (int x : xs) {\n      g(x);\n    }"
        )
        assert [loop.is_compound for loop in loops] == [False, True]

    @pytest.mark.asyncio
    async def test_synchronized_block(self):
        (statement,) = await self._method_body("    synchronized (this) {\n      a();\n    }")
        assert statement.is_compound
        assert child_texts(statement) == ["a();"]

    @pytest.mark.asyncio
    async def test_labeled_loop(self):
        (statement,) = await self._method_body(
            "    outer:\n    for (;;) {\n      break outer;\n    }"
        )
        assert statement.kind == "labeled_statement"
        assert child_texts(statement) == ["break outer;"]

    @pytest.mark.asyncio
    async def test_lambda_statement_is_simple(self):
        (statement,) = await self._method_body("    run(() -> {\n      a();\n    });")
        assert not statement.is_compound


class TestCSharpDeclarations:
    @pytest.mark.asyncio
    async def test_namespace_class_method(self):
        await assert_statements(
            "csharp",
            "«namespace N {\n  «class A {\n    «void F() {\n      «G();»\n    }»\n  }»\n}»",
        )

    @pytest.mark.asyncio
    async def test_properties_and_accessors(self):
        tree = await build_tree(
            "csharp",
            "class A {\n  int X { get; set; }\n  int Y {\n    get { return 1; }\n  }\n}",
        )
        x, y = find_kind(tree, "property_declaration")
        assert x.is_compound
        assert child_texts(x) == ["get;", "set;"]
        assert not any(c.is_compound for c in x.children)
        (getter,) = y.children
        assert getter.is_compound
        assert child_texts(getter) == ["return 1;"]

    @pytest.mark.asyncio
    async def test_expression_bodied_member_is_simple(self):
        tree = await build_tree("csharp", "class A {\n  int F() => 1;\n}")
        (method,) = find_kind(tree, "method_declaration")
        assert not method.is_compound

    @pytest.mark.asyncio
    async def test_top_level_statements(self):
        tree = await build_tree("csharp", "using System;\nConsole.WriteLine(1);")
        assert [s.text for s in tree.statements] == [
            "using System;",
            "Console.WriteLine(1);",
        ]

    @pytest.mark.asyncio
    async def test_enum_is_compound(self):
        tree = await build_tree("csharp", "enum E {\n  A,\n  B\n}")
        assert tree.statements[0].is_compound
        assert tree.statements[0].children == []


class TestCSharpStatements:
    async def _method_body(self, body: str):
        tree = await build_tree("csharp", "class A {\n  void F() {\n" + body + "\n  }\n}")
        (method,) = find_kind(tree, "method_declaration")
        return method.children

    @pytest.mark.asyncio
    async def test_switch_sections_are_transparent(self):
        (switch,) = await self._method_body(
            "    switch (x) {\n      case 1:\n        A();\n        break;\n"
            "      default:\n        B();\n        break;\n    }"
        )
        assert child_texts(switch) == ["A();", "break;", "B();", "break;"]

    @pytest.mark.asyncio
    async def test_lock_and_foreach(self):
        statements = await self._method_body(
            "    lock (o) {\n      A();\n    }\n    foreach (var x in xs) B(x);"
        )
        assert [s.kind for s in statements] == ["lock_statement", "foreach_statement"]
        assert [s.is_compound for s in statements] == [True, False]

    @pytest.mark.asyncio
    async def test_try_catch_finally(self):
        (statement,) = await self._method_body(
            "    try {\n      A();\n    } catch (Exception e) {\n      B();\n"
            "    } finally {\n      C();\n    }"
        )
        assert child_texts(statement) == ["A();", "B();", "C();"]
