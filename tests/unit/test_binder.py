#!/usr/bin/env python3
"""
Tests for the binder: parent links, scopes and identifier resolution.
"""

from googmodule.analysis.binder import SymbolTable, set_parent_links
from googmodule.shared.factory import create_identifier, set_original_node
from googmodule.shared.nodes import ImportClause, ImportDeclaration, ImportSpecifier
from googmodule.shared.scope import ScopeKind, ScopeManager, SymbolKind


def _bind(parser, source: str):
    unit = parser.parse(source, "t.js")
    table = SymbolTable()
    scope = table.bind(unit)
    return unit, table, scope


class TestParentLinks:

    def test_import_specifier_chain(self, parser):
        unit = parser.parse("import Foo from 'goog:x';", "t.js")
        set_parent_links(unit)
        decl = unit.statements[0]
        spec = decl.import_clause.default
        assert isinstance(spec.parent, ImportClause)
        assert isinstance(spec.parent.parent, ImportDeclaration)
        assert decl.parent is unit

    def test_nested_expression(self, parser):
        unit = parser.parse("a.b(c);", "t.js")
        set_parent_links(unit)
        call = unit.statements[0].expression
        assert call.arguments[0].parent is call
        assert call.callee.expression.parent is call.callee


class TestModuleScope:

    def test_declarations_collected(self, parser):
        source = ("import Foo, { bar } from './x';\nvar a = 1;\nlet b = 2;\n"
                  "function f() {}\nif (a) {\n    var hoisted = 3;\n}")
        _, table, scope = _bind(parser, source)
        symbols = scope.symbols
        assert symbols["Foo"].kind is SymbolKind.IMPORT
        assert symbols["bar"].kind is SymbolKind.IMPORT
        assert symbols["a"].kind is SymbolKind.VARIABLE
        assert symbols["b"].kind is SymbolKind.VARIABLE
        assert symbols["f"].kind is SymbolKind.FUNCTION
        assert "hoisted" in symbols
        assert table.module_scope("t.js") is scope

    def test_redeclaration_appends(self, parser):
        _, _, scope = _bind(parser, "var a = 1;\nvar a = 2;")
        assert len(scope.symbols["a"].declarations) == 2

    def test_block_let_not_in_module_scope(self, parser):
        _, _, scope = _bind(parser, "if (x) {\n    let inner = 1;\n}")
        assert "inner" not in scope.symbols

    def test_function_locals_not_in_module_scope(self, parser):
        _, _, scope = _bind(parser, "function f(p) {\n    var local = p;\n}")
        assert "local" not in scope.symbols
        assert "p" not in scope.symbols


class TestResolution:

    def test_reference_resolves_to_import(self, parser):
        unit, table, scope = _bind(parser, "import Foo from 'goog:x';\nFoo.default;")
        ident = unit.statements[1].expression.expression
        symbol = table.get_symbol_at_location(ident)
        assert symbol is scope.symbols["Foo"]
        assert isinstance(symbol.value_declaration, ImportSpecifier)

    def test_use_before_declaration_resolves(self, parser):
        unit, table, _ = _bind(parser, "f();\nfunction f() {}")
        assert table.get_symbol_at_location(unit.statements[0].expression.callee) is not None

    def test_globals_resolve_to_none(self, parser):
        unit, table, _ = _bind(parser, "require('x');")
        assert table.get_symbol_at_location(unit.statements[0].expression.callee) is None

    def test_parameter_shadows_module_name(self, parser):
        unit, table, scope = _bind(parser, "var a = 1;\nfunction f(a) {\n    return a;\n}")
        inner = unit.statements[1].body.statements[0].expression
        symbol = table.get_symbol_at_location(inner)
        assert symbol.kind is SymbolKind.PARAMETER
        assert symbol is not scope.symbols["a"]

    def test_named_function_expression_binds_own_name(self, parser):
        unit, table, scope = _bind(parser, "var g = function h() {\n    return h;\n};")
        inner = unit.statements[0].declarations[0].initializer.body.statements[0].expression
        assert table.get_symbol_at_location(inner).kind is SymbolKind.FUNCTION
        assert "h" not in scope.symbols

    def test_for_in_let_scoped_to_loop(self, parser):
        unit, table, scope = _bind(parser, "for (let k in o) {\n    use(k);\n}")
        call = unit.statements[0].statement.statements[0].expression
        assert table.get_symbol_at_location(call.arguments[0]) is not None
        assert "k" not in scope.symbols

    def test_synthesized_identifier_uses_original(self, parser):
        unit, table, scope = _bind(parser, "var a = 1;\na;")
        original = unit.statements[1].expression
        synthesized = set_original_node(create_identifier("a"), original)
        assert table.get_symbol_at_location(synthesized) is scope.symbols["a"]

    def test_non_identifier_has_no_symbol(self, parser):
        unit, table, _ = _bind(parser, "a.b;")
        assert table.get_symbol_at_location(unit.statements[0].expression) is None
        assert table.get_symbol_at_location(None) is None


class TestControlFlowScopes:

    def test_vars_hoist_out_of_loops_and_try(self, parser):
        source = ("for (var i = 0; i < 1; i++) {\n    var a = i;\n}\n"
                  "while (x) {\n    var b = 1;\n}\n"
                  "try {\n    var c = 1;\n} catch (e) {\n    var d = e;\n} finally {\n    var f = 2;\n}\n"
                  "switch (x) {\n    case 1:\n        var g = 3;\n}")
        _, _, scope = _bind(parser, source)
        for name in ("i", "a", "b", "c", "d", "f", "g"):
            assert name in scope.symbols
        assert "e" not in scope.symbols

    def test_catch_variable_resolves_in_catch_block(self, parser):
        unit, table, _ = _bind(parser, "try {\n    f();\n} catch (err) {\n    use(err);\n}")
        call = unit.statements[0].catch_clause.block.statements[0].expression
        symbol = table.get_symbol_at_location(call.arguments[0])
        assert symbol is not None
        assert symbol.kind is SymbolKind.VARIABLE

    def test_for_let_scoped_to_loop(self, parser):
        unit, table, scope = _bind(parser, "for (let k = 0; k < n; k++) {\n    use(k);\n}")
        call = unit.statements[0].statement.statements[0].expression
        assert table.get_symbol_at_location(call.arguments[0]) is not None
        assert "k" not in scope.symbols

    def test_class_declared_in_module_scope(self, parser):
        unit, table, scope = _bind(parser, "class A {\n    m(p) {\n        return p;\n    }\n}\nnew A();")
        assert scope.symbols["A"].kind is SymbolKind.CLASS
        assert "p" not in scope.symbols
        ret = unit.statements[0].members[0].body.statements[0]
        assert table.get_symbol_at_location(ret.expression).kind is SymbolKind.PARAMETER
        assert table.get_symbol_at_location(unit.statements[1].expression.callee) is scope.symbols["A"]

    def test_arrow_parameters_are_local(self, parser):
        unit, table, scope = _bind(parser, "import x from 'goog:x';\nconst f = (x) => x.default;")
        arrow = unit.statements[1].declarations[0].initializer
        inner = arrow.body.expression
        assert table.get_symbol_at_location(inner).kind is SymbolKind.PARAMETER
        assert scope.symbols["x"].kind is SymbolKind.IMPORT


class TestScopeManager:

    def test_nested_lookup_and_exit(self):
        manager = ScopeManager()
        with manager.scope(ScopeKind.MODULE) as outer:
            outer.declare("x", SymbolKind.VARIABLE, None)
            with manager.scope(ScopeKind.BLOCK) as inner:
                assert manager.lookup("x") is outer.symbols["x"]
                assert inner.var_scope() is outer
        assert manager.current_scope() is None
        assert manager.lookup("x") is None
