#!/usr/bin/env python3
"""
Tests for the JavaScript parser: node shapes, precedence, comments, syntax errors.
"""

import pytest

from googmodule.frontend.parser import ParseError
from googmodule.shared.nodes import (
    ArrowFunction, BinaryExpression, BinaryOperator, Block, BooleanLiteral, BreakStatement, CallExpression,
    ClassDeclaration, ClassExpression, CommaListExpression, ContinueStatement, DoStatement, ElementAccess,
    ExpressionStatement, ForInStatement, ForStatement, FunctionDeclaration, Identifier, IfStatement,
    ImportDeclaration, ImportKind, ExportDeclaration, MethodKind, NotEmittedStatement, NumericLiteral,
    ObjectBindingPattern, ObjectLiteral, ParenthesizedExpression, PropertyAccess, PropertyDeclaration,
    ShorthandPropertyAssignment, StringLiteral, SuperExpression, SwitchStatement, ThrowStatement,
    TryStatement, UnaryExpression, UnaryOperator, UpdateExpression, VariableKind, VariableStatement,
    NewExpression, WhileStatement,
)


def _expr(parser, source: str):
    unit = parser.parse(source, "t.js")
    stmt = unit.statements[0]
    assert isinstance(stmt, ExpressionStatement)
    return stmt.expression


class TestStatements:
    """Statement shapes produced by TypeScript's CommonJS emit."""

    def test_use_strict_is_string_statement(self, parser):
        expr = _expr(parser, '"use strict";')
        assert isinstance(expr, StringLiteral)
        assert expr.value == "use strict"
        assert expr.raw == '"use strict"'

    def test_require_call(self, parser):
        expr = _expr(parser, "require('./foo');")
        assert isinstance(expr, CallExpression)
        assert isinstance(expr.callee, Identifier) and expr.callee.name == "require"
        assert len(expr.arguments) == 1
        assert expr.arguments[0].value == "./foo"

    def test_var_with_require(self, parser):
        unit = parser.parse('var foo_1 = require("./foo");', "t.js")
        stmt = unit.statements[0]
        assert isinstance(stmt, VariableStatement)
        assert stmt.kind is VariableKind.VAR
        decl = stmt.declarations[0]
        assert decl.name.name == "foo_1"
        assert isinstance(decl.initializer, CallExpression)

    def test_multiple_declarators(self, parser):
        stmt = parser.parse("let a = 1, b;", "t.js").statements[0]
        assert stmt.kind is VariableKind.LET
        assert [d.name.name for d in stmt.declarations] == ["a", "b"]
        assert stmt.declarations[1].initializer is None

    def test_destructuring_declaration(self, parser):
        stmt = parser.parse("const { a, b: c } = require('x');", "t.js").statements[0]
        pattern = stmt.declarations[0].name
        assert isinstance(pattern, ObjectBindingPattern)
        assert [e.name.name for e in pattern.elements] == ["a", "c"]
        assert pattern.elements[1].property_name == "b"

    def test_es_module_marker(self, parser):
        expr = _expr(parser, 'Object.defineProperty(exports, "__esModule", { value: true });')
        assert isinstance(expr.callee, PropertyAccess)
        assert expr.callee.name == "defineProperty"
        descriptor = expr.arguments[2]
        assert isinstance(descriptor, ObjectLiteral)
        assert descriptor.properties[0].name.name == "value"
        assert isinstance(descriptor.properties[0].initializer, BooleanLiteral)

    def test_function_declaration_and_if(self, parser):
        source = "function f(a, b) {\n    if (a) {\n        return b;\n    } else return;\n}"
        fn = parser.parse(source, "t.js").statements[0]
        assert isinstance(fn, FunctionDeclaration)
        assert [p.name.name for p in fn.parameters] == ["a", "b"]
        branch = fn.body.statements[0]
        assert isinstance(branch, IfStatement)
        assert branch.else_statement is not None

    def test_for_in(self, parser):
        stmt = parser.parse("for (var p in m) if (!exports.hasOwnProperty(p)) exports[p] = m[p];", "t.js").statements[0]
        assert isinstance(stmt, ForInStatement)
        assert stmt.initializer.declarations[0].name.name == "p"
        assert isinstance(stmt.statement, IfStatement)

    def test_empty_file(self, parser):
        assert parser.parse("", "t.js").statements == []


class TestExpressions:
    """Operator precedence and member chains."""

    def test_multiplication_binds_tighter(self, parser):
        expr = _expr(parser, "a + b * c;")
        assert isinstance(expr, BinaryExpression)
        assert expr.operator is BinaryOperator.ADD
        assert expr.right.operator is BinaryOperator.MUL

    def test_left_associative(self, parser):
        expr = _expr(parser, "a - b - c;")
        assert expr.operator is BinaryOperator.SUB
        assert isinstance(expr.left, BinaryExpression)
        assert expr.right.name == "c"

    def test_exponent_right_associative(self, parser):
        expr = _expr(parser, "a ** b ** c;")
        assert expr.left.name == "a"
        assert isinstance(expr.right, BinaryExpression)

    def test_assignment_chain(self, parser):
        expr = _expr(parser, "exports.a = exports.b = void 0;")
        assert expr.operator is BinaryOperator.ASSIGN
        assert expr.right.operator is BinaryOperator.ASSIGN
        assert isinstance(expr.right.right, UnaryExpression)
        assert expr.right.right.operator is UnaryOperator.VOID

    def test_logical_or_with_object(self, parser):
        expr = _expr(parser, "x = y || {};")
        assert expr.right.operator is BinaryOperator.OR
        assert isinstance(expr.right.right, ObjectLiteral)

    def test_member_call_index_chain(self, parser):
        expr = _expr(parser, "a.b[0].c(d);")
        assert isinstance(expr, CallExpression)
        assert isinstance(expr.callee, PropertyAccess) and expr.callee.name == "c"
        assert isinstance(expr.callee.expression, ElementAccess)
        assert isinstance(expr.callee.expression.argument, NumericLiteral)

    def test_default_member_name(self, parser):
        expr = _expr(parser, "foo_1.default.bar;")
        assert expr.expression.name == "default"

    def test_parenthesized_function(self, parser):
        expr = _expr(parser, "(function () { return this; })();")
        assert isinstance(expr.callee, ParenthesizedExpression)

    def test_new_with_member_callee(self, parser):
        expr = _expr(parser, "x = new a.B(1);")
        assert isinstance(expr.right, NewExpression)
        assert isinstance(expr.right.callee, PropertyAccess)
        assert len(expr.right.arguments) == 1

    def test_string_escapes_decoded(self, parser):
        expr = _expr(parser, r"'it\'s\n';")
        assert expr.value == "it's\n"
        assert expr.single_quote


class TestModuleSyntax:
    """ES import/export declarations."""

    def test_default_import(self, parser):
        decl = parser.parse("import Foo from 'goog:some.Foo';", "t.js").statements[0]
        assert isinstance(decl, ImportDeclaration)
        assert decl.import_clause.default.name.name == "Foo"
        assert decl.module_specifier.value == "goog:some.Foo"

    def test_named_and_namespace_imports(self, parser):
        named = parser.parse("import { a, b as c } from './x';", "t.js").statements[0]
        assert [s.name.name for s in named.import_clause.specifiers] == ["a", "c"]
        assert named.import_clause.bindings[1].property_name == "b"
        ns = parser.parse("import * as ns from './x';", "t.js").statements[0]
        assert ns.import_clause.bindings[0].kind is ImportKind.NAMESPACE

    def test_bare_import(self, parser):
        decl = parser.parse("import './side';", "t.js").statements[0]
        assert decl.import_clause is None

    def test_exports(self, parser):
        star = parser.parse("export * from './x';", "t.js").statements[0]
        assert isinstance(star, ExportDeclaration) and star.specifiers is None
        named = parser.parse("export { a as b };", "t.js").statements[0]
        assert named.module_specifier is None
        assert named.specifiers[0].name == "b"


class TestComments:
    """Comment attachment."""

    def test_comment_attached_to_next_statement(self, parser):
        unit = parser.parse("a();\n// note\nb();", "t.js")
        assert unit.statements[0].leading_comments == []
        assert [c.text for c in unit.statements[1].leading_comments] == ["// note"]

    def test_trailing_comment(self, parser):
        unit = parser.parse("a();\n/* end */", "t.js")
        assert [c.text for c in unit.trailing_comments] == ["/* end */"]

    def test_detached_header(self, parser):
        unit = parser.parse("// Copyright\n\n// about a\na();", "t.js")
        header = unit.statements[0]
        assert isinstance(header, NotEmittedStatement)
        assert [c.text for c in header.leading_comments] == ["// Copyright"]
        assert [c.text for c in unit.statements[1].leading_comments] == ["// about a"]

    def test_comment_only_file(self, parser):
        unit = parser.parse("// nothing here\n", "t.js")
        assert len(unit.statements) == 1
        assert isinstance(unit.statements[0], NotEmittedStatement)

    def test_nested_statement_comment(self, parser):
        unit = parser.parse("function f() {\n    // inside\n    return 1;\n}", "t.js")
        ret = unit.statements[0].body.statements[0]
        assert [c.text for c in ret.leading_comments] == ["// inside"]


class TestControlFlow:
    """Loops, exceptions and switch, as found in tslib helpers."""

    def test_throw_in_function(self, parser):
        fn = parser.parse('function f(x) {\n    throw new Error("no");\n}\n', "t.js").statements[0]
        stmt = fn.body.statements[0]
        assert isinstance(stmt, ThrowStatement)
        assert isinstance(stmt.expression, NewExpression)
        assert stmt.expression.callee.name == "Error"

    def test_c_style_for(self, parser):
        source = "for (var s, i = 1, n = arguments.length; i < n; i++) {\n    s = arguments[i];\n}"
        stmt = parser.parse(source, "t.js").statements[0]
        assert isinstance(stmt, ForStatement)
        assert [d.name.name for d in stmt.initializer.declarations] == ["s", "i", "n"]
        assert stmt.condition.operator is BinaryOperator.LT
        assert isinstance(stmt.incrementor, UpdateExpression)
        assert stmt.incrementor.operator == "++"
        assert not stmt.incrementor.prefix

    def test_for_with_empty_header(self, parser):
        stmt = parser.parse("for (;;) break;", "t.js").statements[0]
        assert stmt.initializer is None
        assert stmt.condition is None
        assert stmt.incrementor is None
        assert isinstance(stmt.statement, BreakStatement)

    def test_for_with_expression_initializer(self, parser):
        stmt = parser.parse("for (i = 0; i < 3; --i) ;", "t.js").statements[0]
        assert isinstance(stmt.initializer, BinaryExpression)
        assert stmt.incrementor.prefix

    def test_for_of(self, parser):
        stmt = parser.parse("for (const x of items) use(x);", "t.js").statements[0]
        assert isinstance(stmt, ForInStatement)
        assert stmt.is_for_of
        assert stmt.initializer.kind is VariableKind.CONST

    def test_while_and_do(self, parser):
        unit = parser.parse("while (a) {\n    a--;\n}\ndo b(); while (c);", "t.js")
        assert isinstance(unit.statements[0], WhileStatement)
        loop = unit.statements[1]
        assert isinstance(loop, DoStatement)
        assert loop.condition.name == "c"

    def test_try_catch_finally(self, parser):
        source = "try {\n    f();\n} catch (e) {\n    g(e);\n} finally {\n    h();\n}"
        stmt = parser.parse(source, "t.js").statements[0]
        assert isinstance(stmt, TryStatement)
        assert stmt.catch_clause.variable.name == "e"
        assert stmt.finally_block.statements[0].expression.callee.name == "h"

    def test_try_variants(self, parser):
        unit = parser.parse("try {} catch (e) {}\ntry {} finally {}\ntry {} catch {}", "t.js")
        assert unit.statements[0].finally_block is None
        assert unit.statements[1].catch_clause is None
        assert unit.statements[2].catch_clause.variable is None

    def test_switch(self, parser):
        source = ("switch (op[0]) {\n    case 0: case 1: t = op; break;\n"
                  "    case 4: _.label++; return;\n    default: continue;\n}")
        stmt = parser.parse(source, "t.js").statements[0]
        assert isinstance(stmt, SwitchStatement)
        assert [len(c.statements) for c in stmt.clauses] == [0, 2, 2, 1]
        assert stmt.clauses[-1].expression is None
        assert isinstance(stmt.clauses[1].statements[1], BreakStatement)
        assert isinstance(stmt.clauses[3].statements[0], ContinueStatement)

    def test_statement_level_comma(self, parser):
        expr = _expr(parser, "a = 1, b = 2;")
        assert isinstance(expr, CommaListExpression)
        assert len(expr.elements) == 2


class TestFunctionsAndClasses:
    """Arrow functions and ES2015 classes."""

    def test_arrow_functions(self, parser):
        source = "const f = (a, b) => a + b;\nconst g = x => {\n    return x;\n};\nconst h = () => (0, y);"
        unit = parser.parse(source, "t.js")
        f = unit.statements[0].declarations[0].initializer
        assert isinstance(f, ArrowFunction)
        assert [p.name.name for p in f.parameters] == ["a", "b"]
        assert isinstance(f.body, BinaryExpression)
        g = unit.statements[1].declarations[0].initializer
        assert [p.name.name for p in g.parameters] == ["x"]
        assert isinstance(g.body, Block)
        h = unit.statements[2].declarations[0].initializer
        assert h.parameters == []
        assert isinstance(h.body, ParenthesizedExpression)

    def test_curried_arrow_argument(self, parser):
        expr = _expr(parser, "items.map(x => y => x + y);")
        arrow = expr.arguments[0]
        assert isinstance(arrow, ArrowFunction)
        assert isinstance(arrow.body, ArrowFunction)

    def test_class_declaration(self, parser):
        source = ("class Foo extends base_1.Bar {\n"
                  "    constructor(x) {\n        super(x);\n    }\n"
                  "    static create() {\n        return new Foo(1);\n    }\n"
                  "    get value() {\n        return this.x;\n    }\n"
                  "    set value(v) {\n        this.x = v;\n    }\n"
                  "}")
        cls = parser.parse(source, "t.js").statements[0]
        assert isinstance(cls, ClassDeclaration)
        assert cls.name.name == "Foo"
        assert isinstance(cls.heritage, PropertyAccess)
        assert [(m.kind, m.name, m.is_static) for m in cls.members] == [
            (MethodKind.METHOD, "constructor", False),
            (MethodKind.METHOD, "create", True),
            (MethodKind.GET, "value", False),
            (MethodKind.SET, "value", False),
        ]
        call = cls.members[0].body.statements[0].expression
        assert isinstance(call.callee, SuperExpression)

    def test_class_expression_and_fields(self, parser):
        unit = parser.parse("var A = class extends B {\n    static x = 1;\n    y;\n};\nclass C {\n}", "t.js")
        cls = unit.statements[0].declarations[0].initializer
        assert isinstance(cls, ClassExpression)
        assert cls.name is None
        assert cls.heritage.name == "B"
        field_x, field_y = cls.members
        assert isinstance(field_x, PropertyDeclaration)
        assert field_x.is_static
        assert field_y.initializer is None
        assert unit.statements[1].members == []

    def test_member_named_like_modifier(self, parser):
        cls = parser.parse("class A {\n    get() {}\n    static static() {}\n}", "t.js").statements[0]
        assert [(m.kind, m.name, m.is_static) for m in cls.members] == [
            (MethodKind.METHOD, "get", False),
            (MethodKind.METHOD, "static", True),
        ]

    def test_update_and_shorthand_property(self, parser):
        expr = _expr(parser, "x = { a, b: ++c };")
        shorthand, full = expr.right.properties
        assert isinstance(shorthand, ShorthandPropertyAssignment)
        assert shorthand.name.name == "a"
        assert isinstance(full.initializer, UpdateExpression)
        assert full.initializer.prefix

    def test_new_with_parenthesized_callee(self, parser):
        expr = _expr(parser, "x = new (P || (P = Promise))(function (resolve) {});")
        assert isinstance(expr.right, NewExpression)
        assert isinstance(expr.right.callee, ParenthesizedExpression)
        assert len(expr.right.arguments) == 1

    def test_comment_inside_class_attaches_to_member(self, parser):
        unit = parser.parse("class A {\n    // make one\n    static make() {}\n}", "t.js")
        member = unit.statements[0].members[0]
        assert [c.text for c in member.leading_comments] == ["// make one"]


class TestSyntaxErrors:
    """Unsupported or malformed input raises ParseError with a location."""

    def test_missing_semicolon(self, parser):
        with pytest.raises(ParseError) as exc_info:
            parser.parse("a()\nb();", "bad.js")
        assert exc_info.value.location is not None
        assert exc_info.value.location.file == "bad.js"

    def test_unexpected_character(self, parser):
        with pytest.raises(ParseError) as exc_info:
            parser.parse("var a = #;", "bad.js")
        assert "unexpected character" in exc_info.value.message

    def test_unexpected_end(self, parser):
        with pytest.raises(ParseError) as exc_info:
            parser.parse("f(", "bad.js")
        assert exc_info.value.message == "unexpected end of input"

    def test_arrow_parameter_must_be_name(self, parser):
        with pytest.raises(ParseError) as exc_info:
            parser.parse("var f = (a = 1) => a;", "bad.js")
        assert "arrow function parameters must be plain names" in exc_info.value.message
