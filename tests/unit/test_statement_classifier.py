#!/usr/bin/env python3
"""
Tests for the statement classifier: one verdict per top-level CommonJS shape.
"""

import pytest

from googmodule.passes.statement_classifier import (
    StatementKind, classify_statement, extract_goog_namespace_import, extract_require,
    has_exports_assignment, is_es_module_property,
)


def _classify(parser, source: str):
    return classify_statement(parser.parse(source, "t.js").statements[0])


class TestClassification:
    """Recognized shapes."""

    @pytest.mark.parametrize("source", ['"use strict";', "'use strict';"])
    def test_use_strict(self, parser, source):
        assert _classify(parser, source).kind is StatementKind.USE_STRICT

    def test_es_module_marker(self, parser):
        verdict = _classify(parser, 'Object.defineProperty(exports, "__esModule", { value: true });')
        assert verdict.kind is StatementKind.ES_MODULE_MARKER

    def test_module_exports_assignment(self, parser):
        assert _classify(parser, "module.exports = Foo;").kind is StatementKind.MODULE_EXPORTS_ASSIGNMENT

    def test_exports_assignment(self, parser):
        assert _classify(parser, "exports = Foo;").kind is StatementKind.EXPORTS_ASSIGNMENT

    def test_side_effect_require(self, parser):
        verdict = _classify(parser, "require('./x');")
        assert verdict.kind is StatementKind.SIDE_EFFECT_REQUIRE
        assert verdict.specifier == "./x"
        assert verdict.is_require

    def test_aliased_require(self, parser):
        verdict = _classify(parser, "var x_1 = require('./x');")
        assert verdict.kind is StatementKind.ALIASED_REQUIRE
        assert verdict.specifier == "./x"
        assert verdict.declared_name.name == "x_1"

    @pytest.mark.parametrize("source", [
        "const x_1 = require('./x');",
        "let x_1 = require('./x');",
    ])
    def test_aliased_require_any_declaration_kind(self, parser, source):
        assert _classify(parser, source).kind is StatementKind.ALIASED_REQUIRE

    @pytest.mark.parametrize("helper", ["__exportStar", "__export"])
    def test_export_star(self, parser, helper):
        verdict = _classify(parser, f"{helper}(require('./x'), exports);")
        assert verdict.kind is StatementKind.EXPORT_STAR_REQUIRE
        assert verdict.specifier == "./x"
        assert verdict.wrapper.callee.name == helper

    def test_goog_specifier_is_still_a_require(self, parser):
        verdict = _classify(parser, "var Foo = require('goog:some.Foo');")
        assert verdict.kind is StatementKind.ALIASED_REQUIRE
        assert verdict.specifier == "goog:some.Foo"


class TestUnrecognized:
    """Shapes that must pass through untouched."""

    @pytest.mark.parametrize("source", [
        "var a = require('x'), b = 1;",
        "var { a } = require('x');",
        "var a;",
        "var a = foo('x');",
        "require('');",
        "require(x);",
        "require('a', 'b');",
        "require('a').b;",
        "tslib_1.__exportStar(require('./x'), exports);",
        "__exportStar(foo, exports);",
        "__exportStar();",
        "module.exports.x = 1;",
        "exports.x = 1;",
        "exports += 1;",
        "('use strict');",
        'Object.defineProperty(exports, "__esModule", { value: false });',
        'Object.defineProperty(exports, "other", { value: true });',
        "function f() { require('x'); }",
        "if (a) require('x');",
        "import Foo from './foo';",
    ])
    def test_unrecognized(self, parser, source):
        assert _classify(parser, source).kind is StatementKind.UNRECOGNIZED

    def test_es_module_marker_with_extra_property(self, parser):
        stmt = parser.parse('Object.defineProperty(exports, "__esModule", { value: true, x: 1 });', "t.js").statements[0]
        assert not is_es_module_property(stmt)


class TestHelpers:
    """Specifier helpers."""

    def test_extract_goog_namespace_import(self):
        assert extract_goog_namespace_import("goog:foo.Bar") == "foo.Bar"
        assert extract_goog_namespace_import("./goog:foo") is None
        assert extract_goog_namespace_import("foo") is None

    def test_extract_require_ignores_non_calls(self, parser):
        expr = parser.parse("x;", "t.js").statements[0].expression
        assert extract_require(expr) is None
        assert extract_require(None) is None

    def test_has_exports_assignment_top_level_only(self, parser):
        top = parser.parse("a();\nexports = X;", "t.js").statements
        nested = parser.parse("if (a) {\n    exports = X;\n}", "t.js").statements
        module_exports = parser.parse("module.exports = X;", "t.js").statements
        assert has_exports_assignment(top)
        assert not has_exports_assignment(nested)
        assert has_exports_assignment(module_exports)
