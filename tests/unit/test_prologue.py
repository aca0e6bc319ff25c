#!/usr/bin/env python3
"""
Tests for the goog.module prologue and its insertion point.
"""

from googmodule.backends.printer import print_node
from googmodule.passes.prologue import build_prologue, insert_prologue, prologue_insertion_index
from googmodule.shared.factory import create_not_emitted_statement


def _text(statements):
    return [print_node(s) for s in statements]


class TestBuildPrologue:

    def test_full_prologue(self):
        header = build_prologue("a.b", "a/b.js", es5_mode=False, has_exports_assignment=False)
        assert _text(header) == [
            "goog.module('a.b');",
            "var module = module || { id: 'a/b.js' };",
            "module = module;",
            "exports = {};",
        ]

    def test_exports_assignment_suppresses_exports_init(self):
        header = build_prologue("a.b", "a/b.js", es5_mode=False, has_exports_assignment=True)
        assert _text(header)[-1] == "module = module;"
        assert len(header) == 3

    def test_es5_mode(self):
        for has_exports in (False, True):
            header = build_prologue("a.b", "a/b.js", es5_mode=True, has_exports_assignment=has_exports)
            assert _text(header) == [
                "goog.module('a.b');",
                "var module = module || { id: 'a/b.js' };",
            ]

    def test_namespace_and_id_are_quoted(self):
        header = build_prologue("x.y", "it's.js", es5_mode=True, has_exports_assignment=False)
        assert _text(header)[1] == "var module = module || { id: 'it\\'s.js' };"


class TestInsertion:

    def _placeholder(self, parser, source):
        return create_not_emitted_statement(parser.parse(source, "t.js").statements[0])

    def test_inserted_at_front_without_placeholders(self, parser):
        body = parser.parse("a();", "t.js").statements
        header = build_prologue("a.b", "a/b.js", True, False)
        result = insert_prologue(body, header)
        assert result[:2] == header
        assert result[2] is body[0]

    def test_inserted_after_all_leading_placeholders(self, parser):
        first = self._placeholder(parser, "'use strict';")
        second = self._placeholder(parser, "'use strict';")
        body = [first, second] + parser.parse("a();", "t.js").statements
        assert prologue_insertion_index(body) == 2
        header = build_prologue("a.b", "a/b.js", True, False)
        result = insert_prologue(body, header)
        assert result[0] is first and result[1] is second
        assert result[2] is header[0]

    def test_placeholders_after_code_do_not_count(self, parser):
        body = parser.parse("a();", "t.js").statements + [self._placeholder(parser, "'use strict';")]
        assert prologue_insertion_index(body) == 0

    def test_empty_body(self):
        header = build_prologue("a.b", "a/b.js", True, False)
        assert insert_prologue([], header) == header
