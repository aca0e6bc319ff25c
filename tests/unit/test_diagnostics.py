#!/usr/bin/env python3
"""
Tests for diagnostics: the error reporter's rendering and the exception types.
"""

import re

from googmodule.frontend.parser import ParseError
from googmodule.shared.errors import (
    Error, ErrorReporter, GoogModuleError, GoogModuleImplementationError, GoogModuleSourceError,
)
from googmodule.shared.source_location import SourceLocation

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def _strip_ansi(text: str) -> str:
    return _ANSI_ESCAPE.sub("", text)


class TestErrorReporterFormatting:
    """Rendering edge cases."""

    def test_location_none(self):
        err = Error(message="something failed", location=None, code="GM0002")
        out = ErrorReporter({}).format_error(err, color=False)
        assert "error[GM0002]" in out
        assert "something failed" in out
        assert "unknown location" in out

    def test_file_not_in_source_files(self):
        loc = SourceLocation(file="missing.js", line=1, column=1)
        out = ErrorReporter({}).format_error(Error(message="oops", location=loc), color=False)
        assert "missing.js:1:1" in out

    def test_line_beyond_source(self):
        loc = SourceLocation(file="x.js", line=10, column=1)
        out = ErrorReporter({"x.js": "a();\nb();\n"}).format_error(Error(message="bad", location=loc), color=False)
        assert " --> x.js:10:1" in out

    def test_source_line_and_caret(self):
        loc = SourceLocation(file="f.js", line=1, column=9, end_line=1, end_column=16)
        err = Error(message="unexpected token", location=loc, label="here", help="add a ';'")
        out = ErrorReporter({"f.js": "var a = require;"}).format_error(err, color=False)
        assert "1 | var a = require;" in out
        assert "^^^^^^^ here" in out
        assert "= help: add a ';'" in out

    def test_color_codes_only_when_requested(self):
        err = Error(message="m", location=None)
        reporter = ErrorReporter({})
        assert "\x1b[" not in reporter.format_error(err, color=False)
        colored = reporter.format_error(err, color=True)
        assert "\x1b[" in colored
        assert _strip_ansi(colored) == reporter.format_error(err, color=False)


class TestErrorReporterCollection:

    def test_warnings_do_not_count_as_errors(self):
        reporter = ErrorReporter()
        reporter.report_warning("careful", None)
        assert not reporter.has_errors()
        reporter.report_error("broken", None)
        assert reporter.error_count() == 1

    def test_summary(self):
        reporter = ErrorReporter()
        reporter.report_error("one", None)
        reporter.report_error("two", None)
        out = reporter.format_all_errors(color=False)
        assert out.endswith("aborting due to 2 previous errors")

    def test_report_exception_keeps_code_and_help(self):
        reporter = ErrorReporter()
        exc = GoogModuleSourceError("bad input", None, error_code="GM0003", help="fix it")
        reporter.report_exception(exc)
        error = reporter.errors[0]
        assert (error.message, error.code, error.help) == ("bad input", "GM0003", "fix it")

    def test_report_plain_error(self):
        reporter = ErrorReporter()
        reporter.report_exception(GoogModuleError("plain"))
        assert reporter.errors[0].code is None


class TestExceptions:

    def test_source_error_renders_snippet(self):
        loc = SourceLocation(file="a.js", line=1, column=5)
        exc = ParseError("unexpected token 'x'", "a.js", loc, source_code="foo x;")
        text = _strip_ansi(str(exc))
        assert "error[GM0001]: unexpected token 'x'" in text
        assert "1 | foo x;" in text
        assert exc.source_file == "a.js"

    def test_plain_error_str(self):
        loc = SourceLocation(file="a.js", line=2, column=3)
        assert str(GoogModuleError("msg", loc)) == "msg\n --> a.js:2:3"
        assert str(GoogModuleError("msg")) == "msg"

    def test_implementation_error(self):
        assert str(GoogModuleImplementationError("bug")) == "[GM9999] bug"
