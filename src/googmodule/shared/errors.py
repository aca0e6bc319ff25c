"""
Error Reporting

Diagnostics are rendered rustc-style: a header line, an arrow to the location,
the offending source line with a caret underline, and optional help/note lines.

The rewrite itself never raises on unexpected input shapes; these types serve
the parser, the module resolver, the driver and the CLI.
"""

import os
import sys
from dataclasses import dataclass
from typing import Optional, List, Dict
from .source_location import SourceLocation


# ---------------------------------------------------------------------------
# ANSI color helpers (disabled when NO_COLOR is set or GOOGMODULE_COLOR says so)
# ---------------------------------------------------------------------------

def _use_color() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    explicit = os.environ.get("GOOGMODULE_COLOR", "").lower()
    if explicit in ("0", "false", "no", "never"):
        return False
    if explicit in ("1", "true", "yes", "always"):
        return True
    return sys.stderr.isatty()

_BOLD   = "\033[1m"
_RED    = "\033[31m"
_YELLOW = "\033[33m"
_BLUE   = "\033[34m"
_CYAN   = "\033[36m"
_RESET  = "\033[0m"

def _style(text: str, *codes: str, color: bool = True) -> str:
    if not color:
        return text
    prefix = "".join(codes)
    return f"{prefix}{text}{_RESET}" if prefix else text


# ---------------------------------------------------------------------------
# Error dataclass
# ---------------------------------------------------------------------------

@dataclass
class Error:
    """
    One diagnostic.

    level is "error" or "warning"; warnings do not make a compilation fail.
    """
    message: str
    location: Optional[SourceLocation]
    code: Optional[str] = None
    help: Optional[str] = None
    note: Optional[str] = None
    label: Optional[str] = None
    level: str = "error"

    @property
    def is_error(self) -> bool:
        return self.level == "error"


# ---------------------------------------------------------------------------
# Formatting engine
# ---------------------------------------------------------------------------

def _format_diagnostic(
    error: Error,
    source_files: Dict[str, str],
    color: bool = False,
) -> str:
    """
    Render a single diagnostic.

    Example output (plain, no color)::

        error[GM0001]: unexpected token ')'
         --> lib/a.js:3:17
          |
        3 | var a = require();
          |                 ^ expected an expression
          |
          = help: check for a missing argument
    """
    out: List[str] = []
    level_color = _RED if error.is_error else _YELLOW

    code_str = f"[{error.code}]" if error.code else ""
    out.append(
        _style(f"{error.level}{code_str}", _BOLD, level_color, color=color)
        + _style(f": {error.message}", _BOLD, color=color)
    )

    loc = error.location
    if loc is None:
        out.append(_style(" --> ", _BOLD, _BLUE, color=color) + "<unknown location>")
        _append_annotations(out, error, 1, color)
        return "\n".join(out)

    source = source_files.get(loc.file)
    src_lines = source.split("\n") if source is not None else []
    if not 0 < loc.line <= len(src_lines):
        out.append(_style(" --> ", _BOLD, _BLUE, color=color) + str(loc))
        _append_annotations(out, error, 1, color)
        return "\n".join(out)

    gw = len(str(loc.line))
    code_line = src_lines[loc.line - 1]
    col_start = max(loc.column, 1) - 1
    if loc.end_line == loc.line and loc.end_column > loc.column:
        span_len = loc.end_column - loc.column
    else:
        span_len = _guess_span(code_line, col_start)

    gutter = _style(" " * (gw + 1) + "|", _BOLD, _BLUE, color=color)
    out.append(_style(" " * gw + "--> ", _BOLD, _BLUE, color=color) + str(loc))
    out.append(gutter)
    out.append(_style(str(loc.line).rjust(gw) + " | ", _BOLD, _BLUE, color=color) + code_line)
    label_suffix = f" {error.label}" if error.label else ""
    carets = " " * col_start + "^" * max(1, span_len) + label_suffix
    out.append(_style(" " * (gw + 1) + "| ", _BOLD, _BLUE, color=color)
               + _style(carets, _BOLD, level_color, color=color))

    _append_annotations(out, error, gw, color)
    return "\n".join(out)


def _guess_span(code_line: str, col_start: int) -> int:
    """Guess token length when end_column is unavailable."""
    if col_start >= len(code_line):
        return 1
    length = 0
    for ch in code_line[col_start:]:
        if ch in (" ", "\t", ";", ",", "(", ")", "]", "}"):
            break
        length += 1
    return max(1, length)


def _append_annotations(out: List[str], error: Error, gw: int, color: bool) -> None:
    if not (error.help or error.note):
        return
    pad = " " * (gw + 1)
    out.append(_style(pad + "|", _BOLD, _BLUE, color=color))
    for title, text in (("help", error.help), ("note", error.note)):
        if text:
            out.append(
                _style(f"{pad}= ", _BOLD, _CYAN, color=color)
                + _style(f"{title}: ", _BOLD, color=color)
                + text
            )


# ---------------------------------------------------------------------------
# ErrorReporter
# ---------------------------------------------------------------------------

class ErrorReporter:
    """Collects diagnostics for a run and renders them to stderr."""

    def __init__(self, source_files: Optional[Dict[str, str]] = None):
        self.source_files: Dict[str, str] = dict(source_files or {})
        self.errors: List[Error] = []

    def add_source(self, file_name: str, source: str) -> None:
        self.source_files[file_name] = source

    def report_error(
        self,
        message: str,
        location: Optional[SourceLocation],
        code: Optional[str] = None,
        help: Optional[str] = None,
        note: Optional[str] = None,
        label: Optional[str] = None,
    ) -> None:
        self.errors.append(Error(message=message, location=location, code=code,
                                 help=help, note=note, label=label))

    def report_warning(
        self,
        message: str,
        location: Optional[SourceLocation],
        code: Optional[str] = None,
        help: Optional[str] = None,
    ) -> None:
        self.errors.append(Error(message=message, location=location, code=code,
                                 help=help, level="warning"))

    def report_exception(self, exc: 'GoogModuleError') -> None:
        """Record a raised GoogModuleError as a diagnostic."""
        self.errors.append(Error(
            message=exc.message,
            location=exc.location,
            code=getattr(exc, "error_code", None),
            help=getattr(exc, "help_text", None),
            note=getattr(exc, "note_text", None),
            label=getattr(exc, "label_text", None),
        ))

    def format_error(self, error: Error, color: Optional[bool] = None) -> str:
        use_color = color if color is not None else _use_color()
        return _format_diagnostic(error, self.source_files, color=use_color)

    def error_count(self) -> int:
        return sum(1 for e in self.errors if e.is_error)

    def has_errors(self) -> bool:
        return self.error_count() > 0

    def _summary(self, color: bool) -> str:
        count = self.error_count()
        summary = f"aborting due to {count} previous error{'s' if count != 1 else ''}"
        return _style("error", _BOLD, _RED, color=color) + _style(f": {summary}", _BOLD, color=color)

    def format_all_errors(self, color: Optional[bool] = None) -> str:
        use_color = color if color is not None else _use_color()
        parts = [self.format_error(e, color=use_color) for e in self.errors]
        if self.has_errors():
            parts.append(self._summary(use_color))
        return "\n\n".join(parts)

    def print_errors(self) -> None:
        color = _use_color()
        for error in self.errors:
            print(self.format_error(error, color=color), file=sys.stderr)
        if self.has_errors():
            print(f"\n{self._summary(color)}", file=sys.stderr)


# ============================================================================
# Exception Classes
# ============================================================================

class GoogModuleError(Exception):
    """Base exception for all googmodule errors"""
    def __init__(self, message: str, location: Optional[SourceLocation] = None):
        super().__init__(message)
        self.message = message
        self.location = location

    def __str__(self):
        if self.location:
            return f"{self.message}\n --> {self.location}"
        return self.message


class GoogModuleSourceError(GoogModuleError):
    """
    Error in an input JavaScript file, rendered with its source snippet.

    Use this for problems with what the user handed us:
    - syntax the parser does not accept
    - require() specifiers that cannot be resolved
    """
    def __init__(self,
                 message: str,
                 location: Optional[SourceLocation] = None,
                 error_code: str = "GM0001",
                 source_code: Optional[str] = None,
                 help: Optional[str] = None,
                 note: Optional[str] = None,
                 label: Optional[str] = None):
        super().__init__(message, location)
        self.error_code = error_code
        self.source_code = source_code
        self.help_text = help
        self.note_text = note
        self.label_text = label

    def __str__(self):
        source_files: Dict[str, str] = {}
        if self.source_code is not None and self.location:
            source_files[self.location.file] = self.source_code
        err = Error(
            message=self.message,
            location=self.location,
            code=self.error_code,
            help=self.help_text,
            note=self.note_text,
            label=self.label_text,
        )
        return _format_diagnostic(err, source_files, color=_use_color())


class GoogModuleImplementationError(Exception):
    """
    Internal error (a bug in googmodule, not in the input).

    Never use this for problems in the user's JavaScript - use GoogModuleSourceError instead.
    """
    def __init__(self, message: str, error_code: str = "GM9999"):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self):
        return f"[{self.error_code}] {self.message}"
