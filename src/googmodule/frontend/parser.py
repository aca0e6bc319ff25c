"""
Parser

Source text -> SourceUnit, with comments re-attached to the statements they precede.
"""

from bisect import bisect_left
from dataclasses import fields
from typing import Any, List, Optional
from pathlib import Path
from lark import Lark, Token
from lark.exceptions import UnexpectedInput, UnexpectedToken, UnexpectedCharacters, VisitError
import logging

from ..shared.nodes import (
    ASTNode, Comment, ForInStatement, ForStatement, NotEmittedStatement, SourceUnit, Statement,
)
from ..shared.source_location import SourceLocation
from ..shared.errors import GoogModuleSourceError
from .transformers.base import GoogModuleTransformer

logger = logging.getLogger(__name__)


class ParseError(GoogModuleSourceError):
    """Parse error with source location"""
    def __init__(self, message: str, source_file: str, location: Optional[SourceLocation] = None,
                 source_code: Optional[str] = None, help: Optional[str] = None):
        super().__init__(message, location, error_code="GM0001", source_code=source_code, help=help)
        self.source_file = source_file


class Parser:
    """
    Parser for the JavaScript subset of TypeScript's CommonJS emit.

    - Takes source code, returns a SourceUnit
    - Preserves source locations
    - Collects comments through a lexer callback and attaches them as leading
      comments of the following statement
    """

    def __init__(self):
        grammar_path = Path(__file__).parent / "grammar.lark"
        self._comments: List[Token] = []
        self.parser = Lark.open(
            str(grammar_path),
            start='source_unit',
            parser='lalr',
            propagate_positions=True,
            maybe_placeholders=False,
            lexer_callbacks={'COMMENT': self._comments.append},
        )
        self.transformer = GoogModuleTransformer()

    def parse(self, source: str, source_file: str = "main.js") -> SourceUnit:
        """Parse source code to a SourceUnit. Raises ParseError."""
        self._comments.clear()
        self.transformer.current_file = source_file
        try:
            tree = self.parser.parse(source)
            unit = self.transformer.transform(tree)
        except UnexpectedInput as e:
            raise self._convert_error(e, source, source_file) from e
        except VisitError as e:
            raise ParseError(f"cannot build syntax tree: {e.orig_exc}", source_file,
                             source_code=source) from e.orig_exc

        comments = [self._comment(tok, source_file) for tok in self._comments]
        _attach_comments(unit, comments)
        logger.debug(f"Parsed {source_file}: {len(unit.statements)} statements, {len(comments)} comments")
        return unit

    @staticmethod
    def _comment(token: Token, source_file: str) -> Comment:
        return Comment(str(token), SourceLocation(
            file=source_file,
            line=token.line,
            column=token.column,
            start=token.start_pos,
            end=token.end_pos,
            end_line=token.end_line,
            end_column=token.end_column,
        ))

    @staticmethod
    def _convert_error(e: UnexpectedInput, source: str, source_file: str) -> ParseError:
        location = None
        line = getattr(e, 'line', -1)
        column = getattr(e, 'column', -1)
        if isinstance(line, int) and line > 0:
            location = SourceLocation(file=source_file, line=line, column=column)

        help_text = None
        if isinstance(e, UnexpectedToken):
            if e.token.type == '$END':
                message = "unexpected end of input"
            else:
                message = f"unexpected token {str(e.token)!r}"
            expected = sorted(e.expected)
            if expected:
                help_text = f"expected one of: {', '.join(expected[:8])}"
        elif isinstance(e, UnexpectedCharacters):
            message = f"unexpected character {e.char!r}"
        else:
            message = "unexpected end of input"
        return ParseError(message, source_file, location, source_code=source, help=help_text)


# -----------------------------------------------------------------------------
# Comment attachment
# -----------------------------------------------------------------------------

def _collect_statements(node: Any, out: List[Statement]) -> None:
    if isinstance(node, list):
        for item in node:
            _collect_statements(item, out)
        return
    if not isinstance(node, ASTNode):
        return
    if isinstance(node, Statement):
        out.append(node)
    for f in fields(node):
        # Loop headers print inline, so their declarations take no comments
        if isinstance(node, (ForInStatement, ForStatement)) and f.name == 'initializer':
            continue
        _collect_statements(getattr(node, f.name), out)


def _attach_comments(unit: SourceUnit, comments: List[Comment]) -> None:
    """
    Attach each comment to the first statement starting after it.

    Comments after the last statement become unit.trailing_comments. Comments at
    the top of the file that are separated from the first statement by a blank
    line become a leading NotEmittedStatement (the detached file header).
    """
    statements: List[Statement] = []
    _collect_statements(unit.statements, statements)
    statements.sort(key=lambda s: s.location.start)
    starts = [s.location.start for s in statements]

    for comment in comments:
        i = bisect_left(starts, comment.location.end)
        if i < len(statements):
            statements[i].leading_comments.append(comment)
        else:
            unit.trailing_comments.append(comment)

    if not unit.statements:
        if unit.trailing_comments:
            header = NotEmittedStatement(location=unit.trailing_comments[0].location)
            header.leading_comments = unit.trailing_comments
            unit.trailing_comments = []
            unit.statements.append(header)
        return

    first = unit.statements[0]
    leading = first.leading_comments
    split = 0
    for i, comment in enumerate(leading):
        next_line = leading[i + 1].location.line if i + 1 < len(leading) else first.location.line
        if next_line - comment.location.end_line > 1:
            split = i + 1
    if split:
        header = NotEmittedStatement(location=leading[0].location)
        header.leading_comments = leading[:split]
        first.leading_comments = leading[split:]
        unit.statements.insert(0, header)
