"""
Source Location (Span)

Positions recorded by the parser and carried through the rewrite so that
synthesized statements keep the text range of the statement they replace.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """
    Source location of a node.

    - file, line, column of the first character (1-based line and column)
    - start/end character offsets into the source text
    - end_line/end_column of the last character
    - Immutable (frozen) so it can be shared between original and synthesized nodes
    """
    file: str
    line: int
    column: int
    start: int = 0
    end: int = 0
    end_line: int = 0
    end_column: int = 0

    def __str__(self) -> str:
        """Format as file:line:column"""
        return f"{self.file}:{self.line}:{self.column}"
